"""Saved replies module.

Defines the shape of a reply a user keeps and the repository interface
the hosting application implements to store it.

Public API:
    SavedReply: A reply the user chose to keep.
    ReplyRepository: Storage interface.
    InMemoryReplyRepository: Dict-backed implementation for tests.
    ReplyStoreError: Base exception for module errors.
    ReplyNotFoundError: Raised for unknown reply IDs.
    ReplyAccessError: Raised when a user touches another user's reply.
"""

from .exceptions import ReplyAccessError, ReplyNotFoundError, ReplyStoreError
from .models import SavedReply
from .repository import InMemoryReplyRepository, ReplyRepository

__all__ = [
    "SavedReply",
    "ReplyRepository",
    "InMemoryReplyRepository",
    "ReplyStoreError",
    "ReplyNotFoundError",
    "ReplyAccessError",
]
