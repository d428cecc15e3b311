"""Repository interfaces for storing saved replies."""

import logging
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Optional

from .exceptions import ReplyAccessError, ReplyNotFoundError
from .models import SavedReply

logger = logging.getLogger(__name__)


class ReplyRepository(ABC):
    """Interface for persisting replies a user saved.

    The generator never persists anything itself; callers that keep
    generated replies do so through an implementation of this interface.

    Implementations can use different backends:
    - InMemoryReplyRepository: For testing and local runs
    - A relational store owned by the hosting application
    """

    @abstractmethod
    def save(self, reply: SavedReply) -> SavedReply:
        """Persist a reply and return it with its assigned ID."""
        pass

    @abstractmethod
    def get(self, reply_id: int) -> SavedReply:
        """Fetch a reply by ID.

        Raises:
            ReplyNotFoundError: No reply with this ID.
        """
        pass

    @abstractmethod
    def list_for_user(self, user_id: int, favorites_only: bool = False) -> list[SavedReply]:
        """List a user's replies, newest first."""
        pass

    @abstractmethod
    def search(
        self, user_id: int, term: str, tone: Optional[str] = None
    ) -> list[SavedReply]:
        """Search a user's replies by text, optionally restricted to a tone."""
        pass

    @abstractmethod
    def toggle_favorite(self, reply_id: int, user_id: int) -> SavedReply:
        """Flip the favorite flag on a reply the user owns.

        Raises:
            ReplyNotFoundError: No reply with this ID.
            ReplyAccessError: The reply belongs to another user.
        """
        pass

    @abstractmethod
    def delete(self, reply_id: int, user_id: int) -> None:
        """Delete a reply the user owns.

        Raises:
            ReplyNotFoundError: No reply with this ID.
            ReplyAccessError: The reply belongs to another user.
        """
        pass


class InMemoryReplyRepository(ReplyRepository):
    """Dict-backed implementation for testing and local runs.

    Replies are lost when the process exits.
    """

    def __init__(self) -> None:
        self._replies: dict[int, SavedReply] = {}
        self._next_id = 1

    def save(self, reply: SavedReply) -> SavedReply:
        saved = replace(reply, id=self._next_id)
        self._replies[saved.id] = saved
        self._next_id += 1
        logger.info("Reply saved with ID %d for user %s", saved.id, saved.user_id)
        return saved

    def get(self, reply_id: int) -> SavedReply:
        try:
            return self._replies[reply_id]
        except KeyError:
            raise ReplyNotFoundError(reply_id) from None

    def _get_owned(self, reply_id: int, user_id: int) -> SavedReply:
        reply = self.get(reply_id)
        if reply.user_id != user_id:
            raise ReplyAccessError(reply_id, user_id)
        return reply

    def list_for_user(self, user_id: int, favorites_only: bool = False) -> list[SavedReply]:
        replies = [
            r for r in self._replies.values()
            if r.user_id == user_id and (r.is_favorite or not favorites_only)
        ]
        # Newest first; IDs break ties between replies saved in the same instant
        return sorted(replies, key=lambda r: (r.created_at, r.id), reverse=True)

    def search(
        self, user_id: int, term: str, tone: Optional[str] = None
    ) -> list[SavedReply]:
        logger.debug("Searching replies for user %s with term %r and tone %r", user_id, term, tone)
        return [
            r for r in self.list_for_user(user_id)
            if r.matches(term) and (not tone or r.tone == tone)
        ]

    def toggle_favorite(self, reply_id: int, user_id: int) -> SavedReply:
        reply = self._get_owned(reply_id, user_id)
        reply.is_favorite = not reply.is_favorite
        logger.debug("Toggled favorite to %s for reply %d", reply.is_favorite, reply_id)
        return reply

    def delete(self, reply_id: int, user_id: int) -> None:
        self._get_owned(reply_id, user_id)
        del self._replies[reply_id]
        logger.info("Reply %d deleted by user %s", reply_id, user_id)

    def clear(self) -> None:
        """Remove all replies. Useful for testing."""
        self._replies.clear()
        self._next_id = 1
