"""Exceptions for the saved replies module."""


class ReplyStoreError(Exception):
    """Base exception for saved reply storage errors."""

    pass


class ReplyNotFoundError(ReplyStoreError):
    """Raised when a saved reply ID does not exist."""

    def __init__(self, reply_id: int):
        self.reply_id = reply_id
        super().__init__(f"Reply not found with ID: {reply_id}")


class ReplyAccessError(ReplyStoreError):
    """Raised when a user touches a saved reply owned by someone else."""

    def __init__(self, reply_id: int, user_id: int):
        self.reply_id = reply_id
        self.user_id = user_id
        super().__init__(
            f"Access denied: reply {reply_id} belongs to a different user than {user_id}"
        )
