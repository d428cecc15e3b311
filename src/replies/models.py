"""Saved reply data model."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Union

from src.generator import GenerationRequest, MultiReplyResult, SingleReplyResult


@dataclass
class SavedReply:
    """A generated reply the user chose to keep.

    Attributes:
        user_id: Owner of the reply.
        subject: Subject of the original email.
        body: Content of the original email.
        reply_text: The reply body that was saved.
        summary: Summary generated alongside the reply.
        tone: Tone the reply was generated with, if any.
        id: Storage ID, assigned by the repository on save.
        created_at: When the reply was saved.
        is_favorite: Whether the user starred the reply.
    """

    user_id: int
    subject: str
    body: str
    reply_text: str
    summary: str
    tone: Optional[str] = None
    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.now)
    is_favorite: bool = False

    def matches(self, term: str) -> bool:
        """Case-insensitive search across subject, email body and reply."""
        needle = term.lower()
        return any(
            needle in (text or "").lower()
            for text in (self.subject, self.body, self.reply_text)
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize saved reply to dictionary."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "subject": self.subject,
            "body": self.body,
            "tone": self.tone,
            "reply_text": self.reply_text,
            "summary": self.summary,
            "created_at": self.created_at.isoformat(),
            "is_favorite": self.is_favorite,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SavedReply":
        """Deserialize saved reply from dictionary."""
        created_at = data.get("created_at")
        return cls(
            id=data.get("id"),
            user_id=data["user_id"],
            subject=data.get("subject", ""),
            body=data.get("body", ""),
            tone=data.get("tone"),
            reply_text=data["reply_text"],
            summary=data.get("summary", ""),
            created_at=datetime.fromisoformat(created_at) if created_at else datetime.now(),
            is_favorite=bool(data.get("is_favorite", False)),
        )

    @classmethod
    def from_result(
        cls,
        user_id: int,
        request: GenerationRequest,
        result: Union[SingleReplyResult, MultiReplyResult],
        reply_index: int = 0,
    ) -> "SavedReply":
        """Build a saved reply from a generation result.

        Args:
            user_id: Owner of the reply.
            request: The request the result was generated for.
            result: Generation result to save from.
            reply_index: Which variation to keep, for multi-reply results.

        Raises:
            IndexError: reply_index is out of range for a multi-reply result.
        """
        if isinstance(result, MultiReplyResult):
            if not 0 <= reply_index < len(result.replies):
                raise IndexError(
                    f"reply_index {reply_index} out of range for {len(result.replies)} replies"
                )
            reply_text = result.replies[reply_index]
        else:
            reply_text = result.reply

        return cls(
            user_id=user_id,
            subject=request.subject,
            body=request.body,
            tone=request.tone,
            reply_text=reply_text,
            summary=result.summary,
        )
