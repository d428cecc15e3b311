"""Data models for the reply generator module."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

DEFAULT_LANGUAGE = "en"


def _optional_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def _parse_bool(value: Any) -> bool:
    """Read a boolean flag, treating "false", "0", "no" and "" as False."""
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes", "on")
    return bool(value)


class ReplyMode(Enum):
    """How many reply drafts a generation request asks for."""

    SINGLE = "single"
    MULTI = "multi"


@dataclass(frozen=True)
class GenerationRequest:
    """An inbound email to draft replies for.

    Attributes:
        subject: Subject line of the original email (may be empty).
        body: Content of the original email (may be empty).
        tone: Desired tone, e.g. "professional" or "casual". Optional.
        language: Target language code, e.g. "en" or "fr". Optional,
            blank values resolve to "en".
        mode: Single reply or three reply variations.
        regenerate: Ask for fresh variations (multi mode only).
    """

    subject: str = ""
    body: str = ""
    tone: Optional[str] = None
    language: Optional[str] = None
    mode: ReplyMode = ReplyMode.MULTI
    regenerate: bool = False

    @property
    def resolved_language(self) -> str:
        """Target language, falling back to English when absent or blank."""
        if self.language is None or not self.language.strip():
            return DEFAULT_LANGUAGE
        return self.language

    @property
    def has_tone(self) -> bool:
        """Whether a non-blank tone was supplied."""
        return self.tone is not None and bool(self.tone.strip())

    def to_dict(self) -> dict[str, Any]:
        """Serialize request to dictionary."""
        return {
            "subject": self.subject,
            "body": self.body,
            "tone": self.tone,
            "language": self.language,
            "mode": self.mode.value,
            "regenerate": self.regenerate,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GenerationRequest":
        """Deserialize request from dictionary.

        Accepts ``emailContent`` as an alias for ``body``, treats null
        subject/body as empty strings, converts non-string values to
        strings, and reads string flags like "false" as booleans.

        Args:
            data: Dictionary containing request fields.

        Returns:
            GenerationRequest instance.
        """
        mode_str = data.get("mode") or ReplyMode.MULTI.value
        try:
            mode = ReplyMode(mode_str)
        except ValueError:
            mode = ReplyMode.MULTI

        body = data.get("body")
        if body is None:
            body = data.get("emailContent")

        return cls(
            subject=str(data.get("subject") or ""),
            body=str(body or ""),
            tone=_optional_str(data.get("tone")),
            language=_optional_str(data.get("language")),
            mode=mode,
            regenerate=_parse_bool(data.get("regenerate", False)),
        )


@dataclass(frozen=True)
class SamplingConfig:
    """Generation parameters sent alongside the prompt.

    Attributes:
        temperature: Sampling temperature.
        max_output_tokens: Upper bound on generated tokens.
        top_p: Nucleus sampling threshold.
        top_k: Top-k sampling cutoff.
    """

    temperature: float
    max_output_tokens: int
    top_p: float
    top_k: int = 40

    @classmethod
    def for_mode(cls, mode: ReplyMode, regenerate: bool = False) -> "SamplingConfig":
        """Pick the sampling parameters for a generation mode.

        Single replies run cooler with a smaller budget; regenerated
        variations run hotter than the first pass.
        """
        if mode is ReplyMode.SINGLE:
            return cls(temperature=0.7, max_output_tokens=1024, top_p=0.8)
        temperature = 0.9 if regenerate else 0.75
        return cls(temperature=temperature, max_output_tokens=2048, top_p=0.95)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the provider's ``generationConfig`` shape."""
        return {
            "temperature": self.temperature,
            "maxOutputTokens": self.max_output_tokens,
            "topP": self.top_p,
            "topK": self.top_k,
        }


@dataclass
class SingleReplyResult:
    """One drafted reply plus a summary of the original email.

    Attributes:
        summary: Short summary of the original email. Never empty.
        reply: Reply body. Never empty unless the model returned nothing.
    """

    summary: str
    reply: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize result to dictionary."""
        return {
            "summary": self.summary,
            "reply": self.reply,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SingleReplyResult":
        """Deserialize result from dictionary."""
        return cls(
            summary=data.get("summary", ""),
            reply=data.get("reply", ""),
        )


@dataclass
class MultiReplyResult:
    """Three drafted reply variations plus a summary of the original email.

    Attributes:
        summary: Short summary (at most 200 characters). Never empty.
        replies: Exactly three reply bodies, in the order the model
            produced them.
    """

    summary: str
    replies: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Serialize result to dictionary."""
        return {
            "summary": self.summary,
            "replies": list(self.replies),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MultiReplyResult":
        """Deserialize result from dictionary."""
        return cls(
            summary=data.get("summary", ""),
            replies=list(data.get("replies", [])),
        )
