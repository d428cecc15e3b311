"""Parsing of LLM responses into reply generation results.

Parsing happens in two stages:

1. ``extract_text`` pulls the generated text out of the provider's JSON
   envelope (``candidates[0].content.parts[0].text``), falling back to a
   top-level ``output`` field and finally to the raw body.
2. ``decode_multi`` / ``decode_single`` split that text into a summary and
   reply bodies using the labels requested in ``prompts.py``.

Neither stage raises: malformed model output degrades to fixed fallback
text so callers always receive a well-formed result.
"""

import json
import logging
import re
from enum import Enum
from typing import Any, Optional, Sequence, Union

from .models import MultiReplyResult, SingleReplyResult

logger = logging.getLogger(__name__)

REPLY_COUNT = 3
MAX_SUMMARY_LENGTH = 200
ELLIPSIS = "..."

FILLER_REPLY = "Thank you for your message. I will review and respond shortly."
FALLBACK_SUMMARY = (
    "Generated professional email responses based on the provided content "
    "and tone preferences."
)
UNAVAILABLE_SUMMARY = "Summary not available"

# Paths tried in order against the decoded envelope.
ENVELOPE_TEXT_PATHS: tuple[tuple[Union[str, int], ...], ...] = (
    ("candidates", 0, "content", "parts", 0, "text"),
    ("output",),
)

SUMMARY_LABEL = re.compile(r"^summary:\s*", re.IGNORECASE)
REPLY_LABEL = re.compile(r"^reply\s*[123]:\s*", re.IGNORECASE)

SINGLE_REPLY_MARKER = re.compile(r"reply:", re.IGNORECASE)
SINGLE_SUMMARY_LABEL = re.compile(r"^\s*summary:\s*", re.IGNORECASE)


class Section(Enum):
    """Which part of a multi-reply answer the decoder is reading."""

    NONE = "none"
    SUMMARY = "summary"
    REPLY = "reply"


# Checked in order; the first matching label decides the next section.
SECTION_LABELS: tuple[tuple[re.Pattern, Section], ...] = (
    (SUMMARY_LABEL, Section.SUMMARY),
    (REPLY_LABEL, Section.REPLY),
)


def _lookup(document: Any, path: Sequence[Union[str, int]]) -> Optional[Any]:
    """Follow a key/index path through decoded JSON, or return None."""
    node = document
    for step in path:
        if isinstance(step, int):
            if not isinstance(node, list) or len(node) <= step:
                return None
            node = node[step]
        else:
            if not isinstance(node, dict) or step not in node:
                return None
            node = node[step]
    return node


def extract_text(raw: Optional[str]) -> str:
    """Extract the generated text from a raw provider response body.

    Args:
        raw: Response body as returned by the LLM endpoint.

    Returns:
        The stripped candidate text, the stripped top-level ``output``
        field, an empty string for a blank body, or ``raw`` unchanged when
        nothing else applies. Never raises.
    """
    if raw is None or not raw.strip():
        return ""

    try:
        document = json.loads(raw)
    except (ValueError, RecursionError) as e:
        logger.warning("Unable to parse LLM response as JSON, using raw text: %s", e)
        logger.debug("Raw response that failed to parse: %s", raw[:1000])
        return raw

    for path in ENVELOPE_TEXT_PATHS:
        text = _lookup(document, path)
        if isinstance(text, str):
            return text.strip()

    logger.warning("No generated text found in LLM response envelope, using raw text")
    return raw


def _truncate_summary(summary: str) -> str:
    if len(summary) > MAX_SUMMARY_LENGTH:
        return summary[: MAX_SUMMARY_LENGTH - len(ELLIPSIS)] + ELLIPSIS
    return summary


def _read_sections(text: str) -> tuple[str, list[str]]:
    """Walk the labelled lines of a multi-reply answer.

    Returns:
        The raw summary text and every non-empty reply found, in order.
    """
    summary = ""
    replies: list[str] = []
    section = Section.NONE
    buffer: list[str] = []

    def close_section() -> None:
        nonlocal summary
        content = " ".join(buffer).strip()
        if section is Section.SUMMARY:
            summary = content
        elif section is Section.REPLY and content:
            replies.append(content)

    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue

        for pattern, target in SECTION_LABELS:
            match = pattern.match(line)
            if match:
                close_section()
                section = target
                remainder = line[match.end():].strip()
                buffer = [remainder] if remainder else []
                break
        else:
            if section is not Section.NONE:
                buffer.append(line)

    close_section()
    return summary, replies


def fallback_multi_result() -> MultiReplyResult:
    """Result used when nothing usable could be decoded."""
    return MultiReplyResult(
        summary=FALLBACK_SUMMARY,
        replies=[FILLER_REPLY] * REPLY_COUNT,
    )


def decode_multi(text: str) -> MultiReplyResult:
    """Decode a ``SUMMARY:`` / ``REPLY n:`` answer into a summary and 3 replies.

    Lines outside any labelled section are ignored. Missing replies are
    padded with a filler sentence, extra replies are dropped, an empty
    summary is replaced by a generic one and long summaries are cut to
    200 characters.

    Args:
        text: Plain text extracted from the LLM response.

    Returns:
        MultiReplyResult with exactly three replies. Never raises; any
        internal failure yields ``fallback_multi_result()``.
    """
    try:
        summary, replies = _read_sections(text)
    except Exception:
        logger.exception("Failed to parse multiple replies, using fallback result")
        return fallback_multi_result()

    replies = replies[:REPLY_COUNT]
    while len(replies) < REPLY_COUNT:
        replies.append(FILLER_REPLY)

    summary = summary.strip() or FALLBACK_SUMMARY
    summary = _truncate_summary(summary)

    logger.debug("Parsed summary: %s", summary)
    logger.debug("Parsed %d replies", len(replies))
    return MultiReplyResult(summary=summary, replies=replies)


def decode_single(text: str) -> SingleReplyResult:
    """Decode a ``Summary:`` / ``Reply:`` answer into one summary and reply.

    The text is split on the first ``Reply:`` marker. When the model
    ignores the format the whole text becomes the reply and the summary
    reads "Summary not available".

    Args:
        text: Plain text extracted from the LLM response.

    Returns:
        SingleReplyResult.
    """
    text = text or ""
    parts = SINGLE_REPLY_MARKER.split(text, maxsplit=1)

    if len(parts) > 1:
        summary = SINGLE_SUMMARY_LABEL.sub("", parts[0], count=1).strip()
        reply = parts[1].strip()
    else:
        summary = ""
        reply = text.strip()

    if not summary:
        summary = UNAVAILABLE_SUMMARY
    if not reply:
        reply = text

    return SingleReplyResult(summary=_truncate_summary(summary), reply=reply)


def parse_multi_response(raw: Optional[str]) -> MultiReplyResult:
    """Extract and decode a raw multi-reply response body."""
    return decode_multi(extract_text(raw))


def parse_single_response(raw: Optional[str]) -> SingleReplyResult:
    """Extract and decode a raw single-reply response body."""
    return decode_single(extract_text(raw))
