"""Prompt templates and prompt construction for reply generation.

The output format requested here (``SUMMARY:`` / ``REPLY n:`` labels for
multi mode, ``Summary:`` / ``Reply:`` for single mode) is what
``src.generator.parser`` relies on to segment the model's answer.
"""

from datetime import datetime, timezone
from typing import Optional

from .models import GenerationRequest, ReplyMode

DEFAULT_SINGLE_TONE = "professional"

MULTI_REPLY_INTRO = (
    "You are an expert email assistant. You must generate exactly 3 different "
    "professional email replies and 1 summary.\n"
    "IMPORTANT: Generate the reply in {language} language.\n\n"
)

MULTI_REPLY_TONE = "Use a {tone} tone for all replies.\n\n"

MULTI_REPLY_REGENERATE = (
    "IMPORTANT: Generate completely new variations different from previous ones. "
    "Timestamp: {timestamp}\n\n"
)

MULTI_REPLY_EMAIL = (
    "Original Email Subject: {subject}\n"
    "Original Email Content:\n{body}\n\n"
)

MULTI_REPLY_FORMAT = """You MUST follow this EXACT format:

SUMMARY: [Write a brief 1-2 sentence summary of the key points from the original email and what the replies address]

REPLY 1: [First reply variation - 3-5 sentences, professional tone]

REPLY 2: [Second reply variation - 3-5 sentences, different approach]

REPLY 3: [Third reply variation - 3-5 sentences, alternative style]

CRITICAL RULES:
- Start each section with the exact labels: SUMMARY:, REPLY 1:, REPLY 2:, REPLY 3:
- Each reply should be 3-5 sentences long
- Make each reply distinctly different in approach or style
- The summary should explain what the original email is about and what issue needs addressing
- Do not include email signatures, greetings like 'Dear' or 'Sincerely' - just the body content
"""


SINGLE_REPLY_PROMPT_TEMPLATE = """You are a professional email assistant. Provide a short Summary and a single Reply body in {language}.
Summary: (1-2 sentences)
Reply: (3-5 sentences, body only, no salutation/signature)

EMAIL:
Subject: {subject}
Content: {body}
Tone: {tone}
"""


def build_multi_reply_prompt(
    request: GenerationRequest,
    regenerate: bool = False,
    now: Optional[datetime] = None,
) -> str:
    """Build the prompt asking for one summary and three reply variations.

    Args:
        request: Email to reply to.
        regenerate: Add a uniqueness directive with the current timestamp
            so the model does not repeat an earlier answer.
        now: Timestamp to embed when regenerating. Defaults to the current
            UTC time.

    Returns:
        The instruction text.
    """
    sections = [MULTI_REPLY_INTRO.format(language=request.resolved_language)]

    if request.has_tone:
        sections.append(MULTI_REPLY_TONE.format(tone=request.tone))

    if regenerate:
        timestamp = (now or datetime.now(timezone.utc)).isoformat()
        sections.append(MULTI_REPLY_REGENERATE.format(timestamp=timestamp))

    sections.append(
        MULTI_REPLY_EMAIL.format(subject=request.subject or "", body=request.body or "")
    )
    sections.append(MULTI_REPLY_FORMAT)
    return "".join(sections)


def build_single_reply_prompt(request: GenerationRequest) -> str:
    """Build the prompt asking for one summary and one reply.

    The tone shown to the model falls back to "professional" when the
    request has none; the request itself is left untouched.
    """
    tone = request.tone if request.tone is not None else DEFAULT_SINGLE_TONE
    return SINGLE_REPLY_PROMPT_TEMPLATE.format(
        language=request.resolved_language,
        subject=request.subject or "",
        body=request.body or "",
        tone=tone,
    )


def build_prompt(
    request: GenerationRequest,
    mode: Optional[ReplyMode] = None,
    regenerate: Optional[bool] = None,
    now: Optional[datetime] = None,
) -> str:
    """Build the instruction text for a generation request.

    Args:
        request: Email to reply to.
        mode: Overrides ``request.mode`` when given.
        regenerate: Overrides ``request.regenerate`` when given. Ignored in
            single mode.
        now: Timestamp for the regenerate directive (testing hook).

    Returns:
        Exactly one prompt string. Never raises for any request.
    """
    mode = mode or request.mode
    if regenerate is None:
        regenerate = request.regenerate

    if mode is ReplyMode.SINGLE:
        return build_single_reply_prompt(request)
    return build_multi_reply_prompt(request, regenerate=regenerate, now=now)
