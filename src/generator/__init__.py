"""Reply generator module for drafting email replies with an LLM.

This module builds tone- and language-aware prompts, sends them to an LLM
provider, and decodes the answer into a summary plus one or three reply
bodies.

Public API:
    - ReplyGenerator: Main class for generating replies
    - GenerationRequest: The email to reply to
    - ReplyMode: Single reply or three variations
    - SingleReplyResult / MultiReplyResult: Generation results
    - LLMAdapter: Interface for LLM providers (for custom implementations)
    - GeminiAdapter: Gemini REST implementation
    - build_prompt, extract_text, decode_multi, decode_single: pipeline stages

Example:
    from src.generator import GenerationRequest, ReplyGenerator

    generator = ReplyGenerator()
    request = GenerationRequest(subject="Meeting", body="Can we move it?", tone="friendly")
    result = generator.generate_replies(request)
    print(result.summary)
    for reply in result.replies:
        print(f"- {reply}")
"""

from .adapter import LLMAdapter
from .exceptions import (
    GenerationError,
    GeneratorError,
    LLMAuthenticationError,
    LLMConfigurationError,
    LLMConnectionError,
    LLMRateLimitError,
    LLMResponseError,
)
from .gemini_adapter import GeminiAdapter
from .models import (
    GenerationRequest,
    MultiReplyResult,
    ReplyMode,
    SamplingConfig,
    SingleReplyResult,
)
from .parser import (
    FALLBACK_SUMMARY,
    FILLER_REPLY,
    UNAVAILABLE_SUMMARY,
    decode_multi,
    decode_single,
    extract_text,
)
from .prompts import build_prompt
from .reply_generator import ReplyGenerator, build_payload

__all__ = [
    # Main classes
    "ReplyGenerator",
    "LLMAdapter",
    "GeminiAdapter",
    # Models
    "GenerationRequest",
    "MultiReplyResult",
    "ReplyMode",
    "SamplingConfig",
    "SingleReplyResult",
    # Pipeline stages
    "build_payload",
    "build_prompt",
    "decode_multi",
    "decode_single",
    "extract_text",
    "FALLBACK_SUMMARY",
    "FILLER_REPLY",
    "UNAVAILABLE_SUMMARY",
    # Exceptions
    "GenerationError",
    "GeneratorError",
    "LLMAuthenticationError",
    "LLMConfigurationError",
    "LLMConnectionError",
    "LLMRateLimitError",
    "LLMResponseError",
]
