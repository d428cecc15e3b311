"""ReplyGenerator: drafts email replies with an LLM."""

import logging
from typing import Any, Optional, Union

from .adapter import LLMAdapter
from .exceptions import GenerationError, GeneratorError
from .gemini_adapter import GeminiAdapter
from .models import (
    GenerationRequest,
    MultiReplyResult,
    ReplyMode,
    SamplingConfig,
    SingleReplyResult,
)
from .parser import parse_multi_response, parse_single_response
from .prompts import build_prompt

logger = logging.getLogger(__name__)

CONNECTION_CHECK_REQUEST = GenerationRequest(
    subject="Test",
    body="Testing connectivity",
    tone="professional",
    language="en",
    mode=ReplyMode.SINGLE,
)


def build_payload(prompt: str, config: SamplingConfig) -> dict[str, Any]:
    """Wrap a prompt and sampling config in the provider request body."""
    return {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": config.to_dict(),
    }


class ReplyGenerator:
    """Generates reply drafts for an email using an LLM.

    Each call builds one prompt, makes exactly one request through the
    adapter and decodes the answer. Failures of the LLM call surface as
    GenerationError; malformed answers never do, they degrade to filler
    content instead. No retries are attempted.

    Example usage:
        generator = ReplyGenerator()  # Uses Gemini by default
        request = GenerationRequest(subject="Lunch?", body="Free on Friday?")
        result = generator.generate_replies(request)
        for reply in result.replies:
            print(reply)

    With custom adapter:
        generator = ReplyGenerator(adapter=MyAdapter())
    """

    def __init__(self, adapter: Optional[LLMAdapter] = None):
        """Initialize the ReplyGenerator.

        Args:
            adapter: LLM adapter to use. Defaults to GeminiAdapter.
        """
        self._adapter = adapter

    def _get_adapter(self) -> LLMAdapter:
        """Get LLM adapter, creating default if needed (lazy init)."""
        if self._adapter is None:
            self._adapter = GeminiAdapter()
        return self._adapter

    def _call_llm(self, prompt: str, config: SamplingConfig) -> str:
        """Send one request to the LLM, wrapping failures in GenerationError."""
        try:
            adapter = self._get_adapter()
            return adapter.generate(build_payload(prompt, config))
        except GeneratorError as e:
            logger.error("LLM call failed: %s", e)
            raise GenerationError(f"Failed to call Gemini API: {e}") from e
        except Exception as e:
            logger.exception("Unexpected error calling LLM")
            raise GenerationError(f"Failed to call Gemini API: {e}") from e

    def generate_reply(self, request: GenerationRequest) -> SingleReplyResult:
        """Generate a single reply with a summary.

        Args:
            request: Email to reply to. Its mode is ignored.

        Returns:
            SingleReplyResult with a summary and one reply body.

        Raises:
            GenerationError: The LLM call could not be completed.
        """
        prompt = build_prompt(request, mode=ReplyMode.SINGLE)
        logger.debug("Built single reply prompt: %s", prompt)

        raw = self._call_llm(prompt, SamplingConfig.for_mode(ReplyMode.SINGLE))
        return parse_single_response(raw)

    def generate_replies(
        self, request: GenerationRequest, regenerate: bool = False
    ) -> MultiReplyResult:
        """Generate three reply variations with a summary.

        Args:
            request: Email to reply to. Its mode is ignored.
            regenerate: Ask for variations different from an earlier call.
                Also enabled when ``request.regenerate`` is set.

        Returns:
            MultiReplyResult with exactly three replies.

        Raises:
            GenerationError: The LLM call could not be completed.
        """
        regenerate = regenerate or request.regenerate
        prompt = build_prompt(request, mode=ReplyMode.MULTI, regenerate=regenerate)
        logger.debug("Built multiple replies prompt: %s", prompt)

        raw = self._call_llm(prompt, SamplingConfig.for_mode(ReplyMode.MULTI, regenerate))
        return parse_multi_response(raw)

    def generate(
        self, request: GenerationRequest
    ) -> Union[SingleReplyResult, MultiReplyResult]:
        """Generate replies according to ``request.mode``."""
        if request.mode is ReplyMode.SINGLE:
            return self.generate_reply(request)
        return self.generate_replies(request)

    def check_connection(self) -> SingleReplyResult:
        """Generate a reply for a fixed sample email to verify LLM access.

        Raises:
            GenerationError: The LLM could not be reached.
        """
        return self.generate_reply(CONNECTION_CHECK_REQUEST)

    @property
    def adapter(self) -> LLMAdapter:
        """Access the LLM adapter."""
        return self._get_adapter()
