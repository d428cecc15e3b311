"""Custom exceptions for the reply generator module."""

from typing import Optional


class GeneratorError(Exception):
    """Base exception for reply generator errors."""

    pass


class LLMConnectionError(GeneratorError):
    """Failed to connect to LLM provider (network error or timeout)."""

    pass


class LLMRateLimitError(GeneratorError):
    """Rate limit exceeded on LLM provider.

    Attributes:
        retry_after: Seconds to wait before retrying, if provided by the API.
    """

    def __init__(self, message: str, retry_after: Optional[float] = None):
        super().__init__(message)
        self.retry_after = retry_after


class LLMResponseError(GeneratorError):
    """LLM provider answered with a non-success status.

    Attributes:
        status_code: HTTP status returned by the provider, if any.
        raw_response: The response body that came with the error.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        raw_response: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.raw_response = raw_response


class LLMAuthenticationError(GeneratorError):
    """Authentication failed with LLM provider, or no API key configured."""

    pass


class LLMConfigurationError(GeneratorError):
    """LLM provider settings are invalid, e.g. a non-numeric timeout."""

    pass


class GenerationError(GeneratorError):
    """Reply generation could not be completed.

    Raised by ReplyGenerator when the underlying LLM call fails. The
    original adapter exception is available as ``__cause__``.
    """

    pass
