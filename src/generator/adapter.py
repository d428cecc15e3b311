"""Abstract interface for LLM adapters."""

from abc import ABC, abstractmethod
from typing import Any


class LLMAdapter(ABC):
    """Abstract base class for LLM provider adapters.

    Implementations should handle:
    - API authentication
    - Sending the request body to the provider endpoint
    - Error handling and translation to custom exceptions

    Adapters return the raw response body untouched; pulling the generated
    text out of the provider envelope is done by ``parser.extract_text``.

    To implement a new adapter:
    1. Subclass LLMAdapter
    2. Implement generate(), model_name, and provider_name
    3. Map provider-specific exceptions to exceptions from exceptions.py

    Example usage:
        adapter = GeminiAdapter(api_key="...")
        raw = adapter.generate(build_payload(prompt, config))
    """

    @abstractmethod
    def generate(self, payload: dict[str, Any]) -> str:
        """Send a generation request body to the LLM and return its raw response.

        Args:
            payload: JSON-serializable request body (``contents`` and
                ``generationConfig``).

        Returns:
            The raw response body text.

        Raises:
            LLMConnectionError: Failed to connect to provider.
            LLMRateLimitError: Rate limit exceeded.
            LLMAuthenticationError: Invalid or missing credentials.
            LLMResponseError: Provider returned a non-success status.
        """
        pass

    @property
    @abstractmethod
    def model_name(self) -> str:
        """Return the name of the model being used."""
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the name of the LLM provider."""
        pass
