"""Google Gemini REST adapter implementation."""

import logging
import os
from typing import Any, Optional

import requests

from .adapter import LLMAdapter
from .exceptions import (
    LLMAuthenticationError,
    LLMConfigurationError,
    LLMConnectionError,
    LLMRateLimitError,
    LLMResponseError,
)

logger = logging.getLogger(__name__)


class GeminiAdapter(LLMAdapter):
    """LLM adapter for the Gemini ``generateContent`` REST endpoint.

    Posts the request body as JSON to ``<api_url><endpoint>?key=<api_key>``
    and returns the response body as text. Uses lazy initialization for
    the HTTP session.

    Example usage:
        adapter = GeminiAdapter()  # Uses GEMINI_API_KEY env var
        adapter = GeminiAdapter(
            api_key="...",
            endpoint="/v1beta/models/gemini-1.5-pro:generateContent",
        )
    """

    DEFAULT_API_URL = "https://generativelanguage.googleapis.com"
    DEFAULT_ENDPOINT = "/v1beta/models/gemini-2.0-flash:generateContent"
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        endpoint: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the Gemini adapter.

        Args:
            api_key: Gemini API key. Defaults to GEMINI_API_KEY env var.
            api_url: Base URL. Defaults to GEMINI_API_URL env var, then the
                public Generative Language API host.
            endpoint: Endpoint path. Defaults to GEMINI_API_ENDPOINT env var,
                then gemini-2.0-flash generateContent.
            timeout: Request timeout in seconds. Defaults to GEMINI_TIMEOUT
                env var, then 30 seconds.
            session: Pre-configured requests session (for testing).

        Raises:
            LLMAuthenticationError: If no API key is available.
            LLMConfigurationError: If GEMINI_TIMEOUT is not a number.
        """
        self._api_key = api_key or os.getenv("GEMINI_API_KEY")
        if not self._api_key:
            raise LLMAuthenticationError(
                "Gemini API key not provided. Set GEMINI_API_KEY environment variable "
                "or pass api_key parameter."
            )
        self._api_url = (api_url or os.getenv("GEMINI_API_URL") or self.DEFAULT_API_URL).rstrip("/")
        self._endpoint = endpoint or os.getenv("GEMINI_API_ENDPOINT") or self.DEFAULT_ENDPOINT
        if timeout is None:
            raw_timeout = os.getenv("GEMINI_TIMEOUT", self.DEFAULT_TIMEOUT)
            try:
                timeout = float(raw_timeout)
            except ValueError as e:
                raise LLMConfigurationError(
                    f"GEMINI_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
                ) from e
        self._timeout = timeout
        self._session = session

    def _get_session(self) -> requests.Session:
        """Get or create HTTP session (lazy initialization)."""
        if self._session is None:
            self._session = requests.Session()
        return self._session

    @property
    def url(self) -> str:
        """Full endpoint URL, without the API key."""
        endpoint = self._endpoint if self._endpoint.startswith("/") else "/" + self._endpoint
        return self._api_url + endpoint

    def generate(self, payload: dict[str, Any]) -> str:
        """Post a generation request to Gemini and return the raw body.

        Args:
            payload: Request body with ``contents`` and ``generationConfig``.

        Returns:
            The raw response body text.

        Raises:
            LLMConnectionError: Network failure or timeout.
            LLMRateLimitError: HTTP 429.
            LLMAuthenticationError: HTTP 401 or 403.
            LLMResponseError: Any other non-success status.
        """
        session = self._get_session()
        logger.debug("Sending request to Gemini model=%s", self.model_name)

        try:
            response = session.post(
                self.url,
                params={"key": self._api_key},
                json=payload,
                timeout=self._timeout,
            )
        except requests.Timeout as e:
            raise LLMConnectionError(f"Gemini request timed out: {e}") from e
        except requests.RequestException as e:
            raise LLMConnectionError(f"Failed to connect to Gemini: {e}") from e

        status = response.status_code
        if status in (401, 403):
            raise LLMAuthenticationError(f"Gemini authentication failed (HTTP {status})")
        if status == 429:
            retry_after = None
            retry_header = response.headers.get("retry-after")
            if retry_header:
                try:
                    retry_after = float(retry_header)
                except ValueError:
                    retry_after = None
            raise LLMRateLimitError("Gemini rate limit exceeded (HTTP 429)", retry_after)
        if not response.ok:
            raise LLMResponseError(
                f"Gemini API error (HTTP {status}): {response.text[:200]}",
                status_code=status,
                raw_response=response.text,
            )

        raw = response.text
        logger.debug("Raw Gemini response: %s", raw[:1000])
        return raw

    @property
    def model_name(self) -> str:
        """Model name parsed from the endpoint path."""
        tail = self._endpoint.rsplit("/", 1)[-1]
        return tail.split(":", 1)[0]

    @property
    def provider_name(self) -> str:
        """Return the provider name."""
        return "Gemini"
