"""HTTP client for the Gemini generateContent endpoint."""

from __future__ import annotations

import asyncio
import json
import logging
import time
from typing import Any
from urllib.parse import quote

import httpx

from ..errors import (
    ProviderRejectedError,
    ProviderTimeoutError,
    ProviderTransportError,
    UnexpectedFormatError,
)
from .config import ProviderSettings
from .envelope import GenerationEnvelope

_logger = logging.getLogger("ai_calls")

TIMEOUT_MESSAGE = "Gemini API request timed out. Please try again."


def _embedded_error_message(payload: Any) -> str | None:
    """Return ``error.message`` from a provider error body, if present."""
    if not isinstance(payload, dict):
        return None
    error = payload.get("error")
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        return error["message"]
    return None


class GeminiClient:
    """Single-call client for Gemini content generation.

    Each ``generate_content`` call makes exactly one POST, bounded by the
    configured deadline. Nothing is retried here.

    Usage:
        async with GeminiClient() as client:
            envelope = await client.generate_content(
                "gemini-flash-latest", api_key, {"contents": [...]}
            )
    """

    def __init__(
        self,
        settings: ProviderSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initialize the client.

        Args:
            settings: Endpoint and timeout settings. Defaults to the public
                Gemini endpoint with a 60 second deadline.
            http_client: Optional pre-configured client, mainly for tests.
                A client passed in is not closed by ``close()``.
        """
        self.settings = settings or ProviderSettings()
        self._http_client = http_client
        self._owns_client = http_client is None

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.settings.timeout_seconds)
            )
        return self._http_client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._http_client and self._owns_client:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> "GeminiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def _endpoint(self, model: str) -> str:
        return f"{self.settings.base_url.rstrip('/')}/{quote(model, safe='')}:generateContent"

    async def generate_content(
        self,
        model: str,
        api_key: str,
        body: dict[str, Any],
    ) -> GenerationEnvelope:
        """Send one generateContent request and normalize the response.

        Args:
            model: Model identifier, e.g. ``gemini-flash-latest``.
            api_key: Gemini API key, sent as the ``key`` query parameter.
            body: JSON request body.

        Returns:
            Canonical envelope. An empty response body yields an empty envelope.

        Raises:
            ProviderTimeoutError: The call exceeded the deadline and was cancelled.
            ProviderTransportError: Any other network failure.
            ProviderRejectedError: Non-success HTTP status.
            UnexpectedFormatError: Success status with a body that is not a JSON object.
        """
        client = await self._get_http_client()
        start_time = time.time()

        _logger.debug(f"gemini request | model={model}")

        try:
            response = await asyncio.wait_for(
                client.post(self._endpoint(model), params={"key": api_key}, json=body),
                timeout=self.settings.timeout_seconds,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            _logger.warning(f"gemini timeout | model={model} | after={time.time() - start_time:.1f}s")
            raise ProviderTimeoutError(TIMEOUT_MESSAGE) from e
        except httpx.HTTPError as e:
            reason = str(e) or type(e).__name__
            _logger.warning(f"gemini transport error | model={model} | {reason}")
            raise ProviderTransportError(f"Gemini API request failed: {reason}") from e

        duration = time.time() - start_time
        _logger.debug(
            f"gemini response | model={model} | status={response.status_code} | {duration:.2f}s"
        )

        raw_text = response.text
        try:
            parsed = json.loads(raw_text) if raw_text else {}
        except ValueError:
            parsed = None

        if not response.is_success:
            message = (
                _embedded_error_message(parsed)
                or f"Gemini API request failed with status {response.status_code}."
            )
            raise ProviderRejectedError(message, status_code=response.status_code)

        if not isinstance(parsed, dict):
            raise UnexpectedFormatError("Gemini API returned a malformed response.")

        return GenerationEnvelope.from_payload(parsed)
