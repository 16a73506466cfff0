"""Exceptions raised while generating a story.

Every failure the core can produce is a ``StoryError``. The ``kind`` and
``http_status`` attributes let the caller map it to a user-facing response
without inspecting the message.
"""

from __future__ import annotations


class StoryError(Exception):
    """Base exception for story generation errors."""

    kind = "internal"
    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RequestValidationError(StoryError):
    """Input payload failed validation."""

    kind = "validation"
    http_status = 400

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class MissingCredentialsError(StoryError):
    """No usable API key for a required provider call."""

    kind = "configuration"
    http_status = 501

    def __init__(self, message: str, missing_keys: list[str]):
        super().__init__(message)
        self.missing_keys = list(missing_keys)


# =============================================================================
# Provider errors
# =============================================================================


class ProviderError(StoryError):
    """Error talking to or returned by the generative provider."""

    kind = "provider"


class ProviderTimeoutError(ProviderError):
    """Provider call exceeded its deadline."""

    kind = "timeout"


class ProviderTransportError(ProviderError):
    """Network failure other than a timeout."""

    kind = "transport"


class ProviderRejectedError(ProviderError):
    """Provider answered with a non-success HTTP status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class PromptBlockedError(ProviderError):
    """Provider refused the prompt with a safety block reason."""

    kind = "blocked"

    def __init__(self, message: str, block_reason: str):
        super().__init__(message)
        self.block_reason = block_reason


class UnexpectedFormatError(ProviderError):
    """Provider answered successfully but without the expected payload."""

    kind = "format"
