"""Story service - the single entry point used by UI collaborators.

Takes an untrusted request body and a configuration object, and always
returns a Result: ``Success(StoryResult)`` or ``Failure`` whose ``details``
carry the error ``kind``, a suggested ``http_status`` and, for missing
credentials, the ``missing_keys`` to configure.
"""

from __future__ import annotations

import json
from typing import Any

from ..errors import (
    MissingCredentialsError,
    PromptBlockedError,
    ProviderRejectedError,
    RequestValidationError,
    StoryError,
)
from ..core.types import Failure, Result, Success
from ..providers.config import ProviderCredentials, StoryConfig
from ..providers.gemini import GeminiClient
from .models import StoryResult
from .orchestrator import StoryOrchestrator
from .validators import validate_story_request


def get_missing_api_keys(credentials: ProviderCredentials) -> list[str]:
    """Configuration variables that must be set before live generation."""
    return credentials.missing_keys()


def failure_from_error(error: StoryError) -> Failure:
    """Convert a StoryError into a Failure with machine-readable details."""
    details: dict[str, Any] = {"kind": error.kind, "http_status": error.http_status}

    if isinstance(error, RequestValidationError) and error.field:
        details["field"] = error.field
    elif isinstance(error, MissingCredentialsError):
        details["missing_keys"] = error.missing_keys
    elif isinstance(error, ProviderRejectedError):
        details["status_code"] = error.status_code
    elif isinstance(error, PromptBlockedError):
        details["block_reason"] = error.block_reason

    return Failure(error.message, details)


async def create_story(
    payload: Any,
    config: StoryConfig,
    client: GeminiClient | None = None,
) -> Result[StoryResult]:
    """Validate a request body and generate the story with its illustration.

    Args:
        payload: Decoded JSON body from the form collaborator.
        config: Configuration resolved at process start.
        client: Optional shared Gemini client. When omitted, a client is
            created for this call and closed afterwards.

    Returns:
        Result containing the StoryResult or failure
    """
    validation = validate_story_request(payload)
    if isinstance(validation, Failure):
        field = (validation.details or {}).get("field")
        return failure_from_error(RequestValidationError(validation.error, field=field))

    request = validation.value

    try:
        if client is not None:
            result = await StoryOrchestrator(client).generate(request, config.credentials)
        else:
            async with GeminiClient(config.provider_settings) as owned_client:
                result = await StoryOrchestrator(owned_client).generate(request, config.credentials)
    except StoryError as e:
        return failure_from_error(e)

    return Success(result)


async def create_story_from_json(
    body: str | bytes,
    config: StoryConfig,
    client: GeminiClient | None = None,
) -> Result[StoryResult]:
    """Decode a raw JSON request body, then run ``create_story``."""
    try:
        payload = json.loads(body)
    except ValueError:
        return failure_from_error(RequestValidationError("Invalid JSON body.", field="body"))

    return await create_story(payload, config, client=client)
