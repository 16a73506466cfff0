"""Shared test fixtures and configuration.

Provides request payloads, provider envelopes and an async-compatible mock
Gemini client, so no test hits the real API.
"""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock

import pytest

from magic_story.constants import AgeGroup, PhotoMimeType, StoryStyle
from magic_story.providers.config import ProviderCredentials, StoryConfig
from magic_story.providers.envelope import GenerationEnvelope
from magic_story.story.models import Photo, StoryRequest

# 40+ characters of base64, enough to pass the garbage-payload check
PHOTO_BASE64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk"


def text_envelope(*texts: str) -> GenerationEnvelope:
    """Envelope whose first candidate carries the given text parts."""
    return GenerationEnvelope.from_payload({
        "candidates": [
            {"content": {"parts": [{"text": text} for text in texts]}, "finishReason": "STOP"},
        ],
    })


def image_envelope(mime_type: str = "image/png", data: str = "abc123") -> GenerationEnvelope:
    """Envelope whose first candidate carries one inline image part."""
    return GenerationEnvelope.from_payload({
        "candidates": [
            {"content": {"parts": [{"inlineData": {"mimeType": mime_type, "data": data}}]}},
        ],
    })


def story_json(title: str = "Dragon in Space", story_text: str = "Once...\n\nThe end.") -> str:
    return json.dumps({"title": title, "storyText": story_text})


@pytest.fixture
def valid_payload() -> dict[str, Any]:
    """Request body as sent by the web form."""
    return {
        "ageGroup": "6-8",
        "favoriteCharacter": "A brave dragon",
        "storyStyle": "space-adventure",
        "childPhoto": {
            "base64Data": PHOTO_BASE64,
            "mimeType": "image/png",
        },
    }


@pytest.fixture
def story_request() -> StoryRequest:
    """Validated request for prompt and orchestrator tests."""
    return StoryRequest(
        age_group=AgeGroup.EARLY_READER,
        favorite_character="A brave dragon",
        story_style=StoryStyle.SPACE_ADVENTURE,
        child_photo=Photo(base64_data=PHOTO_BASE64, mime_type=PhotoMimeType.PNG),
    )


@pytest.fixture
def credentials() -> ProviderCredentials:
    return ProviderCredentials(text_api_key="text-key", image_api_key="image-key")


@pytest.fixture
def story_config(credentials: ProviderCredentials) -> StoryConfig:
    return StoryConfig(credentials=credentials)


@pytest.fixture
def mock_client() -> AsyncMock:
    """Mock GeminiClient answering the text call then the image call.

    Returns:
        AsyncMock whose generate_content yields a story then an image.
    """
    client = AsyncMock()
    client.generate_content.side_effect = [
        text_envelope(story_json()),
        image_envelope("image/png", "abc123"),
    ]
    return client
