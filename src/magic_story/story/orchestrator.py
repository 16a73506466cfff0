"""Story orchestrator - sequences the text and image provider calls."""

from __future__ import annotations

import logging
from typing import Any

from ..constants import ENV_TEXT_API_KEY, STORY_TEMPERATURE
from ..errors import MissingCredentialsError
from ..providers.config import ProviderCredentials
from ..providers.gemini import GeminiClient
from .extractor import ImagePayload, StoryPayload, extract_image, extract_story
from .models import StoryMetadata, StoryRequest, StoryResult
from .prompts import build_image_prompt, build_story_prompt

_logger = logging.getLogger("ai_calls")

STORY_SYSTEM_INSTRUCTION = (
    "You write delightful, kid-safe stories. Stay positive, non-scary, and encouraging. "
    "Avoid unsafe content and keep the story appropriate for children."
)

STORY_RESPONSE_JSON_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "title": {
            "type": "STRING",
            "description": "A short, playful story title for children.",
        },
        "storyText": {
            "type": "STRING",
            "description": (
                "The full story in readable paragraphs. "
                "Keep it kid-safe, positive, and age-appropriate."
            ),
        },
    },
    "required": ["title", "storyText"],
    "propertyOrdering": ["title", "storyText"],
}


class StoryOrchestrator:
    """Generates a story and its illustration for a validated request.

    The story text is generated first; the image call only happens once a
    story has been extracted, so a failed text call never costs an image
    generation. Any failure aborts the whole run and propagates unchanged.

    The orchestrator holds no per-request state; one instance can serve
    concurrent requests.
    """

    def __init__(self, client: GeminiClient):
        self.client = client

    async def generate(
        self,
        request: StoryRequest,
        credentials: ProviderCredentials,
    ) -> StoryResult:
        """Run both provider calls and assemble the result.

        Raises:
            MissingCredentialsError: Neither API key is configured. Raised
                before any network call.
            ProviderError: Any provider, transport or format failure.
        """
        text_api_key = credentials.get_text_api_key()
        image_api_key = credentials.get_image_api_key()

        if not text_api_key:
            raise MissingCredentialsError(
                "Missing Gemini API key for story generation.",
                missing_keys=[ENV_TEXT_API_KEY],
            )
        if not image_api_key:
            raise MissingCredentialsError(
                "Missing Gemini API key for image generation.",
                missing_keys=[ENV_TEXT_API_KEY],
            )

        story = await self._generate_story_text(request, text_api_key, credentials.get_text_model())
        image = await self._generate_story_image(request, image_api_key, credentials.get_image_model())

        return StoryResult(
            title=story.title,
            story_text=story.story_text,
            image_url=image.data_uri,
            metadata=StoryMetadata(
                age_group=request.age_group,
                story_style=request.story_style,
                favorite_character=request.favorite_character,
            ),
        )

    async def _generate_story_text(
        self,
        request: StoryRequest,
        api_key: str,
        model: str,
    ) -> StoryPayload:
        body = {
            "systemInstruction": {
                "parts": [{"text": STORY_SYSTEM_INSTRUCTION}],
            },
            "contents": [
                {
                    "role": "user",
                    "parts": [{"text": build_story_prompt(request)}],
                },
            ],
            "generationConfig": {
                "temperature": STORY_TEMPERATURE,
                "responseMimeType": "application/json",
                "responseJsonSchema": STORY_RESPONSE_JSON_SCHEMA,
            },
        }

        envelope = await self.client.generate_content(model, api_key, body)
        story = extract_story(envelope)
        _logger.debug(f"story extracted | title={story.title!r} | chars={len(story.story_text)}")
        return story

    async def _generate_story_image(
        self,
        request: StoryRequest,
        api_key: str,
        model: str,
    ) -> ImagePayload:
        photo = request.child_photo
        body = {
            "contents": [
                {
                    "role": "user",
                    "parts": [
                        {"text": build_image_prompt(request)},
                        {
                            "inlineData": {
                                "mimeType": photo.mime_type.value,
                                "data": photo.base64_data,
                            },
                        },
                    ],
                },
            ],
            "generationConfig": {
                "responseModalities": ["IMAGE"],
            },
        }

        envelope = await self.client.generate_content(model, api_key, body)
        image = extract_image(envelope)
        _logger.debug(f"image extracted | mime={image.mime_type} | bytes~{len(image.base64_data) * 3 // 4}")
        return image
