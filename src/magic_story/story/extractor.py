"""Extract the story and illustration from provider envelopes."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass

from ..errors import PromptBlockedError, UnexpectedFormatError
from ..providers.envelope import GenerationEnvelope

_JSON_FENCE_OPEN = re.compile(r"^```json\s*", re.IGNORECASE)
_FENCE_OPEN = re.compile(r"^```\s*")
_FENCE_CLOSE = re.compile(r"\s*```$")


@dataclass(frozen=True)
class StoryPayload:
    """Title and body parsed from the text call."""

    title: str
    story_text: str


@dataclass(frozen=True)
class ImagePayload:
    """Inline image returned by the image call."""

    mime_type: str
    base64_data: str

    @property
    def data_uri(self) -> str:
        """Self-contained ``data:`` URI for the image."""
        return f"data:{self.mime_type};base64,{self.base64_data}"


def _check_block_reason(envelope: GenerationEnvelope, step: str) -> None:
    block_reason = envelope.block_reason
    if block_reason:
        raise PromptBlockedError(
            f"{step} prompt was blocked by Gemini ({block_reason}).",
            block_reason=block_reason,
        )


def strip_code_fence(text: str) -> str:
    """Remove a surrounding ```json ... ``` or ``` ... ``` fence."""
    stripped = _JSON_FENCE_OPEN.sub("", text.strip())
    stripped = _FENCE_OPEN.sub("", stripped)
    stripped = _FENCE_CLOSE.sub("", stripped)
    return stripped.strip()


def parse_story_json(text: str) -> StoryPayload | None:
    """Parse one text part as a story, or return None if it is not one."""
    try:
        parsed = json.loads(strip_code_fence(text))
    except ValueError:
        return None

    if not isinstance(parsed, dict):
        return None

    title = parsed.get("title")
    story_text = parsed.get("storyText")
    if not isinstance(title, str) or not title.strip():
        return None
    if not isinstance(story_text, str) or not story_text.strip():
        return None

    return StoryPayload(title=title.strip(), story_text=story_text.strip())


def extract_story(envelope: GenerationEnvelope) -> StoryPayload:
    """Return the first text part of the first candidate that parses as a story.

    Raises:
        PromptBlockedError: The prompt carries a block reason.
        UnexpectedFormatError: No text part holds a valid story.
    """
    _check_block_reason(envelope, "Story")

    for part in envelope.first_candidate_parts():
        if part.text is None:
            continue
        story = parse_story_json(part.text)
        if story:
            return story

    raise UnexpectedFormatError("Gemini returned an unexpected story format.")


def extract_image(envelope: GenerationEnvelope) -> ImagePayload:
    """Return the first inline image part of the first candidate.

    Raises:
        PromptBlockedError: The prompt carries a block reason.
        UnexpectedFormatError: No part holds a mime type and data.
    """
    _check_block_reason(envelope, "Image")

    for part in envelope.first_candidate_parts():
        inline = part.inline_data
        if inline is not None and inline.is_usable:
            return ImagePayload(mime_type=inline.mime_type, base64_data=inline.data)

    raise UnexpectedFormatError("Gemini image generation did not return an image.")
