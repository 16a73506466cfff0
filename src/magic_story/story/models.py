"""Data models for story generation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..constants import AgeGroup, PhotoMimeType, StoryStyle


@dataclass(frozen=True)
class Photo:
    """Uploaded child photo, base64 encoded."""

    base64_data: str
    mime_type: PhotoMimeType
    file_name: Optional[str] = None


@dataclass(frozen=True)
class StoryRequest:
    """Immutable, validated story request.

    Only ``validate_story_request`` should build one from untrusted input.
    """

    age_group: AgeGroup
    favorite_character: str
    story_style: StoryStyle
    child_photo: Photo


class StoryMetadata(BaseModel):
    """User-facing request fields echoed back with the result."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    age_group: AgeGroup
    story_style: StoryStyle
    favorite_character: str


class StoryResult(BaseModel):
    """A generated story with its illustration."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    title: str
    story_text: str
    image_url: str
    metadata: StoryMetadata

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camel-case wire shape the web client renders."""
        return self.model_dump(mode="json", by_alias=True)
