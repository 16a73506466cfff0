"""Pure validation functions for incoming story requests."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..constants import (
    CHARACTER_NAME_MAX_LENGTH,
    CHARACTER_NAME_MIN_LENGTH,
    PHOTO_DATA_MIN_LENGTH,
    AgeGroup,
    PhotoMimeType,
    StoryStyle,
)
from ..core.types import Failure, Result, Success
from .models import Photo, StoryRequest

VALID_AGE_GROUPS = [group.value for group in AgeGroup]
VALID_STORY_STYLES = [style.value for style in StoryStyle]
VALID_PHOTO_MIME_TYPES = [mime.value for mime in PhotoMimeType]


def _fail(message: str, field: str) -> Failure:
    return Failure(message, {"field": field})


def validate_photo(photo: Any) -> Result[Photo]:
    """Validate the child photo payload.

    Pure function - no side effects.

    Args:
        photo: Untrusted ``childPhoto`` value

    Returns:
        Result containing a Photo or failure
    """
    if not isinstance(photo, Mapping):
        return _fail("Photo payload is required.", "childPhoto")

    base64_data = photo.get("base64Data")
    mime_type = photo.get("mimeType")
    file_name = photo.get("fileName")

    if not isinstance(base64_data, str) or len(base64_data.strip()) < PHOTO_DATA_MIN_LENGTH:
        return _fail("Photo data is invalid.", "childPhoto.base64Data")

    if not isinstance(mime_type, str) or mime_type not in VALID_PHOTO_MIME_TYPES:
        return _fail("Photo type must be JPEG, PNG, or WebP.", "childPhoto.mimeType")

    if file_name is not None and not isinstance(file_name, str):
        return _fail("Photo filename is invalid.", "childPhoto.fileName")

    return Success(Photo(
        base64_data=base64_data,
        mime_type=PhotoMimeType(mime_type),
        file_name=file_name,
    ))


def validate_story_request(payload: Any) -> Result[StoryRequest]:
    """Validate an untrusted request body into a StoryRequest.

    Fields are checked in order (ageGroup, favoriteCharacter, storyStyle,
    childPhoto) and the first failure is returned.

    Pure function - no side effects.

    Args:
        payload: Decoded JSON body

    Returns:
        Result containing the normalized StoryRequest or failure
    """
    if not isinstance(payload, Mapping):
        return _fail("Request body must be a JSON object.", "body")

    age_group = payload.get("ageGroup")
    favorite_character = payload.get("favoriteCharacter")
    story_style = payload.get("storyStyle")

    if not isinstance(age_group, str) or age_group not in VALID_AGE_GROUPS:
        return _fail(
            f"Age group must be one of: {', '.join(VALID_AGE_GROUPS)}.",
            "ageGroup",
        )

    if not isinstance(favorite_character, str):
        return _fail("Favorite character is required.", "favoriteCharacter")

    character = favorite_character.strip()
    if not CHARACTER_NAME_MIN_LENGTH <= len(character) <= CHARACTER_NAME_MAX_LENGTH:
        return _fail(
            f"Favorite character must be between {CHARACTER_NAME_MIN_LENGTH} "
            f"and {CHARACTER_NAME_MAX_LENGTH} characters.",
            "favoriteCharacter",
        )

    if not isinstance(story_style, str) or story_style not in VALID_STORY_STYLES:
        return _fail("Story style is invalid.", "storyStyle")

    photo_result = validate_photo(payload.get("childPhoto"))
    if isinstance(photo_result, Failure):
        return photo_result

    return Success(StoryRequest(
        age_group=AgeGroup(age_group),
        favorite_character=character,
        story_style=StoryStyle(story_style),
        child_photo=photo_result.value,
    ))
