"""Global constants package for Magic Story.

PACKAGE STRUCTURE:
-----------------
- limits.py : validation bounds, provider endpoint, models, timeouts
- types.py  : enums for age groups, story styles and photo formats

USAGE EXAMPLES:
--------------
    from magic_story.constants import AgeGroup, StoryStyle
    from magic_story.constants import DEFAULT_TEXT_MODEL, PROVIDER_TIMEOUT_SECONDS
"""

from .limits import (
    CHARACTER_NAME_MIN_LENGTH,
    CHARACTER_NAME_MAX_LENGTH,
    PHOTO_DATA_MIN_LENGTH,
    GEMINI_API_BASE_URL,
    DEFAULT_TEXT_MODEL,
    DEFAULT_IMAGE_MODEL,
    PROVIDER_TIMEOUT_SECONDS,
    STORY_TEMPERATURE,
    ENV_TEXT_API_KEY,
    ENV_IMAGE_API_KEY,
    ENV_TEXT_MODEL,
    ENV_IMAGE_MODEL,
    ENV_IMAGE_MODEL_ALT,
)
from .types import AgeGroup, StoryStyle, PhotoMimeType, STORY_STYLE_LABELS

__all__ = [
    # Limits
    "CHARACTER_NAME_MIN_LENGTH",
    "CHARACTER_NAME_MAX_LENGTH",
    "PHOTO_DATA_MIN_LENGTH",
    # Provider
    "GEMINI_API_BASE_URL",
    "DEFAULT_TEXT_MODEL",
    "DEFAULT_IMAGE_MODEL",
    "PROVIDER_TIMEOUT_SECONDS",
    "STORY_TEMPERATURE",
    # Configuration variables
    "ENV_TEXT_API_KEY",
    "ENV_IMAGE_API_KEY",
    "ENV_TEXT_MODEL",
    "ENV_IMAGE_MODEL",
    "ENV_IMAGE_MODEL_ALT",
    # Types
    "AgeGroup",
    "StoryStyle",
    "PhotoMimeType",
    "STORY_STYLE_LABELS",
]
