"""Limit constants for Magic Story.

This module contains all limits and provider defaults:
- Request validation bounds
- Gemini endpoint, models and timeouts
- Configuration variable names

MODIFICATION GUIDE:
------------------
- CHARACTER_* bounds: keep in sync with the form collaborator's input limits
- GEMINI_* defaults: check provider documentation before changing
"""

from typing import Final

# =============================================================================
# REQUEST VALIDATION
# =============================================================================

CHARACTER_NAME_MIN_LENGTH: Final[int] = 2
"""Minimum favorite character length after trimming."""

CHARACTER_NAME_MAX_LENGTH: Final[int] = 60
"""Maximum favorite character length after trimming."""

PHOTO_DATA_MIN_LENGTH: Final[int] = 16
"""Minimum base64 photo payload length; shorter payloads are garbage."""


# =============================================================================
# GEMINI PROVIDER
# =============================================================================

GEMINI_API_BASE_URL: Final[str] = "https://generativelanguage.googleapis.com/v1beta/models"
"""Base URL of the generateContent endpoint (model is appended)."""

DEFAULT_TEXT_MODEL: Final[str] = "gemini-flash-latest"
"""Model used for story text when none is configured."""

DEFAULT_IMAGE_MODEL: Final[str] = "gemini-3.1-flash-image-preview"
"""Model used for the illustration when none is configured."""

PROVIDER_TIMEOUT_SECONDS: Final[float] = 60.0
"""Deadline for a single provider call."""

STORY_TEMPERATURE: Final[float] = 0.9
"""Sampling temperature for story text; favors creativity."""


# =============================================================================
# CONFIGURATION VARIABLES
# =============================================================================

ENV_TEXT_API_KEY: Final[str] = "GEMINI_API_KEY"
ENV_IMAGE_API_KEY: Final[str] = "NANO_BANANA_API_KEY"
ENV_TEXT_MODEL: Final[str] = "GEMINI_TEXT_MODEL"
ENV_IMAGE_MODEL: Final[str] = "NANO_BANANA_MODEL"
ENV_IMAGE_MODEL_ALT: Final[str] = "GEMINI_IMAGE_MODEL"
