"""Story generation - validation, prompting, extraction and orchestration."""

from .extractor import ImagePayload, StoryPayload, extract_image, extract_story
from .models import Photo, StoryMetadata, StoryRequest, StoryResult
from .orchestrator import StoryOrchestrator
from .prompts import build_image_prompt, build_story_prompt
from .service import create_story, create_story_from_json, get_missing_api_keys
from .validators import validate_story_request

__all__ = [
    # Models
    "Photo",
    "StoryRequest",
    "StoryMetadata",
    "StoryResult",
    "StoryPayload",
    "ImagePayload",
    # Operations
    "validate_story_request",
    "build_story_prompt",
    "build_image_prompt",
    "extract_story",
    "extract_image",
    "StoryOrchestrator",
    # Entry points
    "create_story",
    "create_story_from_json",
    "get_missing_api_keys",
]
