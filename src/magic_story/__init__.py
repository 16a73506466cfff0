"""Magic Story - personalized children's stories and illustrations from Gemini."""

from .core.types import Failure, Result, Success
from .providers.config import StoryConfig, load_story_config
from .story import StoryResult, create_story, create_story_from_json

__version__ = "0.1.0"

__all__ = [
    "Failure",
    "Result",
    "Success",
    "StoryConfig",
    "StoryResult",
    "create_story",
    "create_story_from_json",
    "load_story_config",
]
