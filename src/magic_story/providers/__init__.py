"""AI providers - Gemini content generation client and configuration."""

from .config import ProviderCredentials, ProviderSettings, StoryConfig, load_story_config
from .envelope import GenerationEnvelope, InlineData, Part
from .gemini import GeminiClient

__all__ = [
    "GeminiClient",
    "GenerationEnvelope",
    "InlineData",
    "Part",
    "ProviderCredentials",
    "ProviderSettings",
    "StoryConfig",
    "load_story_config",
]
