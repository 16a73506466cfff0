"""Provider configuration loading and validation.

Configuration is resolved once at process start with ``load_story_config``
and handed to the story service; core code never reads the environment.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from ..constants import (
    DEFAULT_IMAGE_MODEL,
    DEFAULT_TEXT_MODEL,
    ENV_IMAGE_API_KEY,
    ENV_IMAGE_MODEL,
    ENV_IMAGE_MODEL_ALT,
    ENV_TEXT_API_KEY,
    ENV_TEXT_MODEL,
    GEMINI_API_BASE_URL,
    PROVIDER_TIMEOUT_SECONDS,
)


class ProviderSettings(BaseModel):
    """Transport settings for the Gemini endpoint."""

    model_config = ConfigDict(frozen=True)

    base_url: str = GEMINI_API_BASE_URL
    timeout_seconds: float = PROVIDER_TIMEOUT_SECONDS


class ProviderCredentials(BaseModel):
    """API keys and model names for the two provider calls.

    Either key alone is enough: the text call falls back to the image key
    and the image call falls back to the text key.
    """

    model_config = ConfigDict(frozen=True)

    text_api_key: str | None = None
    image_api_key: str | None = None
    text_model: str | None = None
    image_model: str | None = None

    def get_text_api_key(self) -> str | None:
        """Key used for the story text call."""
        return self.text_api_key or self.image_api_key or None

    def get_image_api_key(self) -> str | None:
        """Key used for the illustration call."""
        return self.image_api_key or self.text_api_key or None

    def get_text_model(self) -> str:
        return self.text_model or DEFAULT_TEXT_MODEL

    def get_image_model(self) -> str:
        return self.image_model or DEFAULT_IMAGE_MODEL

    def missing_keys(self) -> list[str]:
        """Configuration variables that must be set before generating."""
        if not self.text_api_key and not self.image_api_key:
            return [ENV_TEXT_API_KEY]
        return []


class StoryConfig(BaseModel):
    """Full configuration for the story service."""

    model_config = ConfigDict(frozen=True)

    provider_settings: ProviderSettings = Field(default_factory=ProviderSettings)
    credentials: ProviderCredentials = Field(default_factory=ProviderCredentials)


def _env_value(environ: Mapping[str, str], *names: str) -> str | None:
    """First non-empty value among the given variable names."""
    for name in names:
        value = environ.get(name)
        if value:
            return value
    return None


def load_story_config(
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> StoryConfig:
    """Load configuration from an optional YAML file and the environment.

    The YAML file may hold ``provider_settings`` and ``credentials`` sections;
    environment variables override model names and supply the API keys.

    Args:
        config_path: YAML file. Defaults to ``config/story.yaml`` in the
            working directory; a missing file is not an error.
        environ: Variables to read. Defaults to ``os.environ`` after loading
            a ``.env`` file.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    if config_path is None:
        config_path = Path.cwd() / "config" / "story.yaml"

    data: dict = {}
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

    file_credentials = data.get("credentials") or {}
    credentials = ProviderCredentials(
        text_api_key=_env_value(environ, ENV_TEXT_API_KEY) or file_credentials.get("text_api_key"),
        image_api_key=_env_value(environ, ENV_IMAGE_API_KEY) or file_credentials.get("image_api_key"),
        text_model=_env_value(environ, ENV_TEXT_MODEL) or file_credentials.get("text_model"),
        image_model=(
            _env_value(environ, ENV_IMAGE_MODEL, ENV_IMAGE_MODEL_ALT)
            or file_credentials.get("image_model")
        ),
    )

    return StoryConfig(
        provider_settings=ProviderSettings(**(data.get("provider_settings") or {})),
        credentials=credentials,
    )
