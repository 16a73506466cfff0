"""Tests for the magic-story command-line collaborator."""

from __future__ import annotations

import base64
import json
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from PIL import Image
from typer.testing import CliRunner

from magic_story.cli.app import app
from magic_story.cli.service import (
    build_request_payload,
    decode_data_uri,
    detect_mime_type,
    load_photo_payload,
    save_illustration,
)
from magic_story.constants import AgeGroup, StoryStyle
from magic_story.core.types import Failure, Success
from magic_story.story.models import StoryMetadata, StoryResult

runner = CliRunner()

PNG_PIXEL_URI = "data:image/png;base64," + base64.b64encode(b"\x89PNG fake bytes").decode("ascii")


@pytest.fixture
def photo_path(tmp_path: Path) -> Path:
    """A real PNG on disk."""
    path = tmp_path / "kid.png"
    Image.new("RGB", (8, 8), color=(255, 200, 0)).save(path, format="PNG")
    return path


@pytest.fixture
def story_result() -> StoryResult:
    return StoryResult(
        title="Dragon in Space",
        story_text="Once...\n\nThe end.",
        image_url=PNG_PIXEL_URI,
        metadata=StoryMetadata(
            age_group=AgeGroup.EARLY_READER,
            story_style=StoryStyle.SPACE_ADVENTURE,
            favorite_character="A brave dragon",
        ),
    )


@pytest.fixture
def no_env_keys(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr("magic_story.providers.config.load_dotenv", lambda: False)
    for name in ["GEMINI_API_KEY", "NANO_BANANA_API_KEY"]:
        monkeypatch.delenv(name, raising=False)


# =============================================================================
# Service helpers
# =============================================================================


class TestPhotoLoading:
    """Tests for photo loading helpers."""

    @pytest.mark.parametrize("image_format,mime_type", [
        ("PNG", "image/png"),
        ("JPEG", "image/jpeg"),
        ("WEBP", "image/webp"),
    ])
    def test_detect_mime_type(self, tmp_path: Path, image_format: str, mime_type: str):
        path = tmp_path / "photo"
        Image.new("RGB", (4, 4)).save(path, format=image_format)

        assert detect_mime_type(path.read_bytes()) == mime_type

    def test_unsupported_format(self, tmp_path: Path):
        path = tmp_path / "photo.gif"
        Image.new("RGB", (4, 4)).save(path, format="GIF")

        assert detect_mime_type(path.read_bytes()) == "application/octet-stream"

    def test_not_an_image(self):
        assert detect_mime_type(b"hello world") == "application/octet-stream"

    def test_load_photo_payload(self, photo_path: Path):
        payload = load_photo_payload(photo_path)

        assert payload["mimeType"] == "image/png"
        assert payload["fileName"] == "kid.png"
        assert base64.b64decode(payload["base64Data"]) == photo_path.read_bytes()

    def test_build_request_payload(self, photo_path: Path):
        payload = build_request_payload(photo_path, "3-5", "Bunny", "fairy-tale")

        assert payload["ageGroup"] == "3-5"
        assert payload["favoriteCharacter"] == "Bunny"
        assert payload["storyStyle"] == "fairy-tale"
        assert payload["childPhoto"]["mimeType"] == "image/png"


class TestIllustrationSaving:
    """Tests for data URI decoding and saving."""

    def test_decode_data_uri(self):
        mime_type, data = decode_data_uri("data:image/webp;base64,aGVsbG8=")

        assert mime_type == "image/webp"
        assert data == b"hello"

    @pytest.mark.parametrize("uri", [
        "https://example.com/image.png",
        "data:image/png,plain",
        "data:image/png;base64,@@@",
    ])
    def test_decode_rejects_invalid(self, uri: str):
        with pytest.raises(ValueError):
            decode_data_uri(uri)

    def test_save_adds_suffix(self, tmp_path: Path):
        saved = save_illustration(PNG_PIXEL_URI, tmp_path / "out" / "story")

        assert saved == tmp_path / "out" / "story.png"
        assert saved.read_bytes() == b"\x89PNG fake bytes"

    def test_save_keeps_suffix(self, tmp_path: Path):
        saved = save_illustration(PNG_PIXEL_URI, tmp_path / "cover.img")

        assert saved.name == "cover.img"


# =============================================================================
# Commands
# =============================================================================


class TestGenerateCommand:
    """Tests for `magic-story generate`."""

    def test_prints_story(self, photo_path: Path, story_result: StoryResult, no_env_keys):
        with patch(
            "magic_story.cli.commands.create_story",
            AsyncMock(return_value=Success(story_result)),
        ) as mock_create:
            result = runner.invoke(app, [
                "generate", "--photo", str(photo_path), "--character", "A brave dragon",
            ])

        assert result.exit_code == 0, result.output
        assert "Dragon in Space" in result.output
        payload = mock_create.await_args.args[0]
        assert payload["ageGroup"] == "6-8"
        assert payload["storyStyle"] == "space-adventure"
        assert payload["childPhoto"]["mimeType"] == "image/png"

    def test_json_and_image_out(self, photo_path: Path, story_result: StoryResult, tmp_path: Path, no_env_keys):
        image_out = tmp_path / "illustration"

        with patch(
            "magic_story.cli.commands.create_story",
            AsyncMock(return_value=Success(story_result)),
        ):
            result = runner.invoke(app, [
                "generate", "-p", str(photo_path), "-c", "A brave dragon",
                "--json", "--image-out", str(image_out),
            ])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["storyText"] == "Once...\n\nThe end."
        assert (tmp_path / "illustration.png").read_bytes() == b"\x89PNG fake bytes"

    def test_malformed_illustration_exits_1(self, photo_path: Path, story_result: StoryResult, tmp_path: Path, no_env_keys):
        broken = story_result.model_copy(update={"image_url": "https://example.com/image.png"})

        with patch(
            "magic_story.cli.commands.create_story",
            AsyncMock(return_value=Success(broken)),
        ):
            result = runner.invoke(app, [
                "generate", "-p", str(photo_path), "-c", "A brave dragon",
                "--image-out", str(tmp_path / "illustration"),
            ])

        assert result.exit_code == 1
        assert "Could not save illustration" in result.output
        assert not isinstance(result.exception, ValueError)
        assert not list(tmp_path.glob("illustration*"))

    def test_failure_exits_1(self, photo_path: Path, no_env_keys):
        failure = Failure(
            "Missing Gemini API key for story generation.",
            {"kind": "configuration", "missing_keys": ["GEMINI_API_KEY"]},
        )

        with patch("magic_story.cli.commands.create_story", AsyncMock(return_value=failure)):
            result = runner.invoke(app, [
                "generate", "--photo", str(photo_path), "--character", "Dragon",
            ])

        assert result.exit_code == 1
        assert "Missing Gemini API key" in result.output
        assert "GEMINI_API_KEY" in result.output

    def test_missing_photo_file(self, tmp_path: Path):
        result = runner.invoke(app, [
            "generate", "--photo", str(tmp_path / "nope.png"), "--character", "Dragon",
        ])

        assert result.exit_code != 0


class TestCheckConfigCommand:
    """Tests for `magic-story check-config`."""

    def test_missing_keys(self, tmp_path: Path, no_env_keys):
        result = runner.invoke(app, ["check-config", "--config", str(tmp_path / "none.yaml")])

        assert result.exit_code == 1
        assert "GEMINI_API_KEY" in result.output

    def test_ready(self, tmp_path: Path, no_env_keys, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("NANO_BANANA_API_KEY", "secret-value")

        result = runner.invoke(app, ["check-config", "--config", str(tmp_path / "none.yaml")])

        assert result.exit_code == 0
        assert "Ready for live generation" in result.output
        assert "secret-value" not in result.output


class TestStylesCommand:
    """Tests for `magic-story styles`."""

    def test_lists_options(self):
        result = runner.invoke(app, ["styles"])

        assert result.exit_code == 0
        assert "underwater-mission" in result.output
        assert "Fairy Tale" in result.output
        assert "9-12" in result.output
