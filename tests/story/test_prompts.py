"""Unit tests for story and image prompt builders."""

from __future__ import annotations

from dataclasses import replace

import pytest

from magic_story.constants import AgeGroup, StoryStyle
from magic_story.story.models import StoryRequest
from magic_story.story.prompts import (
    AGE_GROUP_GUIDANCE,
    STYLE_GUIDANCE,
    build_image_prompt,
    build_story_prompt,
)


class TestBuildStoryPrompt:
    """Tests for build_story_prompt."""

    def test_restates_request_fields(self, story_request: StoryRequest):
        prompt = build_story_prompt(story_request)

        assert prompt.startswith("Write a personalized children's story.")
        assert "- Age group: 6-8" in prompt
        assert "- Favorite character: A brave dragon" in prompt
        assert "- Story style: space-adventure" in prompt

    def test_includes_safety_and_structure(self, story_request: StoryRequest):
        prompt = build_story_prompt(story_request)

        assert "kid-safe, positive, non-scary" in prompt
        assert "clear beginning, middle, and end" in prompt
        assert "short title and the story text" in prompt

    @pytest.mark.parametrize("age_group", list(AgeGroup))
    def test_age_guidance_selected(self, story_request: StoryRequest, age_group: AgeGroup):
        prompt = build_story_prompt(replace(story_request, age_group=age_group))

        assert AGE_GROUP_GUIDANCE[age_group] in prompt
        for other in AgeGroup:
            if other is not age_group:
                assert AGE_GROUP_GUIDANCE[other] not in prompt

    @pytest.mark.parametrize("style", list(StoryStyle))
    def test_style_guidance_selected(self, story_request: StoryRequest, style: StoryStyle):
        prompt = build_story_prompt(replace(story_request, story_style=style))

        assert STYLE_GUIDANCE[style] in prompt

    def test_deterministic(self, story_request: StoryRequest):
        assert build_story_prompt(story_request) == build_story_prompt(story_request)

    def test_every_option_has_guidance(self):
        assert set(AGE_GROUP_GUIDANCE) == set(AgeGroup)
        assert set(STYLE_GUIDANCE) == set(StoryStyle)


class TestBuildImagePrompt:
    """Tests for build_image_prompt."""

    def test_theme_and_subject(self, story_request: StoryRequest):
        prompt = build_image_prompt(story_request)

        assert prompt.startswith("Create a bright, playful children's book illustration.")
        assert "Theme: space-adventure" in prompt
        assert "favorite character: A brave dragon." in prompt

    def test_photo_used_only_for_likeness(self, story_request: StoryRequest):
        prompt = build_image_prompt(story_request)

        assert "only as reference for likeness" in prompt
        assert "age-appropriate" in prompt

    def test_single_line(self, story_request: StoryRequest):
        assert "\n" not in build_image_prompt(story_request)

    def test_photo_data_not_embedded(self, story_request: StoryRequest):
        assert story_request.child_photo.base64_data not in build_image_prompt(story_request)
