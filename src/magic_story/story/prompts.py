"""Prompt construction for the story text and illustration calls."""

from __future__ import annotations

from ..constants import AgeGroup, StoryStyle
from .models import StoryRequest

AGE_GROUP_GUIDANCE: dict[AgeGroup, str] = {
    AgeGroup.TODDLER: (
        "Use short sentences, simple words, gentle pacing, and a warm reassuring tone."
    ),
    AgeGroup.EARLY_READER: (
        "Use playful language, clear action, and a few descriptive details with easy reading level."
    ),
    AgeGroup.PRETEEN: (
        "Use richer vocabulary, stronger plot progression, and imaginative details "
        "while staying kid-safe."
    ),
}

STYLE_GUIDANCE: dict[StoryStyle, str] = {
    StoryStyle.SPACE_ADVENTURE: (
        "Set the story in a colorful space adventure with wonder and teamwork."
    ),
    StoryStyle.FAIRY_TALE: (
        "Write as a modern fairy tale with kindness, magic, and a happy ending."
    ),
    StoryStyle.JUNGLE_QUEST: (
        "Set the story in a lively jungle quest with animal friends and discovery."
    ),
    StoryStyle.UNDERWATER_MISSION: (
        "Set the story in an underwater mission with friendly sea creatures and bright scenery."
    ),
}


def build_story_prompt(request: StoryRequest) -> str:
    """Render the instruction for the story text call."""
    return "\n".join([
        "Write a personalized children's story.",
        "Requirements:",
        f"- Age group: {request.age_group.value}",
        f"- Favorite character: {request.favorite_character}",
        f"- Story style: {request.story_style.value}",
        f"- {AGE_GROUP_GUIDANCE[request.age_group]}",
        f"- {STYLE_GUIDANCE[request.story_style]}",
        "- Keep the story kid-safe, positive, non-scary, and encouraging.",
        "- Include a clear beginning, middle, and end.",
        "- Return a short title and the story text.",
    ])


def build_image_prompt(request: StoryRequest) -> str:
    """Render the instruction for the illustration call.

    The child photo travels as a separate inline part; this text only tells
    the model how to use it.
    """
    return " ".join([
        "Create a bright, playful children's book illustration.",
        f"Theme: {request.story_style.value}",
        f"Feature the child's favorite character: {request.favorite_character}.",
        "Use a friendly, colorful, non-scary style with soft shapes and clear facial expressions.",
        "Use the provided child photo only as reference for likeness and keep the image age-appropriate.",
    ])
