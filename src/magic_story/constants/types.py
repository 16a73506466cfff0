"""Enumerations for story preferences.

This module contains the closed vocabularies a story request may use:
- AgeGroup    : reading level of the child
- StoryStyle  : narrative setting of the story
- PhotoMimeType : accepted upload formats for the child photo

The enum values are the exact wire literals sent by the form collaborator.
"""

from enum import Enum


class AgeGroup(str, Enum):
    """Age group the story is written for."""

    TODDLER = "3-5"
    """Short sentences and simple words."""

    EARLY_READER = "6-8"
    """Playful language with easy reading level."""

    PRETEEN = "9-12"
    """Richer vocabulary and stronger plot."""


class StoryStyle(str, Enum):
    """Narrative setting of the story."""

    SPACE_ADVENTURE = "space-adventure"
    FAIRY_TALE = "fairy-tale"
    JUNGLE_QUEST = "jungle-quest"
    UNDERWATER_MISSION = "underwater-mission"

    @property
    def label(self) -> str:
        """Display label shown in selection widgets."""
        return STORY_STYLE_LABELS[self]


STORY_STYLE_LABELS: dict[StoryStyle, str] = {
    StoryStyle.SPACE_ADVENTURE: "Space Adventure",
    StoryStyle.FAIRY_TALE: "Fairy Tale",
    StoryStyle.JUNGLE_QUEST: "Jungle Quest",
    StoryStyle.UNDERWATER_MISSION: "Underwater Mission",
}


class PhotoMimeType(str, Enum):
    """Accepted MIME types for the child photo."""

    JPEG = "image/jpeg"
    PNG = "image/png"
    WEBP = "image/webp"
