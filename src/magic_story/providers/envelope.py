"""Canonical model of the Gemini generateContent response envelope.

Gemini answers with camel-case field names (``inlineData``, ``promptFeedback``)
but some gateways and SDK dumps use snake-case (``inline_data``,
``prompt_feedback``). Both are accepted here and normalized into one shape, so
the extractor only ever sees these models.

Malformed leaves (a non-string ``text``, a part that is not an object) are
dropped instead of failing the whole envelope.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator


def _string_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _mapping_or_none(value: Any) -> Any:
    return value if isinstance(value, Mapping) else None


def _mappings_only(value: Any) -> list[Any]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, Mapping)]


_INLINE_DATA_KEYS = ("inlineData", "inline_data")
_FEEDBACK_KEYS = ("promptFeedback", "prompt_feedback")


def _first_block_reason(data: Mapping[str, Any]) -> str | None:
    """Block reason from the first populated feedback path.

    Checked in order: ``promptFeedback.blockReason``,
    ``promptFeedback.block_reason``, ``prompt_feedback.block_reason``.
    """
    camel = data.get("promptFeedback")
    snake = data.get("prompt_feedback")
    paths = [(camel, "blockReason"), (camel, "block_reason"), (snake, "block_reason")]

    for feedback, key in paths:
        if not isinstance(feedback, Mapping):
            continue
        value = feedback.get(key)
        if isinstance(value, str) and value:
            return value
    return None


class _EnvelopeModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class InlineData(_EnvelopeModel):
    """Binary payload carried inline as base64 text."""

    mime_type: str | None = Field(
        default=None, validation_alias=AliasChoices("mimeType", "mime_type")
    )
    data: str | None = None

    @field_validator("mime_type", "data", mode="before")
    @classmethod
    def strings_only(cls, value: Any) -> str | None:
        return _string_or_none(value)

    @property
    def is_usable(self) -> bool:
        return bool(self.mime_type) and bool(self.data)


class Part(_EnvelopeModel):
    """A single content part: text or inline binary data."""

    text: str | None = None
    inline_data: InlineData | None = Field(
        default=None, validation_alias=AliasChoices("inlineData", "inline_data")
    )

    @model_validator(mode="before")
    @classmethod
    def pick_inline_data(cls, data: Any) -> Any:
        """Keep the first usable of ``inlineData`` and ``inline_data``.

        A part may carry both spellings; an unusable camel-case payload must
        not hide a usable snake-case one.
        """
        if not isinstance(data, Mapping):
            return data

        variants = [data.get(key) for key in _INLINE_DATA_KEYS]
        mappings = [variant for variant in variants if isinstance(variant, Mapping)]
        if not mappings:
            return data

        chosen = next(
            (variant for variant in mappings if InlineData.model_validate(variant).is_usable),
            mappings[0],
        )
        normalized = {key: value for key, value in data.items() if key not in _INLINE_DATA_KEYS}
        normalized["inlineData"] = chosen
        return normalized

    @field_validator("text", mode="before")
    @classmethod
    def text_only(cls, value: Any) -> str | None:
        return _string_or_none(value)

    @field_validator("inline_data", mode="before")
    @classmethod
    def inline_mapping(cls, value: Any) -> Any:
        return _mapping_or_none(value)


class Content(_EnvelopeModel):
    parts: list[Part] = Field(default_factory=list)

    @field_validator("parts", mode="before")
    @classmethod
    def part_mappings(cls, value: Any) -> list[Any]:
        return _mappings_only(value)


class Candidate(_EnvelopeModel):
    content: Content | None = None
    finish_reason: str | None = Field(
        default=None, validation_alias=AliasChoices("finishReason", "finish_reason")
    )

    @field_validator("content", mode="before")
    @classmethod
    def content_mapping(cls, value: Any) -> Any:
        return _mapping_or_none(value)

    @field_validator("finish_reason", mode="before")
    @classmethod
    def finish_reason_string(cls, value: Any) -> str | None:
        return _string_or_none(value)


class PromptFeedback(_EnvelopeModel):
    block_reason: str | None = Field(
        default=None, validation_alias=AliasChoices("blockReason", "block_reason")
    )

    @field_validator("block_reason", mode="before")
    @classmethod
    def block_reason_string(cls, value: Any) -> str | None:
        return _string_or_none(value)


class GenerationEnvelope(_EnvelopeModel):
    """Normalized generateContent response."""

    candidates: list[Candidate] = Field(default_factory=list)
    prompt_feedback: PromptFeedback | None = Field(
        default=None, validation_alias=AliasChoices("promptFeedback", "prompt_feedback")
    )

    @model_validator(mode="before")
    @classmethod
    def resolve_prompt_feedback(cls, data: Any) -> Any:
        """Fold both feedback spellings into one canonical block reason."""
        if not isinstance(data, Mapping):
            return data

        if not any(isinstance(data.get(key), Mapping) for key in _FEEDBACK_KEYS):
            return data

        normalized = {key: value for key, value in data.items() if key not in _FEEDBACK_KEYS}
        normalized["promptFeedback"] = {"blockReason": _first_block_reason(data)}
        return normalized

    @field_validator("candidates", mode="before")
    @classmethod
    def candidate_mappings(cls, value: Any) -> list[Any]:
        return _mappings_only(value)

    @field_validator("prompt_feedback", mode="before")
    @classmethod
    def feedback_mapping(cls, value: Any) -> Any:
        return _mapping_or_none(value)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "GenerationEnvelope":
        """Build the canonical envelope from a decoded JSON body."""
        return cls.model_validate(dict(payload))

    @property
    def block_reason(self) -> str | None:
        """Prompt-level block reason, if the provider refused the prompt."""
        if self.prompt_feedback is None:
            return None
        return self.prompt_feedback.block_reason or None

    def first_candidate_parts(self) -> list[Part]:
        """Parts of the first candidate; later candidates are ignored."""
        if not self.candidates:
            return []
        content = self.candidates[0].content
        return list(content.parts) if content else []
