"""Skill vocabulary entries: the canonical skills every other stage refers to."""

from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class SkillCategory(str, Enum):
    """Fixed skill categories. Declaration order is the reporting order."""
    LANGUAGE = "language"
    FRAMEWORK = "framework"
    TOOL = "tool"
    SOFT = "soft"


class SkillDefinition(BaseModel):
    """A single canonical skill.

    `id` is the only stable handle used downstream; `display_label` and
    `aliases` are surface forms the extractor matches against.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    display_label: str = Field(
        ..., validation_alias=AliasChoices("display_label", "displayLabel", "label")
    )
    aliases: tuple[str, ...] = ()  # e.g. ("js", "ecmascript")
    category: SkillCategory
