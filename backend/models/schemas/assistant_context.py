"""Closed user context record consumed by the assistant prompt builder."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

from models.schemas.gap_analysis import GapAnalysisResult
from models.schemas.role import RoleDefinition

ExperienceLevel = Literal["student", "recent-grad", "career-switcher", "other"]


class AssistantContext(BaseModel):
    """Everything the assistant may know about the user.

    Unknown fields are rejected rather than carried along.
    """
    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    school: str | None = None
    graduation_year: str | None = None
    experience_level: ExperienceLevel | None = None
    dream_role: str | None = None
    user_skills: list[str] = []
    role: RoleDefinition | None = None
    gap_analysis: GapAnalysisResult | None = None


class ChatMessage(BaseModel):
    role: Literal["user", "assistant"]
    content: str
