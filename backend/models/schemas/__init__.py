"""Pydantic contracts shared by the extractor, analyzer and API layers."""

from models.schemas.assistant_context import AssistantContext, ChatMessage
from models.schemas.gap_analysis import GapAnalysisResult
from models.schemas.role import RoleDefinition, RoleRequirement
from models.schemas.skill import SkillCategory, SkillDefinition

__all__ = [
    "AssistantContext",
    "ChatMessage",
    "GapAnalysisResult",
    "RoleDefinition",
    "RoleRequirement",
    "SkillCategory",
    "SkillDefinition",
]
