"""Gap Analyzer output: the single read-only value handed to presentation and the assistant."""

from pydantic import BaseModel, ConfigDict, Field

from models.schemas.skill import SkillCategory


class GapAnalysisResult(BaseModel):
    """Comparison of a user's canonical skills against one role.

    All skill ids are canonical. `matched_skills` and `missing_skills` follow
    the role's requirement order; `normalized_user_skills` follows the order
    the caller supplied. `missing_skills_by_category` always carries every
    SkillCategory key.
    """
    model_config = ConfigDict(frozen=True)

    role_id: str
    normalized_user_skills: tuple[str, ...] = ()
    matched_skills: tuple[str, ...] = ()
    missing_skills: tuple[str, ...] = ()
    readiness_percent: int = Field(0, ge=0, le=100)
    weighted_readiness_percent: int = Field(0, ge=0, le=100)
    missing_skills_by_category: dict[SkillCategory, tuple[str, ...]] = {}
