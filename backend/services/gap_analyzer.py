"""Gap analysis: compare a user's canonical skills against a role's requirements.

Pure computation over validated reference data. Produces both a count-based
readiness and an importance-weighted readiness, plus the missing skills
grouped by vocabulary category.
"""

import logging
from collections.abc import Iterable, Sequence

from models.schemas.gap_analysis import GapAnalysisResult
from models.schemas.role import RoleDefinition
from models.schemas.skill import SkillCategory, SkillDefinition

logger = logging.getLogger(__name__)


def _percent(part: int, whole: int) -> int:
    """Integer percentage; a role with nothing to satisfy is fully satisfied."""
    if whole == 0:
        return 100
    return round(100 * part / whole)


def normalize_user_skills(user_skill_ids: Iterable[str], vocabulary: Sequence[SkillDefinition]) -> list[str]:
    """Keep only ids known to the vocabulary, deduplicated, in caller order."""
    known = {skill.id for skill in vocabulary}
    normalized: list[str] = []
    seen: set[str] = set()
    for skill_id in user_skill_ids:
        if skill_id in known and skill_id not in seen:
            normalized.append(skill_id)
            seen.add(skill_id)
    return normalized


def analyze(
    user_skill_ids: Iterable[str],
    role: RoleDefinition,
    vocabulary: Sequence[SkillDefinition],
) -> GapAnalysisResult:
    """Run a gap analysis of the user's skills against one role.

    Role requirements are assumed to reference vocabulary ids; the loader
    enforces that before any analysis runs.
    """
    normalized = normalize_user_skills(user_skill_ids, vocabulary)
    have = set(normalized)
    categories = {skill.id: skill.category for skill in vocabulary}

    matched: list[str] = []
    missing: list[str] = []
    by_category: dict[SkillCategory, list[str]] = {category: [] for category in SkillCategory}
    matched_weight = 0
    total_weight = 0

    for requirement in role.requirements:
        total_weight += requirement.importance
        if requirement.skill_id in have:
            matched.append(requirement.skill_id)
            matched_weight += requirement.importance
        else:
            missing.append(requirement.skill_id)
            by_category[categories[requirement.skill_id]].append(requirement.skill_id)

    readiness = _percent(len(matched), len(role.requirements))
    weighted_readiness = _percent(matched_weight, total_weight)

    logger.debug(
        "Role %s: matched %d/%d requirements (readiness=%d, weighted=%d)",
        role.id, len(matched), len(role.requirements), readiness, weighted_readiness,
    )

    return GapAnalysisResult(
        role_id=role.id,
        normalized_user_skills=tuple(normalized),
        matched_skills=tuple(matched),
        missing_skills=tuple(missing),
        readiness_percent=readiness,
        weighted_readiness_percent=weighted_readiness,
        missing_skills_by_category={category: tuple(ids) for category, ids in by_category.items()},
    )
