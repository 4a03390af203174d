"""Loader for the skill vocabulary and role tables.

Parses the JSON reference files into frozen schemas and enforces the
integrity rules the extractor and analyzer rely on:
- skill ids are unique
- role ids are unique
- every role requirement references a known skill id, at most once per role

All problems are collected and reported together as one ReferenceDataError,
before any analysis runs.
"""

import json
import logging
from collections import Counter
from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from models.schemas.role import RoleDefinition
from models.schemas.skill import SkillDefinition

logger = logging.getLogger(__name__)

_skills_adapter = TypeAdapter(tuple[SkillDefinition, ...])
_roles_adapter = TypeAdapter(tuple[RoleDefinition, ...])


class ReferenceDataError(ValueError):
    """Reference data failed validation; analysis must not run on it."""

    def __init__(self, problems: Sequence[str]):
        self.problems = list(problems)
        super().__init__("Invalid reference data: " + "; ".join(self.problems))


class ReferenceData(BaseModel):
    """Validated vocabulary and roles, immutable once loaded."""
    model_config = ConfigDict(frozen=True)

    skills: tuple[SkillDefinition, ...]
    roles: tuple[RoleDefinition, ...]

    def skill(self, skill_id: str) -> SkillDefinition | None:
        return next((s for s in self.skills if s.id == skill_id), None)

    def role(self, role_id: str) -> RoleDefinition | None:
        return next((r for r in self.roles if r.id == role_id), None)


def find_integrity_problems(
    skills: Sequence[SkillDefinition],
    roles: Sequence[RoleDefinition],
) -> list[str]:
    """Return a human-readable description of every integrity violation."""
    problems: list[str] = []

    skill_counts = Counter(s.id for s in skills)
    for skill_id, count in skill_counts.items():
        if count > 1:
            problems.append(f"duplicate skill id '{skill_id}' ({count} entries)")

    role_counts = Counter(r.id for r in roles)
    for role_id, count in role_counts.items():
        if count > 1:
            problems.append(f"duplicate role id '{role_id}' ({count} entries)")

    for role in roles:
        seen: set[str] = set()
        for req in role.requirements:
            if req.skill_id not in skill_counts:
                problems.append(f"role '{role.id}' requires unknown skill '{req.skill_id}'")
            elif req.skill_id in seen:
                problems.append(f"role '{role.id}' lists skill '{req.skill_id}' more than once")
            seen.add(req.skill_id)

    return problems


def build_reference_data(raw_skills: object, raw_roles: object) -> ReferenceData:
    """Validate already-parsed JSON structures into ReferenceData.

    Accepts either bare lists or the {"skills": [...]} / {"roles": [...]}
    wrappers used by the data files.
    """
    if isinstance(raw_skills, dict):
        raw_skills = raw_skills.get("skills")
    if isinstance(raw_roles, dict):
        raw_roles = raw_roles.get("roles")
    if raw_skills is None or raw_roles is None:
        raise ReferenceDataError(["reference data must contain a 'skills' and a 'roles' array"])

    try:
        skills = _skills_adapter.validate_python(raw_skills)
        roles = _roles_adapter.validate_python(raw_roles)
    except ValidationError as e:
        raise ReferenceDataError([f"schema violation: {err['loc']}: {err['msg']}" for err in e.errors()]) from e

    problems = find_integrity_problems(skills, roles)
    if problems:
        logger.error("Reference data rejected with %d problem(s)", len(problems))
        raise ReferenceDataError(problems)

    return ReferenceData(skills=skills, roles=roles)


def _read_json(path: Path) -> object:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise ReferenceDataError([f"reference file not found: {path}"]) from e
    except json.JSONDecodeError as e:
        raise ReferenceDataError([f"{path.name} is not valid JSON: {e}"]) from e


def load_reference_data(skills_file: Path, roles_file: Path) -> ReferenceData:
    """Load and validate the skills and roles JSON files."""
    data = build_reference_data(_read_json(Path(skills_file)), _read_json(Path(roles_file)))
    logger.info("Loaded %d skills and %d roles", len(data.skills), len(data.roles))
    return data
