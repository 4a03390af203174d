"""Shared test configuration and fixtures."""

import pytest

from models.schemas import RoleDefinition, RoleRequirement, SkillCategory, SkillDefinition


@pytest.fixture
def vocabulary() -> list[SkillDefinition]:
    return [
        SkillDefinition(id="js", display_label="JavaScript", aliases=("ecmascript",), category=SkillCategory.LANGUAGE),
        SkillDefinition(id="java", display_label="Java", category=SkillCategory.LANGUAGE),
        SkillDefinition(id="cpp", display_label="C++", category=SkillCategory.LANGUAGE),
        SkillDefinition(id="csharp", display_label="C#", category=SkillCategory.LANGUAGE),
        SkillDefinition(id="c", display_label="C", category=SkillCategory.LANGUAGE),
        SkillDefinition(id="react", display_label="React", aliases=("react.js", "reactjs"), category=SkillCategory.FRAMEWORK),
        SkillDefinition(id="docker", display_label="Docker", category=SkillCategory.TOOL),
        SkillDefinition(id="git", display_label="Git", aliases=("version control",), category=SkillCategory.TOOL),
        SkillDefinition(id="teamwork", display_label="Teamwork", aliases=("collaboration",), category=SkillCategory.SOFT),
    ]


@pytest.fixture
def frontend_role() -> RoleDefinition:
    return RoleDefinition(
        id="frontend-dev",
        name="Frontend Developer",
        description="Builds user interfaces.",
        requirements=(
            RoleRequirement(skill_id="js", importance=3),
            RoleRequirement(skill_id="react", importance=2),
            RoleRequirement(skill_id="git", importance=2),
            RoleRequirement(skill_id="docker", importance=1),
            RoleRequirement(skill_id="teamwork", importance=1),
        ),
    )


@pytest.fixture
def client():
    """API client with rate limiting switched off."""
    from fastapi.testclient import TestClient

    from api.router import limiter
    from main import app

    limiter.enabled = False
    try:
        yield TestClient(app)
    finally:
        limiter.enabled = True
