"""Target role definitions and their weighted skill requirements."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class RoleRequirement(BaseModel):
    """One required skill of a role. Importance 3 is the most important."""
    model_config = ConfigDict(frozen=True)

    skill_id: str = Field(..., validation_alias=AliasChoices("skill_id", "skillId"))
    importance: int = Field(..., ge=1, le=3)


class RoleDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    description: str = ""
    responsibilities: tuple[str, ...] = ()
    requirements: tuple[RoleRequirement, ...] = Field(
        (), validation_alias=AliasChoices("requirements", "requiredSkills", "required_skills")
    )
