"""Skill extraction from LinkedIn profile text pasted by the user."""

import re
from collections.abc import Sequence

from models.schemas.skill import SkillDefinition
from services.skill_extractor import extract_skills

_WHITESPACE_RE = re.compile(r"\s+")


def clean_profile_text(text: str) -> str:
    """Collapse the ragged whitespace a copy from a profile page leaves behind."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def extract_skills_from_profile_text(text: str, vocabulary: Sequence[SkillDefinition]) -> list[str]:
    """Extract canonical skill ids from pasted profile text.

    Raises ValueError when nothing was pasted; finding no skills is not an error.
    """
    if not text or not text.strip():
        raise ValueError("Please paste some text from your LinkedIn profile.")
    return extract_skills(clean_profile_text(text), vocabulary)
