"""Vocabulary-driven skill extraction.

Turns free text (resume body, pasted LinkedIn profile, manual entry) into an
ordered list of canonical skill ids:
1. Every label, id and alias becomes a lower-cased candidate pattern
2. Candidates are tried longest first, so "javascript" claims its match
   before "java" is considered
3. Each pattern is escaped and matched as a whole word, case-insensitively
"""

import logging
import re
from collections.abc import Iterable, Sequence
from functools import lru_cache

from models.schemas.skill import SkillDefinition

logger = logging.getLogger(__name__)


def build_candidates(vocabulary: Sequence[SkillDefinition]) -> list[tuple[str, str]]:
    """Flatten the vocabulary into (pattern, skill_id) pairs, longest pattern first.

    The sort is stable: equal-length patterns keep vocabulary order.
    """
    candidates: list[tuple[str, str]] = []
    for skill in vocabulary:
        label = skill.display_label.strip().lower()
        candidates.append((label, skill.id))
        if skill.id.strip().lower() != label:
            candidates.append((skill.id.strip().lower(), skill.id))
        for alias in skill.aliases:
            candidates.append((alias.strip().lower(), skill.id))

    # A blank pattern matches at every position
    candidates = [(pattern, skill_id) for pattern, skill_id in candidates if pattern]
    candidates.sort(key=lambda c: len(c[0]), reverse=True)
    return candidates


def _whole_word(pattern: str) -> re.Pattern:
    # Lookarounds instead of \b so patterns ending in symbols ("c++", "c#") still bound correctly
    return re.compile(rf"(?<!\w){re.escape(pattern)}(?!\w)", re.IGNORECASE)


@lru_cache(maxsize=32)
def _compiled_candidates(vocabulary: tuple[SkillDefinition, ...]) -> tuple[tuple[re.Pattern, str], ...]:
    return tuple((_whole_word(pattern), skill_id) for pattern, skill_id in build_candidates(vocabulary))


def extract_skills(text: str, vocabulary: Sequence[SkillDefinition]) -> list[str]:
    """Extract canonical skill ids mentioned in text.

    Ids appear at most once, in the order they were first matched during the
    longest-pattern-first scan (not vocabulary declaration order). Empty text
    and texts mentioning no known skill both yield [].
    """
    if not text or not text.strip():
        return []

    candidates = _compiled_candidates(tuple(vocabulary))
    found: list[str] = []
    seen: set[str] = set()

    for regex, skill_id in candidates:
        if skill_id in seen:
            continue
        if regex.search(text):
            found.append(skill_id)
            seen.add(skill_id)

    logger.debug("Matched %d skills from %d candidate patterns", len(found), len(candidates))
    return found


def resolve_skill_inputs(raw_inputs: Iterable[str], vocabulary: Sequence[SkillDefinition]) -> list[str]:
    """Resolve manually entered skill chips to canonical ids.

    Each input must equal (case-insensitively) a skill's id, label or one of
    its aliases; no substring matching. Unresolved inputs are dropped.
    """
    lookup: dict[str, str] = {skill.id.strip().lower(): skill.id for skill in vocabulary}
    for skill in vocabulary:
        for form in (skill.display_label, *skill.aliases):
            key = form.strip().lower()
            # Ids outrank surface forms; otherwise the first declaration wins
            if key and key not in lookup:
                lookup[key] = skill.id

    resolved: list[str] = []
    seen: set[str] = set()
    for raw in raw_inputs:
        skill_id = lookup.get(raw.strip().lower())
        if skill_id is None:
            logger.debug("Dropping unrecognized skill input: %r", raw)
            continue
        if skill_id not in seen:
            resolved.append(skill_id)
            seen.add(skill_id)
    return resolved
