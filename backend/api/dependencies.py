"""Shared dependencies for API routes."""

from functools import lru_cache

from config import settings
from services.reference_data import ReferenceData, load_reference_data


@lru_cache(maxsize=1)
def get_reference_data() -> ReferenceData:
    """Load the vocabulary and roles once; integrity errors surface on first use."""
    return load_reference_data(settings.skills_file, settings.roles_file)
