"""
Tech Tag Mapper Skill

Canonical tag vocabulary and project tag extraction.
Maps free-text stack values to canonical tags, case-insensitively.
"""

from .definition import (
    ProjectProfile,
    StackExtras,
    TechTag,
)

from .impl import (
    PROJECT_STACK_FIELDS,
    STACK_EXTRAS_FIELDS,
    TECH_TAG_MAP,
    TechTagMapper,
    extract_project_tags,
    normalize_tag,
)

__all__ = [
    # Classes
    "TechTagMapper",
    # Models
    "ProjectProfile",
    "StackExtras",
    "TechTag",
    # Functions
    "extract_project_tags",
    "normalize_tag",
    # Constants
    "PROJECT_STACK_FIELDS",
    "STACK_EXTRAS_FIELDS",
    "TECH_TAG_MAP",
]
