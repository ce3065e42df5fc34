"""
Tech Tag Mapper - Implementation

Maps a project's free-text stack fields onto the canonical tag vocabulary.
Features:
- Case-insensitive, exact-match synonym lookup
- Many-to-one synonyms (e.g. "sass", "scss", "sass/scss")
- Ordered, de-duplicated project tag extraction including stack extras
"""

import logging
from typing import Dict, List, Mapping, Optional

from .definition import ProjectProfile, StackExtras, TechTag

logger = logging.getLogger(__name__)


# ============================================================================
# CANONICAL MAPPING DICTIONARY
# ============================================================================

TECH_TAG_MAP: Dict[str, TechTag] = {
    # ----- Languages -----
    "typescript": TechTag.TYPESCRIPT,
    "javascript": TechTag.JAVASCRIPT,
    "python": TechTag.PYTHON,
    "rust": TechTag.RUST,
    "go": TechTag.GO,
    "golang": TechTag.GO,
    "java": TechTag.JAVA,
    "kotlin": TechTag.KOTLIN,
    "swift": TechTag.SWIFT,
    "dart": TechTag.DART,
    "ruby": TechTag.RUBY,
    "php": TechTag.PHP,
    "c#": TechTag.CSHARP,
    "csharp": TechTag.CSHARP,

    # ----- Frameworks -----
    "react": TechTag.REACT,
    "next.js": TechTag.NEXTJS,
    "nextjs": TechTag.NEXTJS,
    "vue": TechTag.VUE,
    "nuxt": TechTag.NUXT,
    "angular": TechTag.ANGULAR,
    "svelte": TechTag.SVELTE,
    "express": TechTag.EXPRESS,
    "fastify": TechTag.FASTIFY,
    "nestjs": TechTag.NESTJS,
    "django": TechTag.DJANGO,
    "fastapi": TechTag.FASTAPI,
    "flask": TechTag.FLASK,
    "tauri": TechTag.TAURI,
    "electron": TechTag.ELECTRON,
    "swiftui": TechTag.SWIFTUI,
    "flutter": TechTag.FLUTTER,
    "rails": TechTag.RAILS,
    "ruby on rails": TechTag.RAILS,
    "laravel": TechTag.LARAVEL,
    "spring boot": TechTag.SPRING,

    # ----- Testing -----
    "vitest": TechTag.VITEST,
    "jest": TechTag.JEST,
    "pytest": TechTag.PYTEST,
    "playwright": TechTag.PLAYWRIGHT,
    "cypress": TechTag.CYPRESS,
    "testing library": TechTag.VITEST,  # vitest ecosystem

    # ----- Styling -----
    "tailwind css": TechTag.TAILWIND,
    "tailwind": TechTag.TAILWIND,
    "sass/scss": TechTag.SASS,
    "sass": TechTag.SASS,
    "scss": TechTag.SASS,
    "css modules": TechTag.CSS_MODULES,

    # ----- State Management -----
    "zustand": TechTag.ZUSTAND,
    "redux": TechTag.REDUX,
    "pinia": TechTag.PINIA,

    # ----- Databases -----
    "postgresql": TechTag.POSTGRESQL,
    "postgres": TechTag.POSTGRESQL,
    "mysql": TechTag.MYSQL,
    "sqlite": TechTag.SQLITE,
    "mongodb": TechTag.MONGODB,
    "redis": TechTag.REDIS,
    "supabase": TechTag.SUPABASE,
    "firebase": TechTag.FIREBASE,

    # ----- Auth -----
    "clerk": TechTag.CLERK,
    "auth0": TechTag.AUTH0,
    "nextauth.js": TechTag.NEXTAUTH,
    "nextauth": TechTag.NEXTAUTH,
    "supabase auth": TechTag.SUPABASE,
    "firebase auth": TechTag.FIREBASE,

    # ----- Hosting -----
    "vercel": TechTag.VERCEL,
    "netlify": TechTag.NETLIFY,
    "railway": TechTag.RAILWAY,
    "render": TechTag.RENDER,
    "aws": TechTag.AWS,
    "fly.io": TechTag.FLYIO,
    "cloudflare": TechTag.CLOUDFLARE,

    # ----- Payments -----
    "stripe": TechTag.STRIPE,
    "lemonsqueezy": TechTag.LEMONSQUEEZY,
    "paddle": TechTag.PADDLE,

    # ----- Monitoring -----
    "sentry": TechTag.SENTRY,
    "posthog": TechTag.POSTHOG,
    "datadog": TechTag.DATADOG,
    "logrocket": TechTag.LOGROCKET,

    # ----- Email -----
    "sendgrid": TechTag.SENDGRID,
    "postmark": TechTag.POSTMARK,
    "resend": TechTag.RESEND,
    "aws ses": TechTag.AWS,
}

# Field order is fixed so extraction is deterministic
PROJECT_STACK_FIELDS = ("language", "framework", "database", "testing", "styling")
STACK_EXTRAS_FIELDS = ("auth", "hosting", "payments", "monitoring", "email", "cache")


# ============================================================================
# TECH TAG MAPPER CLASS
# ============================================================================

class TechTagMapper:
    """
    Normalizes free-text stack values to canonical tags.

    Usage:
        mapper = TechTagMapper()
        mapper.normalize("Next.js")            # TechTag.NEXTJS
        mapper.extract_project_tags(project)   # [TechTag.TYPESCRIPT, ...]

    Unknown values are ignored: they contribute no tag and never raise.
    """

    def __init__(self, synonyms: Optional[Mapping[str, TechTag]] = None):
        """
        Initialize the mapper.

        Args:
            synonyms: Optional replacement synonym map. Keys must already be
                lower-case; defaults to TECH_TAG_MAP.
        """
        self._synonyms: Mapping[str, TechTag] = (
            TECH_TAG_MAP if synonyms is None else dict(synonyms)
        )

    def normalize(self, value: Optional[str]) -> Optional[TechTag]:
        """Resolve one free-text value, or None if it is absent or unknown."""
        if not value:
            return None
        return self._synonyms.get(value.lower())

    def extract_project_tags(self, project: Optional[ProjectProfile]) -> List[TechTag]:
        """
        Extract the canonical tags describing a project.

        Core stack fields are read first, then stack extras. Each tag is
        kept once, at the position of its first occurrence.

        Args:
            project: The project profile, or None.

        Returns:
            Ordered list of unique tags; empty for a None project.
        """
        if project is None:
            return []

        values = [getattr(project, field) for field in PROJECT_STACK_FIELDS]
        values.extend(self._extras_values(project.stack_extras))

        tags: List[TechTag] = []
        for value in values:
            tag = self.normalize(value)
            if tag is None:
                if value:
                    logger.debug(f"No canonical tag for stack value '{value}'")
                continue
            if tag not in tags:
                tags.append(tag)

        return tags

    @staticmethod
    def _extras_values(extras: Optional[StackExtras]) -> List[Optional[str]]:
        if extras is None:
            return []
        return [getattr(extras, field) for field in STACK_EXTRAS_FIELDS]


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================

_default_mapper = TechTagMapper()


def normalize_tag(value: Optional[str]) -> Optional[TechTag]:
    """
    Resolve a free-text stack value through TECH_TAG_MAP.

    Example:
        >>> normalize_tag("Tailwind CSS")
        <TechTag.TAILWIND: 'tailwind'>
        >>> normalize_tag("Cobol") is None
        True
    """
    return _default_mapper.normalize(value)


def extract_project_tags(project: Optional[ProjectProfile]) -> List[TechTag]:
    """
    Convenience function for project tag extraction.

    Example:
        >>> project = ProjectProfile(language="TypeScript", framework="Next.js")
        >>> extract_project_tags(project)
        [<TechTag.TYPESCRIPT: 'typescript'>, <TechTag.NEXTJS: 'nextjs'>]
    """
    return _default_mapper.extract_project_tags(project)
