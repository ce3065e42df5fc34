"""
Template Ranker.

Ranks the single-use prompt template catalog. At most five templates are
recommended at once.

Example:
    from stackmatch.rankers.catalogs import TemplateRanker

    ranked = TemplateRanker().rank(TEMPLATE_CATALOG, project)
"""

from typing import Optional

from stackmatch.rankers.base import BaseCatalogRanker
from stackmatch.rankers.kinds import CatalogKind


class TemplateRanker(BaseCatalogRanker):
    """Ranker for reusable prompt templates (cap: 5)."""

    KIND: CatalogKind = CatalogKind.TEMPLATE
    DEFAULT_CAP: Optional[int] = 5
