"""Process-wide composition root for the categorizer.

The taxonomy is validated and indexed once, on first use, and the resulting
Classifier is shared. Callers that need a different taxonomy or threshold
build their own with `build_classifier`.
"""
from __future__ import annotations

from functools import lru_cache

from src.app.config import Settings, get_settings
from src.tagging.classifier import Classifier
from src.tagging.index import build_index
from src.tagging.taxonomy import TAXONOMY, Category, CategoryDefinition


def build_classifier(
    definitions: tuple[CategoryDefinition, ...] = TAXONOMY,
    settings: Settings | None = None,
) -> Classifier:
    """Validate definitions, build the lookup index and wrap it in a Classifier."""
    settings = settings or get_settings()
    index = build_index(
        definitions,
        warn_on_collisions=settings.warn_on_term_collisions,
    )
    return Classifier(index, confidence_ratio=settings.confidence_ratio)


@lru_cache(maxsize=1)
def get_classifier() -> Classifier:
    """Shared classifier over the default taxonomy."""
    return build_classifier()


def categorize(text: str | None) -> Category:
    """Categorize text with the shared classifier."""
    return get_classifier().categorize(text)


def list_categories() -> list[Category]:
    """All categories in declaration order."""
    return list(get_classifier().index.categories)
