"""Term lookup index derived from the taxonomy.

Flattens every keyword and synonym into a single term -> category map so the
classifier does one dict lookup per token.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, NamedTuple

from src.tagging.taxonomy import (
    TAXONOMY,
    Category,
    CategoryDefinition,
    validate_taxonomy,
)
from src.tagging.text import MAX_NGRAM, normalize_term, word_count

logger = logging.getLogger("post_categorizer.tagging.index")


class TermEntry(NamedTuple):
    category: Category
    weight: float


class TermCollision(NamedTuple):
    term: str
    previous: Category
    current: Category


@dataclass(frozen=True)
class LookupIndex:
    """Immutable term index plus per-category weights and exclusions."""

    terms: Mapping[str, TermEntry]
    category_weights: Mapping[Category, float]
    exclusions: Mapping[Category, tuple[str, ...]]
    categories: tuple[Category, ...]
    collisions: tuple[TermCollision, ...] = field(default=())

    def lookup(self, token: str) -> TermEntry | None:
        return self.terms.get(token)

    def __len__(self) -> int:
        return len(self.terms)


def build_index(
    definitions: tuple[CategoryDefinition, ...] = TAXONOMY,
    exhaustive: bool = True,
    warn_on_collisions: bool = True,
) -> LookupIndex:
    """Validate the taxonomy and build its LookupIndex.

    Definitions are processed in declaration order. When two categories
    configure the same term the later one owns it; every such overwrite is
    recorded on the index and optionally logged.
    """
    validate_taxonomy(definitions, exhaustive=exhaustive)

    terms: dict[str, TermEntry] = {}
    weights: dict[Category, float] = {}
    exclusions: dict[Category, tuple[str, ...]] = {}
    collisions: list[TermCollision] = []
    unreachable: list[str] = []

    for definition in definitions:
        category = definition.category
        for raw in definition.terms:
            term = normalize_term(raw)
            if not term:
                continue
            if word_count(term) > MAX_NGRAM:
                unreachable.append(term)
            previous = terms.get(term)
            if previous is not None and previous.category is not category:
                collisions.append(TermCollision(term, previous.category, category))
            terms[term] = TermEntry(category, definition.weight)

        weights[category] = definition.weight
        exclusions[category] = tuple(
            ex for ex in (normalize_term(e) for e in definition.exclude) if ex
        )

    if warn_on_collisions:
        for collision in collisions:
            logger.warning(
                "Term %r configured for %s and %s; %s wins",
                collision.term, collision.previous, collision.current, collision.current,
            )
    if unreachable:
        logger.debug(
            "%d terms exceed %d words and cannot match: %s",
            len(unreachable), MAX_NGRAM, ", ".join(unreachable),
        )

    logger.debug(
        "Built lookup index: %d terms across %d categories (%d collisions)",
        len(terms), len(weights), len(collisions),
    )

    return LookupIndex(
        terms=MappingProxyType(terms),
        category_weights=MappingProxyType(weights),
        exclusions=MappingProxyType(exclusions),
        categories=tuple(d.category for d in definitions),
        collisions=tuple(collisions),
    )
