"""Rule-based post classifier using weighted keyword matching.

Pipeline: normalize -> 1..3-gram tokens -> weighted term scores (with
exclusions, each distinct token counted once) -> TF-IDF-like re-weighting ->
confidence-gated decision with Other as the reject option.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from src.tagging.index import LookupIndex
from src.tagging.taxonomy import FALLBACK, Category
from src.tagging.text import ngrams, normalize_text, tokenize

logger = logging.getLogger("post_categorizer.tagging.classifier")

DEFAULT_CONFIDENCE_RATIO = 0.3


@dataclass(frozen=True)
class Explanation:
    """Intermediate results of a single classification."""

    category: Category
    matched: dict[str, Category]
    raw_scores: dict[Category, float]
    ranking: list[tuple[Category, float]]


def reweight(scores: dict[Category, float]) -> dict[Category, float]:
    """Apply score * (1 + ln(max / (score + 1))) to every score.

    Returns a new dict; an empty board stays empty.
    """
    if not scores:
        return {}
    max_score = max(scores.values())
    return {
        category: score * (1 + math.log(max_score / (score + 1)))
        for category, score in scores.items()
    }


def rank(scores: dict[Category, float]) -> list[tuple[Category, float]]:
    """Sort scores descending. Equal scores keep their insertion order."""
    return sorted(scores.items(), key=lambda x: x[1], reverse=True)


def decide(
    scores: dict[Category, float],
    confidence_ratio: float = DEFAULT_CONFIDENCE_RATIO,
) -> Category:
    """Pick the top category if it beats the runner-up by a clear margin.

    The margin top - second must be strictly greater than
    confidence_ratio * top, otherwise the result is the fallback category.
    """
    ranked = rank(scores)
    if not ranked:
        return FALLBACK

    top_category, top = ranked[0]
    second = ranked[1][1] if len(ranked) > 1 else 0.0

    if (top - second) > confidence_ratio * top:
        return top_category
    return FALLBACK


class Classifier:
    """Stateless categorizer over an injected LookupIndex."""

    def __init__(
        self,
        index: LookupIndex,
        confidence_ratio: float = DEFAULT_CONFIDENCE_RATIO,
    ) -> None:
        if not 0 <= confidence_ratio <= 1:
            raise ValueError(f"confidence_ratio must be within [0, 1], got {confidence_ratio}")
        self.index = index
        self.confidence_ratio = confidence_ratio

    def _score(self, text: str | None) -> tuple[dict[Category, float], dict[str, Category]]:
        words = tokenize(normalize_text(text))
        scores: dict[Category, float] = {}
        counted: dict[str, Category] = {}

        for token in ngrams(words):
            entry = self.index.lookup(token)
            if entry is None or token in counted:
                continue

            exclusions = self.index.exclusions.get(entry.category, ())
            if any(ex in token for ex in exclusions):
                continue

            category_weight = self.index.category_weights[entry.category]
            scores[entry.category] = scores.get(entry.category, 0.0) + entry.weight * category_weight
            counted[token] = entry.category

        return scores, counted

    def score(self, text: str | None) -> dict[Category, float]:
        """Raw per-category scores before re-weighting."""
        scores, _ = self._score(text)
        return scores

    def categorize(self, text: str | None) -> Category:
        """Return the best-fitting category for text, or Other."""
        scores, _ = self._score(text)
        category = decide(reweight(scores), self.confidence_ratio)
        logger.debug("Categorized text (%d chars) as %s", len(text or ""), category)
        return category

    def explain(self, text: str | None) -> Explanation:
        """Categorize text and return the intermediate scores."""
        scores, counted = self._score(text)
        weighted = reweight(scores)
        return Explanation(
            category=decide(weighted, self.confidence_ratio),
            matched=counted,
            raw_scores=scores,
            ranking=rank(weighted),
        )
