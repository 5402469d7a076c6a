"""Post-level category helpers.

A post may carry an explicit, author-chosen category and an automatic one
(`category_ml`). Posts stored before auto-categorization existed have no
automatic label; it is computed lazily from the content.
"""
from dataclasses import dataclass, replace
from typing import Iterable, Optional

from src.tagging.classifier import Classifier
from src.tagging.colors import parse_category
from src.tagging.service import get_classifier
from src.tagging.taxonomy import Category


@dataclass(frozen=True)
class Post:
    id: str
    title: str
    content: str
    category: Optional[str] = None
    category_ml: Optional[Category] = None


def with_auto_category(post: Post, classifier: Optional[Classifier] = None) -> Post:
    """Return a new post with category_ml filled in if it was missing."""
    if post.category_ml is not None:
        return post
    classifier = classifier or get_classifier()
    return replace(post, category_ml=classifier.categorize(post.content))


def effective_category(post: Post, classifier: Optional[Classifier] = None) -> Category:
    """Explicit category when it names a known Category, else the automatic one."""
    explicit = parse_category(post.category)
    if explicit is not None:
        return explicit
    return with_auto_category(post, classifier).category_ml


def filter_by_category(
    posts: Iterable[Post],
    category: Optional[Category],
    classifier: Optional[Classifier] = None,
) -> list[Post]:
    """Posts whose automatic category matches, auto-labelling as needed.

    Input order is preserved. A category of None returns every post.
    """
    labelled = [with_auto_category(p, classifier) for p in posts]
    if category is None:
        return labelled
    return [p for p in labelled if p.category_ml == category]
