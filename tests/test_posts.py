"""Tests for post-level category helpers."""
from dataclasses import FrozenInstanceError

import pytest

from src.ingest.posts import Post, effective_category, filter_by_category, with_auto_category
from src.tagging.taxonomy import Category


def _post(pid: str, content: str, category=None, category_ml=None) -> Post:
    return Post(id=pid, title=f"Post {pid}", content=content, category=category, category_ml=category_ml)


# ── with_auto_category ───────────────────────────────────────────


class TestWithAutoCategory:
    def test_fills_missing(self, classifier):
        post = _post("1", "<p>this post is about blockchain</p>")
        labelled = with_auto_category(post, classifier)
        assert labelled.category_ml is Category.TECHNOLOGY

    def test_does_not_mutate_input(self, classifier):
        post = _post("1", "blockchain")
        with_auto_category(post, classifier)
        assert post.category_ml is None

    def test_keeps_existing_label(self, classifier):
        post = _post("1", "blockchain", category_ml=Category.FOOD)
        assert with_auto_category(post, classifier) is post

    def test_uses_shared_classifier_by_default(self, tmp_settings):
        labelled = with_auto_category(_post("1", "football team championship"))
        assert labelled.category_ml is Category.SPORTS

    def test_post_frozen(self):
        with pytest.raises(FrozenInstanceError):
            _post("1", "x").content = "y"


# ── effective_category ───────────────────────────────────────────


class TestEffectiveCategory:
    def test_explicit_wins(self, classifier):
        post = _post("1", "blockchain", category="Travel")
        assert effective_category(post, classifier) is Category.TRAVEL

    def test_unknown_explicit_uses_auto(self, classifier):
        post = _post("1", "blockchain", category="Crypto")
        assert effective_category(post, classifier) is Category.TECHNOLOGY

    def test_lowercase_explicit_not_recognized(self, classifier):
        post = _post("1", "blockchain", category="travel")
        assert effective_category(post, classifier) is Category.TECHNOLOGY

    def test_no_category_no_match(self, classifier):
        assert effective_category(_post("1", ""), classifier) is Category.OTHER

    def test_stored_auto_label_used(self, classifier):
        post = _post("1", "blockchain", category_ml=Category.ART)
        assert effective_category(post, classifier) is Category.ART


# ── filter_by_category ───────────────────────────────────────────


class TestFilterByCategory:
    @pytest.fixture()
    def posts(self):
        return [
            _post("a", "this post is about blockchain"),
            _post("b", "a delicious recipe for dinner"),
            _post("c", "python javascript"),
            _post("d", "xyzzy"),
        ]

    def test_filters(self, classifier, posts):
        result = filter_by_category(posts, Category.TECHNOLOGY, classifier)
        assert [p.id for p in result] == ["a", "c"]

    def test_other(self, classifier, posts):
        result = filter_by_category(posts, Category.OTHER, classifier)
        assert [p.id for p in result] == ["d"]

    def test_none_returns_all_labelled(self, classifier, posts):
        result = filter_by_category(posts, None, classifier)
        assert [p.id for p in result] == ["a", "b", "c", "d"]
        assert all(p.category_ml is not None for p in result)

    def test_no_match(self, classifier, posts):
        assert filter_by_category(posts, Category.HISTORY, classifier) == []
