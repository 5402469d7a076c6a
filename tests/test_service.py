"""Tests for the shared classifier and category listing."""
import logging

import pytest

from src.app.config import Settings
from src.tagging.classifier import Classifier
from src.tagging.service import build_classifier, categorize, get_classifier, list_categories
from src.tagging.taxonomy import Category, CategoryDefinition, TaxonomyError


class TestGetClassifier:
    def test_cached(self, tmp_settings):
        assert get_classifier() is get_classifier()

    def test_uses_settings_ratio(self, tmp_settings):
        tmp_settings.confidence_ratio = 1.0
        assert get_classifier().confidence_ratio == 1.0
        assert categorize("this post is about blockchain") is Category.OTHER


class TestBuildClassifier:
    def test_returns_classifier(self, tmp_settings):
        clf = build_classifier()
        assert isinstance(clf, Classifier)
        assert clf.confidence_ratio == 0.3

    def test_default_settings_build_quietly(self, tmp_path, caplog):
        settings = Settings(log_path=tmp_path / "app.log")
        with caplog.at_level(logging.DEBUG, logger="post_categorizer"):
            build_classifier(settings=settings)
        assert [r for r in caplog.records if r.levelno >= logging.INFO] == []

    def test_collision_warnings_when_enabled(self, tmp_path, caplog):
        settings = Settings(log_path=tmp_path / "app.log", warn_on_term_collisions=True)
        with caplog.at_level(logging.WARNING, logger="post_categorizer"):
            build_classifier(settings=settings)
        assert any("technology" in r.getMessage() for r in caplog.records)

    def test_independent_instances(self, tmp_settings):
        assert build_classifier() is not build_classifier()

    def test_custom_definitions_must_be_complete(self, tmp_settings):
        with pytest.raises(TaxonomyError):
            build_classifier((CategoryDefinition(Category.FOOD, ("food",), 1.0),))


class TestCategorize:
    def test_module_level(self, tmp_settings):
        assert categorize("this post is about blockchain") is Category.TECHNOLOGY

    def test_empty(self, tmp_settings):
        assert categorize("") is Category.OTHER


class TestListCategories:
    def test_declaration_order(self, tmp_settings):
        categories = list_categories()
        assert categories == list(Category)
        assert categories[0] is Category.TECHNOLOGY
        assert categories[-1] is Category.OTHER

    def test_stable(self, tmp_settings):
        assert list_categories() == list_categories()

    def test_returns_copy(self, tmp_settings):
        categories = list_categories()
        categories.clear()
        assert len(list_categories()) == len(Category)
