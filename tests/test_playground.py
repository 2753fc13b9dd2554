"""Tests for the template preview playground."""

import pytest

from template_selector.config import settings
from template_selector.services.manifest import load_items, load_manifest
from template_selector.workflows.playground import DATASETS, build_dataset, preview


@pytest.fixture
def demo_items():
    return load_items(settings.DEMO_ITEMS_PATH)


@pytest.fixture
def manifest():
    return load_manifest(settings.MANIFEST_PATH)


class TestBuildDataset:

    @pytest.mark.parametrize(
        "name, expected",
        [("breaking-news", 3), ("featured", 3), ("mixed", 8), ("single", 1), ("many", 15)],
    )
    def test_dataset_sizes(self, demo_items, name, expected):
        assert len(build_dataset(demo_items, name)) == expected

    def test_breaking_filter(self, demo_items):
        assert [i.id for i in build_dataset(demo_items, "breaking-news")] == ["a1", "a2", "a3"]

    def test_keeps_input_order(self, demo_items):
        assert build_dataset(demo_items, "mixed") == demo_items[:8]

    def test_unknown_dataset(self, demo_items):
        with pytest.raises(ValueError):
            build_dataset(demo_items, "everything")

    def test_every_dataset_has_a_label(self):
        assert all(d.label for d in DATASETS.values())


class TestPreview:

    def test_preview_shape(self, demo_items, manifest, now):
        result = preview(demo_items, manifest, "breaking-news", now=now)
        assert result["item_count"] == 3
        assert result["analysis"]["has_breaking"] is True
        assert 0 < len(result["recommendations"]) <= 3
        scores = [r["score"] for r in result["recommendations"]]
        assert scores == sorted(scores, reverse=True)

    def test_breaking_dataset_prefers_breaking_templates(self, demo_items, manifest, now):
        result = preview(demo_items, manifest, "breaking-news", now=now)
        ids = [r["template_id"] for r in result["recommendations"]]
        assert ids == ["hero.breaking", "ticker.breaking", "hero.fullbleed"]

    def test_empty_dataset(self, manifest, make_item, now):
        result = preview([make_item(news_type="regular")], manifest, "featured", now=now)
        assert result["item_count"] == 0
        assert result["analysis"] is None
        assert result["recommendations"] == []
