from datetime import datetime, timedelta, timezone

import pytest

from template_selector.models.items import ContentItem
from template_selector.models.templates import SelectionManifest, TemplateDescriptor

# Pinned evaluation clock so time-sensitivity is reproducible
NOW = datetime(2025, 3, 2, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_item():
    """Factory for content items; published a day before NOW unless told otherwise."""
    counter = iter(range(1, 10_000))

    def _make(**fields):
        fields.setdefault("id", str(next(counter)))
        fields.setdefault("published_at", NOW - timedelta(days=1))
        return ContentItem(**fields)

    return _make


@pytest.fixture
def make_template():
    def _make(template_id, kind="list", **hints):
        return TemplateDescriptor(id=template_id, name=template_id, kind=kind, score_hints=hints)

    return _make


@pytest.fixture
def make_manifest():
    def _make(*templates):
        return SelectionManifest(version="test", templates=list(templates))

    return _make
