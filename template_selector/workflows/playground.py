"""
Template preview playground.

Pairs a manifest with canned demo datasets so editors can see how the
engine reacts to different kinds of content before assigning templates.
"""
from datetime import datetime
from typing import Any, Callable, Dict, List, NamedTuple, Optional
from template_selector.models.items import ContentItem, NewsKind
from template_selector.models.templates import SelectionManifest
from template_selector.tools.analyzer import analyze_content
from template_selector.tools.ranker import recommend_templates

PREVIEW_LIMIT = 3

class Dataset(NamedTuple):
    label: str
    keep: Callable[[ContentItem], bool]
    limit: int

DATASETS: Dict[str, Dataset] = {
    "breaking-news": Dataset("Breaking news (5)", lambda item: item.news_type == NewsKind.BREAKING, 5),
    "featured": Dataset("Featured (6)", lambda item: item.news_type == NewsKind.FEATURED, 6),
    "mixed": Dataset("Mixed (8)", lambda item: True, 8),
    "single": Dataset("Single article (1)", lambda item: True, 1),
    "many": Dataset("Many (15)", lambda item: True, 15),
}

DEFAULT_DATASET = "mixed"

def build_dataset(items: List[ContentItem], name: str = DEFAULT_DATASET) -> List[ContentItem]:
    if name not in DATASETS:
        raise ValueError(f"Unknown dataset: {name} (choose from {', '.join(DATASETS)})")
    dataset = DATASETS[name]
    return [item for item in items if dataset.keep(item)][:dataset.limit]

def preview(
    items: List[ContentItem],
    manifest: SelectionManifest,
    dataset: str = DEFAULT_DATASET,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Content analysis plus the top recommendations for one demo dataset."""
    demo_items = build_dataset(items, dataset)
    result: Dict[str, Any] = {
        "dataset": dataset,
        "label": DATASETS[dataset].label,
        "item_count": len(demo_items),
        "analysis": None,
        "recommendations": [],
    }
    # An empty dataset just previews nothing
    if not demo_items:
        return result

    result["analysis"] = analyze_content(demo_items, now=now).model_dump()
    result["recommendations"] = [
        {
            "template_id": rec.template.id,
            "name": rec.template.name,
            "kind": rec.template.kind,
            "score": rec.score,
            "reasoning": rec.reasoning,
        }
        for rec in recommend_templates(demo_items, manifest, limit=PREVIEW_LIMIT, now=now)
    ]
    return result
