from datetime import datetime
from typing import List, Optional
from template_selector.config import settings
from template_selector.models.items import ContentItem
from template_selector.models.templates import (
    RecommendOptions,
    SelectionManifest,
    TemplateRecommendation,
)
from template_selector.services.logger import logger
from template_selector.tools.analyzer import analyze_content
from template_selector.tools.scorer import explain_score, score_template


def _merge_options(options: Optional[RecommendOptions], overrides: dict) -> RecommendOptions:
    unknown = set(overrides) - set(RecommendOptions.model_fields)
    if unknown:
        raise TypeError(f"Unknown recommendation option(s): {', '.join(sorted(unknown))}")
    base = options.model_dump(exclude_unset=True) if options else {}
    base.update({k: v for k, v in overrides.items() if v is not None})
    return RecommendOptions.model_validate(base)


def recommend_templates(
    items: List[ContentItem],
    manifest: SelectionManifest,
    options: Optional[RecommendOptions] = None,
    *,
    now: Optional[datetime] = None,
    **overrides,
) -> List[TemplateRecommendation]:
    """
    Scores every candidate template for the items and returns the best ones.

    Candidates are optionally narrowed to one ``kind`` (``category``), then
    scored, explained, filtered by ``min_score``, sorted by score (ties keep
    manifest order) and truncated to ``limit``. Keyword overrides take
    precedence over ``options``.
    """
    opts = _merge_options(options, overrides)
    limit = settings.DEFAULT_LIMIT if opts.limit is None else opts.limit
    min_score = settings.DEFAULT_MIN_SCORE if opts.min_score is None else opts.min_score

    context = analyze_content(items, now=now)

    templates = manifest.templates_of_kind(opts.category) if opts.category else manifest.templates

    scored = [
        TemplateRecommendation(
            template=template,
            score=score_template(template, context, opts.user_preferences),
            reasoning=explain_score(template, context),
        )
        for template in templates
    ]

    # sorted() is stable, so equal scores keep their manifest order
    kept = sorted((rec for rec in scored if rec.score >= min_score), key=lambda rec: rec.score, reverse=True)

    logger.debug(
        f"Scored {len(scored)} templates (category={opts.category or '*'}), "
        f"{len(kept)} at or above {min_score}, returning up to {limit}"
    )
    return kept[:limit]


def select_best_template(
    items: List[ContentItem],
    manifest: SelectionManifest,
    options: Optional[RecommendOptions] = None,
    *,
    now: Optional[datetime] = None,
    **overrides,
) -> Optional[TemplateRecommendation]:
    """Returns the single best recommendation, or None if nothing clears min_score."""
    overrides["limit"] = 1
    recommendations = recommend_templates(items, manifest, options, now=now, **overrides)
    return recommendations[0] if recommendations else None
