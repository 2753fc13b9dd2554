"""
Additive fitness scoring of a template against a content context.

Every rule adds or subtracts a fixed number of points from the base score;
the total is clamped to 0-100. Rules are independent of one another.
"""
from typing import List, Optional
from template_selector.models.templates import ContentContext, TemplateDescriptor, UserPreferences

BASE_SCORE = 50
MIN_SCORE, MAX_SCORE = 0, 100

# Item count
TOO_FEW_ITEMS_PENALTY = 30
TOO_MANY_ITEMS_PENALTY = 20
IDEAL_DEVIATION_PENALTY = 2  # per item away from idealItems
IDEAL_REASON_TOLERANCE = 2

# Visual content
MISSING_IMAGE_PENALTY = 40
IMAGE_BONUS = 15
VIDEO_BONUS = 20
VISUAL_PREFERENCE_BONUS = 10

# News type and timing
BREAKING_BONUS = 25
FEATURED_BONUS = 15
TIME_SENSITIVE_BONUS = 20

# Content depth (average excerpt length in characters)
SHORT_EXCERPT_LENGTH = 50
RICH_EXCERPT_LENGTH = 100
SHORT_EXCERPT_PENALTY = 25
RICH_EXCERPT_BONUS = 10

# Category diversity
DIVERSITY_MIN_CATEGORIES = 3  # strictly more than this
DIVERSITY_BONUS = 15

GENERIC_REASON = "Compatible with the content"


def score_template(
    template: TemplateDescriptor,
    context: ContentContext,
    user_preferences: Optional[UserPreferences] = None,
) -> int:
    """Returns the template's fitness for the content, 0-100."""
    hints = template.score_hints
    score = BASE_SCORE

    if hints.min_items and context.item_count < hints.min_items:
        score -= TOO_FEW_ITEMS_PENALTY
    if hints.max_items and context.item_count > hints.max_items:
        score -= TOO_MANY_ITEMS_PENALTY
    if hints.ideal_items:
        score -= abs(context.item_count - hints.ideal_items) * IDEAL_DEVIATION_PENALTY

    if hints.requires_image:
        score += IMAGE_BONUS if context.has_images else -MISSING_IMAGE_PENALTY
    if hints.prefers_video and context.has_video:
        score += VIDEO_BONUS

    if hints.best_for_breaking and context.has_breaking:
        score += BREAKING_BONUS
    if hints.best_for_featured and context.has_featured:
        score += FEATURED_BONUS
    if hints.time_sensitive and context.is_time_sensitive:
        score += TIME_SENSITIVE_BONUS

    if hints.requires_excerpt:
        if context.avg_excerpt_length < SHORT_EXCERPT_LENGTH:
            score -= SHORT_EXCERPT_PENALTY
        elif context.avg_excerpt_length >= RICH_EXCERPT_LENGTH:
            score += RICH_EXCERPT_BONUS

    if hints.best_for_diversity and context.unique_categories > DIVERSITY_MIN_CATEGORIES:
        score += DIVERSITY_BONUS

    if user_preferences and user_preferences.prefers_visual and hints.requires_image:
        score += VISUAL_PREFERENCE_BONUS

    return max(MIN_SCORE, min(MAX_SCORE, score))


def explain_score(template: TemplateDescriptor, context: ContentContext) -> List[str]:
    """Human-readable reasons for the bonuses a template earned. Never empty."""
    hints = template.score_hints
    reasons = []

    if hints.ideal_items and abs(context.item_count - hints.ideal_items) <= IDEAL_REASON_TOLERANCE:
        reasons.append(f"Item count is near ideal ({context.item_count})")
    if hints.best_for_breaking and context.has_breaking:
        reasons.append("Fits breaking news")
    if hints.best_for_featured and context.has_featured:
        reasons.append("Fits featured content")
    if hints.requires_image and context.has_images:
        reasons.append("Has the required images")
    if hints.prefers_video and context.has_video:
        reasons.append("Has video")
    if hints.time_sensitive and context.is_time_sensitive:
        reasons.append("Time-sensitive content")
    if hints.best_for_diversity and context.unique_categories > DIVERSITY_MIN_CATEGORIES:
        reasons.append(f"Diverse categories ({context.unique_categories})")

    return reasons or [GENERIC_REASON]
