from datetime import datetime, timedelta, timezone
from typing import List, Optional
from template_selector.errors import InvalidInput
from template_selector.models.items import ContentItem, NewsKind
from template_selector.models.templates import ContentContext
from template_selector.services.logger import logger

# Items published within this window make the set time-sensitive
TIME_SENSITIVE_WINDOW = timedelta(hours=6)

def analyze_content(items: List[ContentItem], now: Optional[datetime] = None) -> ContentContext:
    """
    Reduces a list of content items to the summary the scorer works on.

    ``now`` pins the evaluation clock; it defaults to the current UTC time,
    read once per call.
    """
    if not items:
        raise InvalidInput("Cannot analyze an empty item list: average excerpt length is undefined")

    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    has_images = has_video = has_breaking = has_featured = recently_published = False
    excerpt_total = 0
    categories = set()

    for item in items:
        has_images = has_images or bool(item.image)
        has_video = has_video or bool(item.video_url)
        has_breaking = has_breaking or item.news_type == NewsKind.BREAKING
        has_featured = has_featured or item.news_type == NewsKind.FEATURED
        excerpt_total += item.excerpt_length
        if item.category_id:
            categories.add(item.category_id)
        if item.published_at and now - item.published_at < TIME_SENSITIVE_WINDOW:
            recently_published = True

    context = ContentContext(
        item_count=len(items),
        has_images=has_images,
        has_video=has_video,
        has_breaking=has_breaking,
        has_featured=has_featured,
        avg_excerpt_length=excerpt_total / len(items),
        unique_categories=len(categories),
        is_time_sensitive=has_breaking or recently_published,
    )
    logger.debug(f"Analyzed {context.item_count} items: {context.model_dump()}")
    return context
