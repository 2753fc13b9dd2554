"""
Automatic template assignment for smart-block placements.

A block type maps to a template kind through a static table; the best
template of that kind is then picked by the ranker.
"""
from datetime import datetime
from enum import Enum
from typing import List, Optional
from template_selector.errors import UnknownBlockType
from template_selector.models.items import ContentItem
from template_selector.models.templates import SelectionManifest
from template_selector.services.logger import logger
from template_selector.tools.ranker import select_best_template

# Sections with more items than this switch from a list to a grid
SECTION_LIST_MAX_ITEMS = 6

class BlockType(str, Enum):
    HERO = "hero"
    SECTION = "section"
    SIDEBAR = "sidebar"
    TICKER = "ticker"
    SPOTLIGHT = "spotlight"

BLOCK_CATEGORIES = {
    BlockType.HERO: "hero",
    BlockType.SIDEBAR: "list",
    BlockType.TICKER: "ticker",
    BlockType.SPOTLIGHT: "spotlight",
}

def resolve_block_category(block_type, item_count: int) -> str:
    try:
        block = BlockType(block_type)
    except ValueError:
        raise UnknownBlockType(block_type) from None

    if block is BlockType.SECTION:
        return "list" if item_count <= SECTION_LIST_MAX_ITEMS else "grid"
    return BLOCK_CATEGORIES[block]

def auto_select_template(
    items: List[ContentItem],
    manifest: SelectionManifest,
    block_type,
    *,
    now: Optional[datetime] = None,
) -> Optional[str]:
    """Returns the id of the best template for the block, or None if none qualifies."""
    category = resolve_block_category(block_type, len(items))
    best = select_best_template(items, manifest, category=category, now=now)
    if best is None:
        logger.debug(f"No '{category}' template qualifies for block '{block_type}'")
        return None
    return best.template.id
