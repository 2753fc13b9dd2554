from enum import Enum
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime, timezone

class CamelModel(BaseModel):
    """Accepts camelCase JSON keys as well as snake_case field names."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra='ignore')

class NewsKind(str, Enum):
    BREAKING = "breaking"
    FEATURED = "featured"
    REGULAR = "regular"

class CategoryRef(CamelModel):
    id: Optional[str] = None
    name: Optional[str] = None

    @field_validator('id', mode='before')
    @classmethod
    def coerce_id(cls, v):
        # Category ids arrive as strings or integers depending on the source
        if v is None or v == "":
            return None
        return str(v)

class ContentItem(CamelModel):
    id: Optional[str] = None
    title: Optional[str] = None
    image: Optional[str] = None
    video_url: Optional[str] = None
    excerpt: Optional[str] = None
    published_at: Optional[datetime] = None
    news_type: Optional[NewsKind] = None
    category: Optional[CategoryRef] = None

    @field_validator('id', mode='before')
    @classmethod
    def coerce_item_id(cls, v):
        return None if v is None else str(v)

    @field_validator('image', 'video_url', 'excerpt', mode='before')
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v:
            return None
        return v

    @field_validator('published_at')
    @classmethod
    def assume_utc(cls, v):
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @property
    def category_id(self) -> Optional[str]:
        return self.category.id if self.category else None

    @property
    def excerpt_length(self) -> int:
        return len(self.excerpt or "")
