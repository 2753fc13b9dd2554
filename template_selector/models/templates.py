from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, Dict, Any, List, Literal
from template_selector.models.items import CamelModel
from template_selector.services.logger import logger

class ScoreHints(CamelModel):
    """Optional tuning criteria for a template. ``None`` means the criterion does not apply."""
    min_items: Optional[int] = Field(default=None, ge=0)
    max_items: Optional[int] = Field(default=None, ge=0)
    ideal_items: Optional[int] = Field(default=None, ge=0)
    requires_image: Optional[bool] = None
    prefers_video: Optional[bool] = None
    requires_excerpt: Optional[bool] = None
    best_for_breaking: Optional[bool] = None
    best_for_featured: Optional[bool] = None
    time_sensitive: Optional[bool] = None
    best_for_diversity: Optional[bool] = None

class TemplateDescriptor(CamelModel):
    id: str
    name: str = ""
    kind: str
    description: Optional[str] = None
    best_for: List[str] = Field(default_factory=list)
    score_hints: ScoreHints = Field(default_factory=ScoreHints)

    @field_validator('score_hints', mode='before')
    @classmethod
    def tolerate_missing_hints(cls, v, info):
        if v is None:
            return {}
        if not isinstance(v, (dict, ScoreHints)):
            logger.warning(f"Ignoring malformed scoreHints block ({type(v).__name__}) on template {info.data.get('id')!r}")
            return {}
        return v

class SelectionManifest(CamelModel):
    version: str = "1"
    templates: List[TemplateDescriptor] = Field(default_factory=list)
    # Declarative policy for the host application; never evaluated here
    selection_policy: Dict[str, Any] = Field(default_factory=dict)

    @field_validator('version', mode='before')
    @classmethod
    def coerce_version(cls, v):
        return str(v)

    def get_template(self, template_id: str) -> Optional[TemplateDescriptor]:
        return next((t for t in self.templates if t.id == template_id), None)

    def templates_of_kind(self, kind: str) -> List[TemplateDescriptor]:
        return [t for t in self.templates if t.kind == kind]

    def kinds(self) -> List[str]:
        seen = []
        for t in self.templates:
            if t.kind not in seen:
                seen.append(t.kind)
        return seen

class UserPreferences(CamelModel):
    density: Optional[Literal['compact', 'cozy', 'comfortable']] = None
    prefers_visual: bool = False

class ContentContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    item_count: int
    has_images: bool
    has_video: bool
    has_breaking: bool
    has_featured: bool
    avg_excerpt_length: float
    unique_categories: int
    is_time_sensitive: bool

class TemplateRecommendation(BaseModel):
    template: TemplateDescriptor
    score: int = Field(ge=0, le=100)
    reasoning: List[str] = Field(min_length=1)

class RecommendOptions(CamelModel):
    category: Optional[str] = None
    limit: Optional[int] = Field(default=None, ge=0)
    min_score: Optional[int] = Field(default=None, ge=0)
    user_preferences: Optional[UserPreferences] = None
