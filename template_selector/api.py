from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from typing import List, Optional

from template_selector.config import settings
from template_selector.errors import InvalidInput, ManifestError, UnknownBlockType
from template_selector.models.items import CamelModel, ContentItem
from template_selector.models.templates import RecommendOptions, SelectionManifest
from template_selector.services.logger import logger
from template_selector.services.manifest import load_manifest
from template_selector.tools.analyzer import analyze_content
from template_selector.tools.ranker import recommend_templates, select_best_template
from template_selector.tools.selector import auto_select_template, resolve_block_category

app = FastAPI(title="Template Selection API")

# Allow CORS for the dashboard frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

class ItemsRequest(CamelModel):
    items: List[ContentItem]
    manifest: Optional[SelectionManifest] = None

class RecommendRequest(ItemsRequest, RecommendOptions):
    pass

class AutoSelectRequest(ItemsRequest):
    block_type: str

@app.exception_handler(InvalidInput)
async def invalid_input_handler(request: Request, exc: InvalidInput):
    return JSONResponse(status_code=422, content={"detail": str(exc)})

@app.exception_handler(UnknownBlockType)
async def unknown_block_handler(request: Request, exc: UnknownBlockType):
    return JSONResponse(status_code=400, content={"detail": str(exc)})

@app.exception_handler(ManifestError)
async def manifest_error_handler(request: Request, exc: ManifestError):
    logger.error(f"Manifest unavailable: {exc}")
    return JSONResponse(status_code=500, content={"detail": str(exc)})

def _manifest_for(req: ItemsRequest) -> SelectionManifest:
    # Fall back to the configured manifest file, read fresh for this request
    return req.manifest if req.manifest is not None else load_manifest(settings.MANIFEST_PATH)

def _options_for(req: RecommendRequest) -> RecommendOptions:
    return RecommendOptions.model_validate(req.model_dump(include=set(RecommendOptions.model_fields), exclude_unset=True))

@app.get("/api/status")
def get_status():
    return {"status": "ok", "version": "1.0.0"}

@app.get("/api/templates")
def list_templates():
    manifest = load_manifest(settings.MANIFEST_PATH)
    return {
        "version": manifest.version,
        "kinds": {kind: [t.model_dump(by_alias=True) for t in manifest.templates_of_kind(kind)] for kind in manifest.kinds()},
    }

@app.post("/api/templates/analyze")
def analyze(req: ItemsRequest):
    return analyze_content(req.items).model_dump(by_alias=True)

@app.post("/api/templates/recommend")
def recommend(req: RecommendRequest):
    recommendations = recommend_templates(req.items, _manifest_for(req), _options_for(req))
    return {"recommendations": [rec.model_dump(by_alias=True) for rec in recommendations]}

@app.post("/api/templates/select")
def select(req: RecommendRequest):
    best = select_best_template(req.items, _manifest_for(req), _options_for(req))
    return {"recommendation": best.model_dump(by_alias=True) if best else None}

@app.post("/api/templates/auto-select")
def auto_select(req: AutoSelectRequest):
    category = resolve_block_category(req.block_type, len(req.items))
    template_id = auto_select_template(req.items, _manifest_for(req), req.block_type)
    return {"blockType": req.block_type, "category": category, "templateId": template_id}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)
