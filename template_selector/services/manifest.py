"""
Manifest source: reads template manifests and content items from JSON documents.

Validation happens here, so a malformed manifest fails at load time instead
of surfacing as missing hints deep inside scoring. Nothing is cached; every
call reads the document again.
"""
import json
from pathlib import Path
from typing import Any, List, Union
from pydantic import TypeAdapter, ValidationError
from template_selector.errors import ManifestError
from template_selector.models.items import ContentItem
from template_selector.models.templates import SelectionManifest
from template_selector.services.logger import logger

_items_adapter = TypeAdapter(List[ContentItem])

def parse_manifest(data: Any) -> SelectionManifest:
    try:
        manifest = SelectionManifest.model_validate(data)
    except ValidationError as e:
        raise ManifestError(f"Invalid template manifest: {e}") from e
    logger.debug(f"Loaded manifest v{manifest.version} with {len(manifest.templates)} templates")
    return manifest

def parse_items(data: Any) -> List[ContentItem]:
    # Accept either a bare list or an {"items": [...]} envelope
    if isinstance(data, dict) and "items" in data:
        data = data["items"]
    try:
        return _items_adapter.validate_python(data)
    except ValidationError as e:
        raise ManifestError(f"Invalid content items: {e}") from e

def _read_json(path: Union[str, Path]) -> Any:
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise ManifestError(f"File not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ManifestError(f"Invalid JSON in {path}: {e}") from e

def load_manifest(path: Union[str, Path]) -> SelectionManifest:
    return parse_manifest(_read_json(path))

def load_items(path: Union[str, Path]) -> List[ContentItem]:
    return parse_items(_read_json(path))
