import argparse
import json
import sys
from template_selector.config import settings
from template_selector.errors import TemplateSelectionError
from template_selector.models.templates import UserPreferences
from template_selector.services.logger import logger
from template_selector.services.manifest import load_items, load_manifest
from template_selector.tools.analyzer import analyze_content
from template_selector.tools.ranker import recommend_templates
from template_selector.tools.selector import BlockType, auto_select_template, resolve_block_category
from template_selector.workflows.playground import DATASETS, DEFAULT_DATASET, preview

def cmd_analyze(args) -> dict:
    return analyze_content(load_items(args.items)).model_dump()

def cmd_recommend(args) -> dict:
    items = load_items(args.items)
    manifest = load_manifest(args.manifest)
    prefs = UserPreferences(prefers_visual=True) if args.prefers_visual else None
    recommendations = recommend_templates(
        items,
        manifest,
        category=args.category,
        limit=args.limit,
        min_score=args.min_score,
        user_preferences=prefs,
    )
    return {
        "recommendations": [
            {"template_id": r.template.id, "kind": r.template.kind, "score": r.score, "reasoning": r.reasoning}
            for r in recommendations
        ]
    }

def cmd_auto_select(args) -> dict:
    items = load_items(args.items)
    manifest = load_manifest(args.manifest)
    return {
        "block_type": args.block_type,
        "category": resolve_block_category(args.block_type, len(items)),
        "template_id": auto_select_template(items, manifest, args.block_type),
    }

def cmd_playground(args) -> dict:
    return preview(load_items(args.items), load_manifest(args.manifest), dataset=args.dataset)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Content-aware template selection")
    subparsers = parser.add_subparsers(dest='command', help='Command to execute')

    def add_sources(p, manifest=True):
        p.add_argument('--items', default=str(settings.DEMO_ITEMS_PATH), help='JSON file with content items')
        if manifest:
            p.add_argument('--manifest', default=str(settings.MANIFEST_PATH), help='JSON template manifest')

    analyze_parser = subparsers.add_parser('analyze', help='Summarize the content items')
    add_sources(analyze_parser, manifest=False)
    analyze_parser.set_defaults(func=cmd_analyze)

    recommend_parser = subparsers.add_parser('recommend', help='Rank templates for the content')
    add_sources(recommend_parser)
    recommend_parser.add_argument('--category', help='Only consider templates of this kind')
    recommend_parser.add_argument('--limit', type=int, help='Max number of recommendations')
    recommend_parser.add_argument('--min-score', type=int, help='Minimum acceptable score')
    recommend_parser.add_argument('--prefers-visual', action='store_true', help='Favour image-led templates')
    recommend_parser.set_defaults(func=cmd_recommend)

    auto_parser = subparsers.add_parser('auto-select', help='Pick a template for a block placement')
    add_sources(auto_parser)
    auto_parser.add_argument('block_type', choices=[b.value for b in BlockType], help='Block placement')
    auto_parser.set_defaults(func=cmd_auto_select)

    playground_parser = subparsers.add_parser('playground', help='Preview recommendations for a demo dataset')
    add_sources(playground_parser)
    playground_parser.add_argument('--dataset', choices=list(DATASETS), default=DEFAULT_DATASET)
    playground_parser.set_defaults(func=cmd_playground)

    return parser

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not getattr(args, 'func', None):
        parser.print_help()
        return 0
    try:
        result = args.func(args)
    except TemplateSelectionError as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0

if __name__ == "__main__":
    sys.exit(main())
