"""CLI entry point for the post categorizer."""
import argparse
import sys
from pathlib import Path

from src.app.config import get_settings
from src.app.logging import setup_logging
from src.app.paths import ensure_dirs


def _read_input(args) -> str:
    """Text from the positional argument, --file, or stdin, in that order."""
    if args.text is not None:
        return args.text
    if args.file:
        try:
            return Path(args.file).read_text(encoding="utf-8")
        except OSError as e:
            print(f"Cannot read {args.file}: {e}", file=sys.stderr)
            sys.exit(1)
    return sys.stdin.read()


def cmd_categorize(args):
    """Print the category for a piece of text."""
    from src.tagging.service import categorize

    print(categorize(_read_input(args)))


def cmd_explain(args):
    """Print matched terms and scores behind a categorization."""
    from src.tagging.service import get_classifier

    explanation = get_classifier().explain(_read_input(args))

    print(f"  category={explanation.category}")
    if not explanation.matched:
        print("  No known terms matched.")
        return

    print("  matched:")
    for token, category in explanation.matched.items():
        print(f"    {token} -> {category}")

    print("  scores (raw -> weighted):")
    for category, weighted in explanation.ranking:
        raw = explanation.raw_scores[category]
        print(f"    [{raw:.3f} -> {weighted:.3f}] {category}")


def cmd_categories(args):
    """List categories with their display colors."""
    from src.tagging.colors import color_of
    from src.tagging.service import list_categories

    for category in list_categories():
        print(f"  {color_of(category)}  {category}")


def cmd_serve(args):
    """Start the web server."""
    import uvicorn
    from src.web.server import app

    settings = get_settings()
    port = args.port or settings.web_port
    host = settings.web_host

    print(f"Starting server at http://{host}:{port}")
    uvicorn.run(app, host=host, port=port)


def _add_text_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("text", nargs="?", default=None, help="Post text (default: stdin)")
    parser.add_argument("--file", default=None, help="Read post text from a file")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="post-categorizer",
        description="Assign blog posts to a topical category",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # categorize
    p_categorize = subparsers.add_parser("categorize", help="Categorize text")
    _add_text_args(p_categorize)
    p_categorize.set_defaults(func=cmd_categorize)

    # explain
    p_explain = subparsers.add_parser("explain", help="Show scores behind a categorization")
    _add_text_args(p_explain)
    p_explain.set_defaults(func=cmd_explain)

    # categories
    p_categories = subparsers.add_parser("categories", help="List categories and colors")
    p_categories.set_defaults(func=cmd_categories)

    # serve
    p_serve = subparsers.add_parser("serve", help="Start web server")
    p_serve.add_argument("--port", type=int, default=None)
    p_serve.set_defaults(func=cmd_serve)

    return parser


def main(argv=None):
    setup_logging()
    ensure_dirs()

    args = build_parser().parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
