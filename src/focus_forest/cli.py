"""CLI entry point for focus-forest."""

import argparse
import logging
import sys

import focus_forest.io.logging_setup
from focus_forest.core.formatting import FONT_SIZES
from focus_forest.core.i18n import SUPPORTED_LANGUAGES
from focus_forest.errors import ValidationError
from focus_forest.tui.app import DEFAULT_NARROW_WIDTH, FocusForestApp

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="focus-forest",
        description="Focus timer that plants a tree for every finished session",
    )
    parser.add_argument("--username", type=str, default=None, help="Display name (default: from settings, else Guest)")
    parser.add_argument(
        "--language",
        choices=SUPPORTED_LANGUAGES,
        default=None,
        help="UI language (default: from settings, else en)",
    )
    parser.add_argument(
        "--theme-color",
        type=str,
        default=None,
        help="Primary colour as #rgb, #rrggbb or rgb(r, g, b)",
    )
    parser.add_argument("--font-size", choices=FONT_SIZES, default=None, help="Base font size")
    parser.add_argument(
        "--narrow-width",
        type=int,
        default=DEFAULT_NARROW_WIDTH,
        help=f"Terminal columns at or below which the sidebar auto-collapses (default: {DEFAULT_NARROW_WIDTH})",
    )
    return parser


def collect_overrides(args: argparse.Namespace) -> dict:
    mapping = {
        "username": args.username,
        "language": args.language,
        "theme_color": args.theme_color,
        "font_size": args.font_size,
    }
    return {key: value for key, value in mapping.items() if value is not None}


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    runtime = focus_forest.io.logging_setup.configure("focus")
    logger.info("focus-forest starting (log file: %s)", runtime.file_path)

    try:
        app = FocusForestApp(narrow_width=args.narrow_width, settings_overrides=collect_overrides(args))
    except ValidationError as exc:
        parser.error(str(exc))
    app.run()
    forest_count = app.core.ledger.count()
    logger.info("focus-forest exiting with %d tree(s) planted", forest_count)
    print(f"Trees planted this session: {forest_count}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
