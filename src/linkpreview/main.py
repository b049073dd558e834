from __future__ import annotations

import argparse
import json
import logging
from datetime import datetime, timezone

from linkpreview.config import get_settings
from linkpreview.errors import PreviewError
from linkpreview.logging import setup_logging
from linkpreview.preview import PreviewService
from linkpreview.schemas.card import serialize_card

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Link preview card extractor")
    subparsers = parser.add_subparsers(dest="command")

    preview_parser = subparsers.add_parser("preview", help="Build a preview card for the last link in TEXT")
    preview_parser.add_argument("text", help="Free-form text containing a link")
    preview_parser.add_argument("--verbose", action="store_true", help="Enable debug logs")

    return parser


def run_preview(args: argparse.Namespace) -> int:
    service = PreviewService(get_settings())

    try:
        card = service.fetch_preview(args.text, datetime.now(timezone.utc))
    except PreviewError as exc:
        logger.error("Preview unavailable: %s", exc)
        print(f"Preview unavailable: {exc}")
        return 1

    if card is None:
        print("No link found.")
        return 0

    print(json.dumps(serialize_card(card), indent=2, ensure_ascii=False))
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command != "preview":
        parser.print_help()
        return

    setup_logging(verbose=bool(args.verbose))
    raise SystemExit(run_preview(args))


if __name__ == "__main__":
    main()
