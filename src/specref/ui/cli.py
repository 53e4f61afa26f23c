from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from specref.app import scrape_catalogs
from specref.config import ConfigurationError, configure_logging, get_catalogs

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build SpecRef registries from standards catalogs")
    subparsers = parser.add_subparsers(dest="command", required=True)

    scrape = subparsers.add_parser("scrape", help="Scrape catalogs and write registry files")
    scrape.add_argument(
        "--catalog",
        dest="catalogs",
        action="append",
        metavar="NAME",
        help="Catalog to scrape; repeat for several (defaults to all configured catalogs)",
    )
    scrape.add_argument(
        "--output-dir",
        type=str,
        help="Directory to write registries into; it is emptied first (default: SpecRef)",
    )
    scrape.add_argument(
        "--sequential",
        action="store_true",
        help="Scrape catalogs one after another instead of concurrently",
    )
    scrape.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every catalog item as it is resolved",
    )

    subparsers.add_parser("catalogs", help="List configured catalogs")

    return parser.parse_args(list(argv))


def _list_catalogs() -> None:
    for catalog in get_catalogs():
        log.info("%s (%s) -> %s", catalog.name, catalog.family.value, catalog.outfile)
        for url in catalog.urls:
            log.info("    %s", url)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    verbose = getattr(parsed_args, "verbose", False)
    configure_logging(level=logging.DEBUG if verbose else logging.INFO)

    try:
        if parsed_args.command == "scrape":
            catalogs = get_catalogs(parsed_args.catalogs)
        elif parsed_args.command == "catalogs":
            _list_catalogs()
            return
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except (ConfigurationError, ValueError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        report = scrape_catalogs(
            catalogs,
            output_dir=parsed_args.output_dir,
            concurrent=not parsed_args.sequential,
        )
    except Exception:
        log.exception("Fatal error during scrape")
        sys.exit(1)

    for outcome in report.outcomes:
        if outcome.ok:
            log.info(
                "%s: %s entries, %s aliases -> %s",
                outcome.catalog.name,
                outcome.entries,
                outcome.aliases,
                outcome.path,
            )
        else:
            log.error("%s: failed (%s)", outcome.catalog.name, outcome.error)
    if not report.ok:
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
