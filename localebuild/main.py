"""Command-line entry point.

    localebuild <localizations-dir> <output-dir> [-v]

Exits 1 on a fatal error or when any bundle could not be built cleanly.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from localebuild.bundle import build_locales
from localebuild.config import load_config
from localebuild.report import LocaleBuildError

logger = logging.getLogger("localebuild.main")


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(format="%(message)s", stream=sys.stdout)
    logging.getLogger("localebuild").setLevel(logging.DEBUG if verbose else logging.INFO)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="localebuild",
        description="Merge localization platform translations into per-view locale bundles.",
    )
    parser.add_argument("localizations_dir", nargs="?", help="Directory of downloaded translations")
    parser.add_argument("output_dir", nargs="?", help="Directory the .intl.js bundles are written to")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    if not args.localizations_dir:
        print("A localizations directory must be specified.")
        return 1
    localizations_dir = Path(args.localizations_dir).resolve()
    if not localizations_dir.is_dir():
        print("Fatal error: No localizations directory.")
        return 1

    if not args.output_dir:
        print("A destination directory must be specified.")
        return 1
    output_dir = Path(args.output_dir).resolve()
    if not output_dir.exists():
        try:
            output_dir.mkdir()
        except OSError as exc:
            print(f"Fatal error: Could not create {output_dir}: {exc}")
            return 1

    try:
        config = load_config()
        report = asyncio.run(build_locales(config, localizations_dir, output_dir))
    except (LocaleBuildError, OSError) as exc:
        logger.error("Fatal error: %s", exc)
        return 1

    if not report.ok:
        summary = ", ".join(f"{count} {kind}" for kind, count in sorted(report.failures_by_kind().items()))
        logger.error("Build failed (%s) for: %s", summary, ", ".join(report.failed_views()))
        return 1

    logger.info("Wrote %d bundles to %s", len(report.written), output_dir)
    return 0


def run() -> None:
    sys.exit(main())
