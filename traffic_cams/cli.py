"""Command-line entry point for the traffic camera downloader."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Sequence

from .client import HttpClient
from .config import ScrapeConfig
from .errors import HttpError
from .pipeline import run

logger = logging.getLogger("traffic_cams.cli")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Download the current snapshot of every Tenerife traffic camera.",
    )
    parser.add_argument(
        "--output",
        default=None,
        type=Path,
        help="Directory where snapshots are written (default: current directory)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-request timeout in seconds (default: no timeout)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log progress and debug details (default: warnings and errors only)",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    config = ScrapeConfig(timeout=args.timeout)
    if args.output is not None:
        config.output_root = args.output.resolve()

    overall_start = time.perf_counter()
    with HttpClient(timeout=config.timeout) as client:
        try:
            report = run(client, config)
        except HttpError as exc:
            logger.error("Failed to fetch camera page %s: %s", exc.url, exc)
            sys.exit(1)
    total_elapsed = time.perf_counter() - overall_start

    logger.info(
        "Finished in %.2fs (%d downloaded, %d skipped, %d failed)",
        total_elapsed,
        report.downloaded,
        len(report.skipped),
        report.failed,
    )
    print("Download completed.")


if __name__ == "__main__":
    main()
