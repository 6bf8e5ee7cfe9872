#!/usr/bin/env python3
"""
List routes whose geometry is made of more than one line segment.

This script reads every GeoJSON file under the data directory and prints
one "name RouteID" line per multi-segment route, sorted by file name and
then by route ID.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from route_report.report import build_report, write_report
from route_report.schemas import ReportConfig

logger = logging.getLogger(__name__)

# The "data" folder next to this script
DEFAULT_DATA_DIR = Path(__file__).resolve().parent / "data"


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="List routes whose geometry has more than one segment"
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        help=f"Directory searched for GeoJSON files (default: {DEFAULT_DATA_DIR})"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--workers",
        type=int,
        help="Number of threads used to read files"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (repeat for debug output)"
    )
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace) -> ReportConfig:
    """
    Merge the configuration file and command line flags.

    Flags take precedence over the file, and the file over the defaults.
    """
    config = ReportConfig.from_yaml(args.config) if args.config else ReportConfig()

    if args.data_dir is not None:
        config.data_dir = args.data_dir
    elif config.data_dir is None:
        config.data_dir = DEFAULT_DATA_DIR

    if args.workers is not None:
        config.max_workers = args.workers

    if args.verbose >= 2:
        config.log_level = "DEBUG"
    elif args.verbose == 1:
        config.log_level = "INFO"

    return config


def main(argv: Optional[Sequence[str]] = None) -> int:
    """List multi-segment routes."""
    args = parse_arguments(argv)
    logging.basicConfig(format="%(levelname)s %(message)s")

    try:
        config = resolve_settings(args)
    except Exception as e:
        logger.error("Error loading configuration: %s", e)
        return 1

    logging.getLogger().setLevel(config.log_level)
    logger.info("Reading GeoJSON files from %s", config.data_dir)

    try:
        pairs = build_report(config.data_dir, max_workers=config.max_workers)
    except (OSError, ValueError) as e:
        logger.error("Error building route report: %s", e,
                     exc_info=config.log_level == "DEBUG")
        return 1

    write_report(pairs)
    logger.info("Listed %d routes", len(pairs))
    return 0


if __name__ == "__main__":
    sys.exit(main())
