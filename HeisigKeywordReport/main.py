"""Command-line entry point: build the Heisig / jpdb keyword reports.

Fatal errors (bad reference data, a failed fetch, an unwritable output file)
are logged and turn into exit status 1.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .core.config import AppConfig
from .pipeline import run
from .services.data_prep.reference_sources import ReferenceDataError
from .services.dictionary.fetcher import FetchError

logger = logging.getLogger(__name__)


def build_config(argv: Optional[List[str]] = None) -> tuple[AppConfig, argparse.Namespace]:
    config = AppConfig()
    parser = argparse.ArgumentParser(description="Compare Heisig keywords with jpdb.io keywords.")
    parser.add_argument("--reference", default=config.paths.reference_csv, help="Heisig reference CSV")
    parser.add_argument("--cache-dir", default=config.paths.cache_dir, help="Directory for cached jpdb pages")
    parser.add_argument("--output-dir", default=config.paths.output_dir, help="Where the CSV/HTML reports go")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    config.paths.reference_csv = args.reference
    config.paths.cache_dir = args.cache_dir
    config.paths.output_dir = args.output_dir
    return config, args


def main(argv: Optional[List[str]] = None) -> int:
    config, args = build_config(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        written = run(config)
    except (ReferenceDataError, FetchError, OSError) as e:
        logger.error("%s", e)
        return 1
    for edition, (csv_path, html_path) in written.items():
        logger.info("Edition %s: %s, %s", edition, csv_path, html_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
