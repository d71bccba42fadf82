"""Load -> scrape -> render.

Every jpdb page is fetched (or read from the cache) before any report file is
written, so a failed load or fetch leaves the output directory untouched. The
cache keeps whatever was fetched before the failure, which makes a re-run pick
up where the previous one stopped.
"""
from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .core.config import AppConfig
from .core.models import KanjiInfo, ReferenceRecord
from .services.data_prep.reference_sources import load_reference_csv
from .services.dictionary.cache import ResponseCache
from .services.dictionary.fetcher import RateLimitedFetcher
from .services.dictionary.jpdb import JpdbClient
from .services.report.render import write_edition_reports

logger = logging.getLogger(__name__)

PROGRESS_EVERY = 100


def enrich_kanji_infos(records: Sequence[ReferenceRecord], client: JpdbClient) -> List[KanjiInfo]:
    """Attach the jpdb keyword to each record, one kanji at a time, in input order."""
    infos: List[KanjiInfo] = []
    total = len(records)
    for i, record in enumerate(records, 1):
        infos.append(KanjiInfo.from_reference(record, client.lookup_keyword(record.kanji)))
        if i % PROGRESS_EVERY == 0 or i == total:
            logger.info("Looked up %d/%d kanji", i, total)
    return infos


def build_client(config: AppConfig, session=None, sleep: Callable[[float], None] = time.sleep) -> JpdbClient:
    fetcher = RateLimitedFetcher(
        session=session,
        delay_seconds=config.scrape.delay_seconds,
        timeout_seconds=config.scrape.timeout_seconds,
        user_agent=config.scrape.user_agent,
        sleep=sleep,
    )
    cache = ResponseCache(config.paths.cache_dir)
    return JpdbClient(fetcher, cache=cache, base_url=config.scrape.base_url)


def run(config: Optional[AppConfig] = None, client: Optional[JpdbClient] = None) -> Dict[str, Tuple[Path, Path]]:
    """Build every edition's report. Returns edition -> (csv_path, html_path)."""
    config = config or AppConfig()
    records = load_reference_csv(config.paths.reference_csv)
    client = client or build_client(config)
    infos = enrich_kanji_infos(records, client)
    logger.info("Issued %d network request(s)", client.fetcher.request_count)
    return write_edition_reports(infos, config.paths.output_dir, config.report, jpdb_url=client.base_url)
