"""Persistent response cache keyed by request URL.

Layout: ``<cache_dir>/<namespace>/<sha256(url)>.json``, each file holding
``{"url": ..., "body": ...}``. Entries never expire; delete the directory to
force a refresh. A single writer is assumed: two runs sharing one cache
directory at the same time are unsafe.
"""
from __future__ import annotations

import hashlib
import json
import logging
import os
from pathlib import Path
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class ResponseCache:
    def __init__(self, cache_dir: str | Path, namespace: str = "getUrl") -> None:
        self.root = Path(cache_dir) / namespace

    @staticmethod
    def key_for(url: str) -> str:
        return hashlib.sha256(url.encode("utf8")).hexdigest()

    def path_for(self, url: str) -> Path:
        return self.root / f"{self.key_for(url)}.json"

    def get(self, url: str) -> Optional[str]:
        """Return the cached body for `url`, or None on a miss.

        Unreadable entries count as misses so the next fetch rewrites them.
        """
        path = self.path_for(url)
        if not path.exists():
            return None
        try:
            with path.open("r", encoding="utf8") as fh:
                entry = json.load(fh)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable cache entry %s: %s", path, e)
            return None
        if not isinstance(entry, dict) or entry.get("url") != url or not isinstance(entry.get("body"), str):
            logger.warning("Ignoring mismatched cache entry %s", path)
            return None
        return entry["body"]

    def put(self, url: str, body: str) -> None:
        path = self.path_for(url)
        path.parent.mkdir(parents=True, exist_ok=True)
        # atomic write so an interrupted run never leaves half an entry
        tmp = path.with_suffix(path.suffix + ".tmp")
        try:
            with tmp.open("w", encoding="utf8") as fh:
                json.dump({"url": url, "body": body}, fh, ensure_ascii=False)
            os.replace(str(tmp), str(path))
        finally:
            if tmp.exists():
                tmp.unlink()

    def get_or_fetch(self, url: str, fetch: Callable[[str], str]) -> str:
        """Serve `url` from disk, or call `fetch` and store the result.

        A hit never touches `fetch`, so it never pays the fetcher's delay.
        """
        body = self.get(url)
        if body is not None:
            logger.debug("Cache hit for %s", url)
            return body
        body = fetch(url)
        self.put(url, body)
        return body

    def __contains__(self, url: str) -> bool:
        return self.get(url) is not None

    def __len__(self) -> int:
        if not self.root.exists():
            return 0
        return sum(1 for _ in self.root.glob("*.json"))
