"""Polite HTTP fetcher.

One GET per call, never in parallel, followed by a fixed pause. jpdb.io starts
refusing every request once it decides we are going too fast, which would sink
the whole batch, so the pause is not optional.
"""
from __future__ import annotations

import logging
import time
from typing import Callable, Optional

import requests

logger = logging.getLogger(__name__)

# jpdb.io tolerates about one request per second
MIN_DELAY_SECONDS = 1.0


class FetchError(RuntimeError):
    """A network request failed (DNS, timeout, non-2xx...). Not retried."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url


class RateLimitedFetcher:
    """Sequential GET client with a mandatory delay after every request."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        delay_seconds: float = 1.0,
        timeout_seconds: float = 30.0,
        user_agent: Optional[str] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if delay_seconds < MIN_DELAY_SECONDS:
            raise ValueError(f"delay_seconds must be at least {MIN_DELAY_SECONDS}, got {delay_seconds}")
        self.session = session if session is not None else requests.Session()
        self.delay_seconds = delay_seconds
        self.timeout_seconds = timeout_seconds
        self.headers = {"User-Agent": user_agent} if user_agent else {}
        self._sleep = sleep
        self.request_count = 0

    def fetch(self, url: str) -> str:
        """GET `url` and return the response body as text.

        The delay is applied after the request whether it succeeded or not.
        Raises FetchError on any requests failure.
        """
        logger.info("Fetching %s", url)
        self.request_count += 1
        try:
            resp = self.session.get(url, headers=self.headers, timeout=self.timeout_seconds)
            resp.raise_for_status()
            return resp.text
        except requests.RequestException as e:
            raise FetchError(url, str(e)) from e
        finally:
            self._sleep(self.delay_seconds)
