"""jpdb.io access: rate-limited fetching, on-disk response cache, keyword extraction."""
from .cache import ResponseCache
from .fetcher import FetchError, RateLimitedFetcher
from .jpdb import JpdbClient, extract_keyword

__all__ = ["ResponseCache", "FetchError", "RateLimitedFetcher", "JpdbClient", "extract_keyword"]
