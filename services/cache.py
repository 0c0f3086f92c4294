from __future__ import annotations

import json
import logging
import re
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable

logger = logging.getLogger(__name__)

MINUTE = 60

CACHE_DURATIONS = {
    "recently_played": 5 * MINUTE,
    "popular_albums": 15 * MINUTE,
    "playlists": 30 * MINUTE,
}

REFRESH_INTERVALS = {
    "recently_played": 1 * MINUTE,
    "popular_albums": 5 * MINUTE,
    "playlists": 10 * MINUTE,
}


@dataclass
class CacheEntry:
    data: Any
    timestamp: float

    def age(self, now: float) -> float:
        return now - self.timestamp


class DiskCache:
    """JSON file cache, one file per key."""

    def __init__(self, cache_dir: Path):
        """Initialize cache with its directory, creating it if needed."""
        self._cache_dir = cache_dir

        try:
            self._cache_dir.mkdir(parents=True, exist_ok=True)
            logger.info(f"Catalog cache directory: {self._cache_dir}")
        except OSError as e:
            logger.error(f"Failed to create cache directory: {e}")

    def _path(self, key: str) -> Path:
        safe_key = re.sub(r"[^A-Za-z0-9_.-]", "_", key)
        return self._cache_dir / f"{safe_key}.json"

    def get(self, key: str) -> CacheEntry | None:
        """Read an entry.

        Returns:
            CacheEntry, or None when missing or unreadable. Corrupted files,
            including ones whose data is not a list of records, are deleted.
        """
        cache_file = self._path(key)
        if not cache_file.exists():
            return None

        try:
            payload = json.loads(cache_file.read_text())
            data = payload["data"]
            if not isinstance(data, list) or not all(isinstance(record, dict) for record in data):
                raise ValueError("data is not a list of records")
            return CacheEntry(data=data, timestamp=float(payload["timestamp"]))
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Corrupted cache entry {key}, discarding: {e}")
            try:
                cache_file.unlink(missing_ok=True)
            except OSError as unlink_error:
                logger.error(f"Failed to delete corrupted cache file: {unlink_error}")
        except OSError as e:
            logger.error(f"Failed to read cache entry {key}: {e}")
        return None

    def set(self, key: str, data: Any, timestamp: float) -> None:
        """Write an entry. Write failures are logged, not raised."""
        try:
            self._path(key).write_text(json.dumps({"data": data, "timestamp": timestamp}))
            logger.debug(f"Cached {key}")
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Failed to cache {key}: {e}")


@dataclass
class FetchResult:
    """Outcome of loading a cached resource.

    Attributes:
        data: Fetched or cached data, empty list when neither is available.
        error: Human-readable error of the failed fetch, None on success.
        from_cache: True when data came from the cache rather than the fetcher.
    """
    data: Any = field(default_factory=list)
    error: str | None = None
    from_cache: bool = False


class CachedResource:
    """Cache-aside loader for one catalog resource.

    Fresh cache entries are served without a fetch. A failed fetch falls back
    to the cached entry only while it is still within max_age.
    """

    def __init__(
        self,
        key: str,
        max_age: float,
        fetcher: Callable[[], Any],
        cache: DiskCache,
        clock: Callable[[], float] = time.time,
    ):
        self.key = key
        self.max_age = max_age
        self._fetcher = fetcher
        self._cache = cache
        self._clock = clock

    def _fresh_entry(self) -> CacheEntry | None:
        entry = self._cache.get(self.key)
        if entry is not None and entry.age(self._clock()) < self.max_age:
            return entry
        return None

    def load(self, force: bool = False) -> FetchResult:
        """Return the resource data.

        Args:
            force: Skip the fresh-cache shortcut and always call the fetcher.

        Returns:
            FetchResult with data and, on fetch failure, the error message.
        """
        if not force:
            entry = self._fresh_entry()
            if entry is not None:
                logger.debug(f"Cache hit for {self.key}")
                return FetchResult(data=entry.data, from_cache=True)

        try:
            data = self._fetcher()
        except Exception as e:
            logger.error(f"Fetching {self.key} failed: {type(e).__name__}: {e}")
            entry = self._fresh_entry()
            if entry is not None:
                logger.info(f"Serving cached {self.key} after fetch failure")
                return FetchResult(data=entry.data, error=str(e), from_cache=True)
            return FetchResult(error=str(e))

        self._cache.set(self.key, data, self._clock())
        return FetchResult(data=data)
