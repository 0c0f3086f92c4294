from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from models.track import Track
from services.cache import CACHE_DURATIONS, REFRESH_INTERVALS, CachedResource, DiskCache
from services.catalog import CatalogService

logger = logging.getLogger(__name__)

RECENTLY_PLAYED_LIMIT = 10
POPULAR_ALBUMS_LIMIT = 20


@dataclass
class Feed:
    """A home-page section backed by a cached catalog resource."""
    name: str
    title: str
    resource: CachedResource
    refresh_interval: float
    tracks: list[Track] = field(default_factory=list)
    error: str | None = None

    def load(self, force: bool = False) -> list[Track]:
        """Load the section's tracks, updating tracks and error."""
        result = self.resource.load(force=force)
        self.error = result.error
        self.tracks = [Track.from_api(record) for record in result.data]
        logger.debug(
            f"Loaded {len(self.tracks)} {self.name} items "
            f"(cache={result.from_cache}, error={result.error})"
        )
        return self.tracks


def _unavailable(message: str) -> Callable[[], list]:
    def fetch() -> list:
        raise RuntimeError(message)
    return fetch


def build_feeds(catalog: CatalogService | None, cache: DiskCache, unavailable_reason: str = "") -> list[Feed]:
    """Create the home-page feeds in display order.

    Args:
        catalog: Catalog service, or None when the catalog is not configured.
        cache: Shared disk cache.
        unavailable_reason: Error reported by every feed when catalog is None.

    Returns:
        Feeds for recently played, made for you and popular albums.
    """
    def fetcher(load: Callable[[], list[Track]]) -> Callable[[], list]:
        if catalog is None:
            return _unavailable(unavailable_reason or "Catalog is not configured")
        return lambda: [track.to_api() for track in load()]

    return [
        Feed(
            name="recently_played",
            title="Recently played",
            resource=CachedResource(
                f"recently-played-tracks-{RECENTLY_PLAYED_LIMIT}",
                CACHE_DURATIONS["recently_played"],
                fetcher(lambda: catalog.recently_played(RECENTLY_PLAYED_LIMIT)),
                cache,
            ),
            refresh_interval=REFRESH_INTERVALS["recently_played"],
        ),
        Feed(
            name="made_for_you",
            title="Made for you",
            resource=CachedResource(
                "made-for-you-playlists-all",
                CACHE_DURATIONS["playlists"],
                fetcher(lambda: catalog.made_for_you()),
                cache,
            ),
            refresh_interval=REFRESH_INTERVALS["playlists"],
        ),
        Feed(
            name="popular_albums",
            title="Popular albums",
            resource=CachedResource(
                f"popular-albums-{POPULAR_ALBUMS_LIMIT}",
                CACHE_DURATIONS["popular_albums"],
                fetcher(lambda: catalog.popular_albums(POPULAR_ALBUMS_LIMIT)),
                cache,
            ),
            refresh_interval=REFRESH_INTERVALS["popular_albums"],
        ),
    ]
