"""Tests for the home-page feeds."""

from __future__ import annotations

import json
import time
from pathlib import Path

import httpx

from services.cache import CACHE_DURATIONS, DiskCache
from services.feeds import build_feeds
from tests.conftest import RecordingHandler
from tests.test_catalog import ALBUM_ROW, PLAYLIST_ROW, RECENT_ROW


def test_feeds_are_built_in_display_order(tmp_path: Path, make_catalog) -> None:
    feeds = build_feeds(make_catalog(RecordingHandler({})), DiskCache(tmp_path))

    assert [feed.name for feed in feeds] == ["recently_played", "made_for_you", "popular_albums"]
    assert [feed.resource.key for feed in feeds] == [
        "recently-played-tracks-10",
        "made-for-you-playlists-all",
        "popular-albums-20",
    ]
    assert feeds[0].resource.max_age == CACHE_DURATIONS["recently_played"]
    assert feeds[1].resource.max_age == CACHE_DURATIONS["playlists"]
    assert feeds[2].resource.max_age == CACHE_DURATIONS["popular_albums"]


def test_feed_load_returns_tracks_and_uses_cache(tmp_path: Path, make_catalog) -> None:
    handler = RecordingHandler({
        ("GET", "recently_played"): httpx.Response(200, json=[RECENT_ROW]),
        ("GET", "made_for_you"): httpx.Response(200, json=[PLAYLIST_ROW]),
        ("GET", "popular_albums"): httpx.Response(200, json=[ALBUM_ROW]),
    })
    feeds = build_feeds(make_catalog(handler), DiskCache(tmp_path))

    for feed in feeds:
        feed.load()
    assert [feed.tracks[0].id for feed in feeds] == ["rp1", "mfy1", "alb1"]
    assert all(feed.error is None for feed in feeds)
    assert len(handler.requests) == 3

    reloaded = build_feeds(make_catalog(handler), DiskCache(tmp_path))
    reloaded[0].load()
    assert reloaded[0].tracks == feeds[0].tracks
    assert len(handler.requests) == 3


def test_feed_reports_error_and_keeps_cached_tracks(tmp_path: Path, make_catalog) -> None:
    cache = DiskCache(tmp_path)
    ok = RecordingHandler({("GET", "popular_albums"): httpx.Response(200, json=[ALBUM_ROW])})
    build_feeds(make_catalog(ok), cache)[2].load()

    failing = RecordingHandler({("GET", "popular_albums"): httpx.Response(500, json={"message": "down"})})
    feed = build_feeds(make_catalog(failing), cache)[2]
    feed.load(force=True)

    assert feed.error is not None
    assert "down" in feed.error
    assert [track.id for track in feed.tracks] == ["alb1"]


def test_feeds_without_catalog_report_reason(tmp_path: Path) -> None:
    feeds = build_feeds(None, DiskCache(tmp_path), "Catalog not configured")
    for feed in feeds:
        feed.load()
        assert feed.tracks == []
        assert feed.error == "Catalog not configured"


def test_feed_refetches_when_cached_data_is_malformed(tmp_path: Path, make_catalog) -> None:
    handler = RecordingHandler({
        ("GET", "recently_played"): httpx.Response(200, json=[RECENT_ROW]),
    })
    (tmp_path / "recently-played-tracks-10.json").write_text(
        json.dumps({"data": ["oops"], "timestamp": time.time()})
    )
    recently_played = build_feeds(make_catalog(handler), DiskCache(tmp_path))[0]

    recently_played.load()

    assert [track.id for track in recently_played.tracks] == ["rp1"]
    assert recently_played.error is None
    assert len(handler.requests) == 1
