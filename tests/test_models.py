"""Smoke tests for the track model."""

from __future__ import annotations

from models.track import Track, format_time


def test_track_from_api_record() -> None:
    track = Track.from_api({
        "id": 7,
        "title": "Blue in Green",
        "artist": "Miles Davis",
        "album": "Kind of Blue",
        "albumArt": "https://example.com/kob.jpg",
        "duration": "337",
    })
    assert track.id == "7"
    assert track.album_art == "https://example.com/kob.jpg"
    assert track.duration == 337
    assert Track.from_api(track.to_api()) == track


def test_track_from_api_fills_missing_fields() -> None:
    track = Track.from_api({"id": "x", "albumArt": None, "duration": None})
    assert track.title == "Unknown Title"
    assert track.artist == "Unknown Artist"
    assert track.album == "Unknown Album"
    assert track.album_art == ""
    assert track.duration == 0


def test_format_time() -> None:
    assert format_time(0) == "0:00"
    assert format_time(59.9) == "0:59"
    assert format_time(200) == "3:20"
    assert format_time(-3) == "0:00"
