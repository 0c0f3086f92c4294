"""Tests for the back/forward navigation history."""

from __future__ import annotations

import random

import pytest

from models.navigation import NavigationHistory
from models.view import View
from services.navigation import go_back, go_forward, navigate_to

HOME = View.home()
SEARCH = View.search()
LIBRARY = View.library()


def test_initial_history_is_single_home_entry() -> None:
    history = NavigationHistory()
    assert history.entries == (HOME,)
    assert history.cursor == 0
    assert history.current == HOME
    assert not history.can_go_back
    assert not history.can_go_forward


def test_cursor_must_be_valid_index() -> None:
    with pytest.raises(ValueError):
        NavigationHistory(entries=(HOME,), cursor=1)
    with pytest.raises(ValueError):
        NavigationHistory(entries=(), cursor=0)


def test_cursor_stays_valid_for_random_intent_sequences() -> None:
    rng = random.Random(1234)
    targets = [HOME, SEARCH, LIBRARY, View.playlist("1"), View.playlist("2")]

    for _ in range(200):
        history = NavigationHistory()
        for _ in range(rng.randint(1, 30)):
            choice = rng.random()
            if choice < 0.5:
                history = navigate_to(history, rng.choice(targets))
            elif choice < 0.75:
                history = go_back(history)
            else:
                history = go_forward(history)
            assert 0 <= history.cursor < len(history.entries)


def test_go_back_at_start_is_noop() -> None:
    history = NavigationHistory()
    assert go_back(history) == history


def test_go_forward_at_end_is_noop() -> None:
    history = navigate_to(NavigationHistory(), SEARCH)
    assert go_forward(history) == history


def test_back_returns_to_previous_view() -> None:
    after_a = navigate_to(NavigationHistory(), SEARCH)
    after_b = navigate_to(after_a, LIBRARY)
    assert go_back(after_b).current == after_a.current


def test_navigating_after_back_discards_forward_entries() -> None:
    history = navigate_to(NavigationHistory(), SEARCH)
    history = go_back(history)
    history = navigate_to(history, LIBRARY)

    assert history.entries == (HOME, LIBRARY)
    assert go_forward(history) == history


def test_navigating_to_current_view_does_not_duplicate() -> None:
    history = navigate_to(NavigationHistory(), SEARCH)
    assert navigate_to(history, SEARCH) == history
    assert navigate_to(navigate_to(history, LIBRARY), LIBRARY).keys == ["home", "search", "library"]


def test_browse_scenario() -> None:
    history = NavigationHistory()

    history = navigate_to(history, SEARCH)
    assert history.keys == ["home", "search"]
    assert history.cursor == 1

    history = navigate_to(history, View.playlist("42"))
    assert history.keys == ["home", "search", "playlist-42"]
    assert history.cursor == 2

    history = go_back(history)
    assert history.current == SEARCH
    assert history.cursor == 1

    history = navigate_to(history, LIBRARY)
    assert history.keys == ["home", "search", "library"]
    assert history.cursor == 2

    assert go_forward(history) == history
