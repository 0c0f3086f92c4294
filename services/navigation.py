"""Back/forward navigation over the content panes."""

from __future__ import annotations

from dataclasses import replace

from models.navigation import NavigationHistory
from models.view import View


def navigate_to(history: NavigationHistory, target: View) -> NavigationHistory:
    """Push a view onto the history, discarding any forward entries.
    
    Navigating to the view already under the cursor returns the history unchanged.
    
    Args:
        history: Current navigation history.
        target: View to show.
        
    Returns:
        New history with target as the current view.
    """
    if target == history.current:
        return history
    
    entries = history.entries[:history.cursor + 1] + (target,)
    return NavigationHistory(entries=entries, cursor=len(entries) - 1)


def go_back(history: NavigationHistory) -> NavigationHistory:
    """Move the cursor one entry back. No-op at the oldest entry."""
    if not history.can_go_back:
        return history
    return replace(history, cursor=history.cursor - 1)


def go_forward(history: NavigationHistory) -> NavigationHistory:
    """Move the cursor one entry forward. No-op at the newest entry."""
    if not history.can_go_forward:
        return history
    return replace(history, cursor=history.cursor + 1)
