from __future__ import annotations

from dataclasses import dataclass, field

from models.view import View


@dataclass(frozen=True)
class NavigationHistory:
    """Back/forward stack of visited views.
    
    Attributes:
        entries: Visited views, oldest first.
        cursor: Index of the current view in entries.
    """
    entries: tuple[View, ...] = field(default_factory=lambda: (View.home(),))
    cursor: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.cursor < len(self.entries):
            raise ValueError(
                f"History cursor {self.cursor} out of range for {len(self.entries)} entries"
            )

    @property
    def current(self) -> View:
        return self.entries[self.cursor]

    @property
    def can_go_back(self) -> bool:
        return self.cursor > 0

    @property
    def can_go_forward(self) -> bool:
        return self.cursor < len(self.entries) - 1

    @property
    def keys(self) -> list[str]:
        return [view.key for view in self.entries]
