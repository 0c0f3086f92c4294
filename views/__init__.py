from .home import HomeView
from .search import SearchView
from .library import LibraryView
from .playlist import PlaylistView

__all__ = ["HomeView", "SearchView", "LibraryView", "PlaylistView"]
