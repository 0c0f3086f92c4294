from .shell import Shell, ShellState
from .supabase_client import SupabaseClient, CatalogError
from .catalog import CatalogService
from .cache import CachedResource, DiskCache, FetchResult
from .feeds import Feed, build_feeds

__all__ = [
    'Shell',
    'ShellState',
    'SupabaseClient',
    'CatalogError',
    'CatalogService',
    'CachedResource',
    'DiskCache',
    'FetchResult',
    'Feed',
    'build_feeds',
]
