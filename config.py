"""Shared configuration and environment setup."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DATA_DIR = Path.home() / ".local" / "share" / "sigtune"
DEFAULT_HTTP_TIMEOUT = 10.0


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


@dataclass(frozen=True)
class Settings:
    """Runtime settings read from the environment.
    
    Attributes:
        supabase_url: Base URL of the Supabase project, e.g. https://xyz.supabase.co
        supabase_key: Anonymous (public) API key of the project.
        cache_dir: Directory holding cached catalog responses.
        http_timeout: Timeout in seconds for catalog requests.
    """
    supabase_url: str | None
    supabase_key: str | None
    cache_dir: Path
    http_timeout: float = DEFAULT_HTTP_TIMEOUT

    @property
    def has_supabase(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)


def load_settings() -> Settings:
    """Build Settings from environment variables.
    
    Raises:
        ConfigError: If SIGTUNE_HTTP_TIMEOUT is not a positive number.
    """
    raw_timeout = os.environ.get("SIGTUNE_HTTP_TIMEOUT")
    timeout = DEFAULT_HTTP_TIMEOUT
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigError(f"SIGTUNE_HTTP_TIMEOUT must be a number, got {raw_timeout!r}")
        if timeout <= 0:
            raise ConfigError("SIGTUNE_HTTP_TIMEOUT must be positive")
    
    cache_dir = os.environ.get("SIGTUNE_CACHE_DIR")
    
    return Settings(
        supabase_url=os.environ.get("SUPABASE_URL") or None,
        supabase_key=os.environ.get("SUPABASE_ANON_KEY") or None,
        cache_dir=Path(cache_dir).expanduser() if cache_dir else DATA_DIR / "cache",
        http_timeout=timeout,
    )
