"""
Supabase Client Service

Minimal client for the Supabase REST (PostgREST) interface. Covers the
select/insert/update/delete calls the catalog needs and nothing more.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from config import ConfigError, DEFAULT_HTTP_TIMEOUT

logger = logging.getLogger(__name__)

REQUIRED_TABLES = ("recently_played", "made_for_you", "popular_albums")


class CatalogError(Exception):
    """Raised when a catalog request fails."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class SupabaseClient:
    """HTTP client for a Supabase project's REST endpoint."""

    def __init__(
        self,
        url: str | None,
        key: str | None,
        *,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            url: Project URL, e.g. https://xyz.supabase.co
            key: Anonymous API key
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used by tests

        Raises:
            ConfigError: If url or key is missing
        """
        if not url or not key:
            raise ConfigError(
                "Missing Supabase configuration. Required environment variables:\n"
                "- SUPABASE_URL\n"
                "- SUPABASE_ANON_KEY"
            )

        self._client = httpx.Client(
            base_url=f"{url.rstrip('/')}/rest/v1",
            headers={
                "apikey": key,
                "Authorization": f"Bearer {key}",
                "Accept": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> SupabaseClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _request(
        self,
        method: str,
        table: str,
        *,
        params: dict[str, str] | None = None,
        json: Any = None,
        return_rows: bool = True,
    ) -> list[dict[str, Any]]:
        """Send a request to a table endpoint and decode the returned rows.

        Raises:
            CatalogError: On transport errors, error status codes or undecodable bodies
        """
        headers = {"Prefer": "return=representation"} if method != "GET" and return_rows else {}

        try:
            response = self._client.request(
                method, f"/{table}", params=params, json=json, headers=headers
            )
        except httpx.HTTPError as e:
            logger.error(f"{method} {table} failed: {type(e).__name__}: {e}")
            raise CatalogError(f"Could not reach catalog ({method} {table}): {e}") from e

        if response.is_error:
            detail = _error_message(response)
            logger.error(f"{method} {table} returned {response.status_code}: {detail}")
            raise CatalogError(
                f"Catalog request failed ({method} {table}): {detail}",
                status_code=response.status_code,
            )

        if not return_rows or not response.content:
            return []

        try:
            rows = response.json()
        except ValueError as e:
            raise CatalogError(f"Invalid JSON from catalog ({method} {table})") from e

        if isinstance(rows, dict):
            return [rows]
        return rows

    def select(
        self,
        table: str,
        *,
        order: str | None = None,
        descending: bool = False,
        limit: int | None = None,
        filters: dict[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """Select rows from a table.

        Args:
            table: Table name
            order: Column to order by
            descending: Order direction
            limit: Maximum number of rows
            filters: Column equality filters

        Returns:
            List of row dictionaries
        """
        params = {"select": "*"}
        if order:
            params["order"] = f"{order}.{'desc' if descending else 'asc'}"
        if limit is not None:
            params["limit"] = str(limit)
        for column, value in (filters or {}).items():
            params[column] = f"eq.{value}"

        rows = self._request("GET", table, params=params)
        logger.debug(f"Selected {len(rows)} rows from {table}")
        return rows

    def insert(self, table: str, row: dict[str, Any]) -> dict[str, Any]:
        """Insert one row and return it as stored."""
        rows = self._request("POST", table, json=row)
        if not rows:
            raise CatalogError(f"Insert into {table} returned no row")
        return rows[0]

    def update(self, table: str, row_id: str, values: dict[str, Any]) -> dict[str, Any]:
        """Update one row by id and return it as stored."""
        rows = self._request("PATCH", table, params={"id": f"eq.{row_id}"}, json=values)
        if not rows:
            raise CatalogError(f"No row {row_id} in {table}", status_code=404)
        return rows[0]

    def delete(self, table: str, row_id: str) -> None:
        """Delete one row by id."""
        self._request("DELETE", table, params={"id": f"eq.{row_id}"}, return_rows=False)

    def test_connection(self) -> bool:
        """Check that the catalog answers a trivial query."""
        try:
            self.select(REQUIRED_TABLES[0], limit=1)
            return True
        except CatalogError as e:
            logger.error(f"Supabase connection test failed: {e}")
            return False

    def validate_schema(self) -> tuple[bool, list[str]]:
        """Check that every required table exists.

        Returns:
            Tuple of (valid, missing_tables).
        """
        missing = []
        for table in REQUIRED_TABLES:
            try:
                self.select(table, limit=1)
            except CatalogError as e:
                logger.warning(f"Table check failed for {table}: {e}")
                missing.append(table)
        return not missing, missing


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict):
        return body.get("message") or body.get("error") or str(body)
    return str(body)
