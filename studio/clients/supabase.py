"""Supabase REST client (PostgREST API)."""

import time
from typing import Any

import requests


class SupabaseError(Exception):
    """Supabase returned a non-success response."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class SupabaseClient:
    """Minimal table client for the Supabase REST API."""

    def __init__(self, url: str, api_key: str, timeout: int = 30):
        self.api_key = api_key
        self.base_url = f"{url.rstrip('/')}/rest/v1"
        self.timeout = timeout

    def _get_headers(self, prefer: str | None = None) -> dict:
        headers = {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        if prefer:
            headers["Prefer"] = prefer
        return headers

    def _request_with_retry(
        self,
        method: str,
        url: str,
        headers: dict,
        params: dict | None = None,
        json: Any = None,
        max_retries: int = 5,
    ) -> requests.Response:
        """Make request with exponential backoff on 429 errors."""
        response = None
        for attempt in range(max_retries):
            response = requests.request(
                method, url, params=params, json=json, headers=headers, timeout=self.timeout
            )

            if response.status_code == 429:
                wait_time = 2 ** attempt
                time.sleep(wait_time)
                continue

            return response

        return response

    def _send(
        self,
        method: str,
        table: str,
        params: dict | None = None,
        json: Any = None,
        prefer: str | None = None,
    ) -> list[dict]:
        url = f"{self.base_url}/{table}"
        response = self._request_with_retry(method, url, self._get_headers(prefer), params=params, json=json)

        if not response.ok:
            error_msg = f"Supabase error on {table}: {response.status_code}"
            try:
                error_data = response.json()
                if "message" in error_data:
                    error_msg = f"Supabase error on {table}: {error_data['message']}"
            except ValueError:
                pass
            raise SupabaseError(error_msg, status_code=response.status_code)

        if not response.content:
            return []
        return response.json()

    def select(
        self,
        table: str,
        filters: dict[str, Any] | None = None,
        order: list[tuple[str, bool]] | None = None,
        columns: str = "*",
        limit: int | None = None,
    ) -> list[dict]:
        """Select rows.

        Args:
            table: Table name.
            filters: Equality filters {column: value}.
            order: [(column, ascending), ...] applied in sequence.
            columns: PostgREST select expression (may embed related tables).
            limit: Maximum number of rows.

        Returns:
            List of row dicts.
        """
        params = {"select": columns, **_encode_filters(filters)}
        if order:
            params["order"] = ",".join(
                f"{column}.{'asc' if ascending else 'desc'}" for column, ascending in order
            )
        if limit is not None:
            params["limit"] = str(limit)
        return self._send("GET", table, params=params)

    def insert(self, table: str, rows: dict | list[dict], upsert_on: str | None = None) -> list[dict]:
        """Insert rows and return them. With upsert_on, conflicts on that column set are merged."""
        prefer = "return=representation"
        params = None
        if upsert_on:
            prefer += ",resolution=merge-duplicates"
            params = {"on_conflict": upsert_on}
        return self._send("POST", table, params=params, json=rows, prefer=prefer)

    def update(self, table: str, values: dict, filters: dict[str, Any]) -> list[dict]:
        """Update matching rows and return them."""
        return self._send(
            "PATCH", table, params=_encode_filters(filters), json=values, prefer="return=representation"
        )

    def delete(self, table: str, filters: dict[str, Any]) -> None:
        self._send("DELETE", table, params=_encode_filters(filters))


def _encode_filters(filters: dict[str, Any] | None) -> dict[str, str]:
    """{"id": 3, "is_active": True} -> {"id": "eq.3", "is_active": "eq.true"}"""
    if not filters:
        return {}
    encoded = {}
    for column, value in filters.items():
        if isinstance(value, bool):
            value = "true" if value else "false"
        encoded[column] = f"eq.{value}"
    return encoded
