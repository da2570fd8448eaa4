"""Hosted-backend report source over the PostgREST HTTP API.

The ``httpx.Client`` is built once by the application (see
``build_backend_client``) and injected; this module never creates a client
on its own.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from inspection_reports.core.config import BackendConfig
from inspection_reports.exceptions import DataSourceError
from inspection_reports.models import Premise
from inspection_reports.reporting.normalizer import coerce_premise

log = logging.getLogger(__name__)

_RESERVED_FILTER_CHARS = frozenset(",()\"*")


def _search_term(search: Optional[str]) -> str:
    # Characters reserved by the PostgREST or=() grammar are dropped.
    return "".join(ch for ch in (search or "") if ch not in _RESERVED_FILTER_CHARS).strip()


def build_backend_client(config: BackendConfig) -> httpx.Client:
    """Create the authenticated HTTP client for the hosted backend."""
    headers = {"Accept": "application/json"}
    if config.api_key:
        headers["apikey"] = config.api_key
        headers["Authorization"] = f"Bearer {config.api_key}"
    return httpx.Client(base_url=config.url, headers=headers, timeout=config.timeout)


class RestReportSource:
    """Reads premises and joined report rows from PostgREST tables."""

    def __init__(self, client: httpx.Client, config: BackendConfig | None = None) -> None:
        self._client = client
        self._config = config or BackendConfig()

    def _get(self, table: str, params: dict[str, str]) -> list[dict[str, Any]]:
        path = f"{self._config.rest_path.rstrip('/')}/{table}"
        try:
            response = self._client.get(path, params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as exc:
            raise DataSourceError(
                f"GET {path} failed with HTTP {exc.response.status_code}: {exc.response.text[:200]}"
            ) from exc
        except (httpx.HTTPError, ValueError) as exc:
            raise DataSourceError(f"GET {path} failed: {exc}") from exc

        if not isinstance(data, list):
            raise DataSourceError(f"GET {path} returned {type(data).__name__}, expected a list of rows")
        log.debug("Fetched %d rows from %s", len(data), table)
        return data

    def _report_params(self) -> dict[str, str]:
        return {
            "select": f"*,{self._config.areas_table}(*)",
            "order": "created_at.desc",
        }

    def _with_areas_key(self, rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
        areas_key = self._config.areas_table
        if areas_key != "report_areas":
            for row in rows:
                row["report_areas"] = row.pop(areas_key, None) or []
        return rows

    def list_premises(self, search: Optional[str] = None) -> list[Premise]:
        params = {"select": "id,name,address", "order": "name.asc"}
        term = _search_term(search)
        if term:
            params["or"] = f"(name.ilike.*{term}*,address.ilike.*{term}*)"
        rows = self._get(self._config.premises_table, params)
        return [coerce_premise(row) for row in rows]

    def fetch_premise(self, premise_id: int) -> Optional[Premise]:
        rows = self._get(
            self._config.premises_table,
            {"select": "id,name,address", "id": f"eq.{premise_id}", "limit": "1"},
        )
        return coerce_premise(rows[0]) if rows else None

    def fetch_reports(self, premise_id: int) -> list[dict[str, Any]]:
        params = self._report_params()
        params["premise_id"] = f"eq.{premise_id}"
        return self._with_areas_key(self._get(self._config.reports_table, params))

    def list_reports(self) -> list[dict[str, Any]]:
        return self._with_areas_key(self._get(self._config.reports_table, self._report_params()))
