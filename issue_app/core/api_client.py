"""HTTP client for the remote issue service (pre-aggregated stats + filters)."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import requests

from .config import REQUEST_TIMEOUT_SECONDS
from .errors import TransportError
from .models import FilterKind

logger = logging.getLogger(__name__)


class IssueAPI:
    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def _get(self, path: str, params: dict[str, str] | None = None, *, allow_missing: bool = False):
        url = f"{self.base_url}{path}"
        logger.debug("GET %s params=%s", url, params)
        try:
            resp = self.session.get(url, params=params or {}, timeout=self.timeout)
        except requests.RequestException as exc:
            raise TransportError(f"GET {url} failed: {exc}") from exc
        if allow_missing and resp.status_code == 404:
            return None
        if resp.status_code >= 400:
            raise TransportError(
                f"GET {url} failed {resp.status_code}: {resp.text[:200]}",
                status_code=resp.status_code,
            )
        try:
            return resp.json()
        except ValueError as exc:
            raise TransportError(f"GET {url} returned invalid JSON") from exc

    def _get_list(self, path: str, params: dict[str, str] | None = None) -> list[dict[str, Any]]:
        data = self._get(path, params)
        if not isinstance(data, list):
            raise TransportError(f"GET {self.base_url}{path} returned {type(data).__name__}, expected a list")
        return [row for row in data if isinstance(row, dict)]

    def fetch_issues(self) -> list[dict[str, Any]]:
        return self._get_list("/issues")

    def fetch_stats(self) -> dict[str, Any]:
        data = self._get("/stats")
        if not isinstance(data, dict):
            raise TransportError(f"GET {self.base_url}/stats returned {type(data).__name__}, expected an object")
        return data

    def fetch_issue(self, issue_id: str) -> dict[str, Any] | None:
        data = self._get(f"/issues/{quote(str(issue_id), safe='')}", allow_missing=True)
        return data if isinstance(data, dict) else None

    def fetch_filtered(self, kind: FilterKind, value: str) -> list[dict[str, Any]]:
        return self._get_list("/filter", {FilterKind(kind).value: value})
