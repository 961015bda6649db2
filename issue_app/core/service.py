"""Issue data sources: local (uploaded file) and remote (HTTP service).

Both adapters expose the same surface so pages never care where records,
statistics, filters, or id lookups are computed.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

import pandas as pd

from issue_app.analytics.aggregations.buckets import summarize
from issue_app.analytics.segments.filters import filter_issues, find_issue

from .api_client import IssueAPI
from .errors import IssueNotFoundError, TransportError
from .loaders import load_upload
from .mappers import records_to_dataframe
from .models import IssueStats, Record, SelectedFilter

logger = logging.getLogger(__name__)


class IssueDataSource(Protocol):
    label: str

    def issues(self) -> pd.DataFrame: ...

    def stats(self) -> IssueStats: ...

    def filter(self, selected: SelectedFilter) -> pd.DataFrame: ...

    def find(self, issue_id: str) -> dict[str, str]: ...


class LocalIssueSource:
    """Normalizes and aggregates an in-memory record set once, on construction."""

    def __init__(self, records: Sequence[Record], label: str = ""):
        self.label = label
        self._df = records_to_dataframe(records)
        self._stats = summarize(self._df)

    @classmethod
    def from_upload(cls, file_name: str, data: bytes) -> LocalIssueSource:
        return cls(load_upload(file_name, data), label=file_name)

    def issues(self) -> pd.DataFrame:
        return self._df

    def stats(self) -> IssueStats:
        return self._stats

    def filter(self, selected: SelectedFilter) -> pd.DataFrame:
        return filter_issues(self._df, selected)

    def find(self, issue_id: str) -> dict[str, str]:
        found = find_issue(self._df, issue_id)
        if found is None:
            raise IssueNotFoundError(str(issue_id).strip())
        return found


class RemoteIssueSource:
    """Fetches issues and pre-aggregated stats; filters and lookups hit the service."""

    def __init__(self, api: IssueAPI):
        self.api = api
        self.label = api.base_url
        self._df = pd.DataFrame()
        self._stats = IssueStats()

    def refresh(self) -> RemoteIssueSource:
        raw = self.api.fetch_issues()
        payload = self.api.fetch_stats()
        try:
            stats = IssueStats.from_payload(payload)
        except (TypeError, ValueError, AttributeError) as exc:
            raise TransportError(f"Malformed stats response from {self.label}") from exc
        self._df = records_to_dataframe(raw)
        self._stats = stats
        logger.info("Fetched %s issue(s) from %s", len(self._df), self.label)
        return self

    def issues(self) -> pd.DataFrame:
        return self._df

    def stats(self) -> IssueStats:
        return self._stats

    def filter(self, selected: SelectedFilter) -> pd.DataFrame:
        return records_to_dataframe(self.api.fetch_filtered(selected.kind, selected.value))

    def find(self, issue_id: str) -> dict[str, str]:
        query = str(issue_id).strip()
        raw = self.api.fetch_issue(query)
        if raw is None:
            raise IssueNotFoundError(query)
        return records_to_dataframe([raw]).iloc[0].to_dict()
