"""Exception taxonomy surfaced by data sources and loaders.

Data-shape problems (missing columns, unparseable dates) never raise; they
degrade to sentinel values instead.
"""

from __future__ import annotations


class DashboardError(RuntimeError):
    """Base class for errors shown to the dashboard user."""


class TransportError(DashboardError):
    """Remote service unreachable or returned a non-success response."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class FileParseError(DashboardError):
    """Uploaded file could not be decoded into records."""


class UnsupportedFileError(FileParseError):
    """Uploaded file has an extension other than csv/xlsx/xls."""


class IssueNotFoundError(DashboardError):
    """Lookup by issue id found no record."""

    def __init__(self, issue_id: str):
        super().__init__(f"No issue found with ID: {issue_id}")
        self.issue_id = issue_id
