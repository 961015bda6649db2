"""Dashboard view state: one small state machine per interaction flow.

* Load flow: ``idle -> loading -> loaded | failed``. Each load takes a
  generation token; a result delivered with an outdated token is dropped, so
  a slow load can never overwrite a newer one.
* Selection flows (chart filter, id search): ``idle -> selected ->
  detail_shown -> idle``. A new selection replaces the current one.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .errors import DashboardError, IssueNotFoundError, TransportError
from .models import FilterKind, SelectedFilter
from .service import IssueDataSource

logger = logging.getLogger(__name__)


class LoadPhase(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class SelectionPhase(str, Enum):
    IDLE = "idle"
    SELECTED = "selected"
    DETAIL_SHOWN = "detail_shown"


@dataclass
class LoadFlow:
    phase: LoadPhase = LoadPhase.IDLE
    generation: int = 0
    source: IssueDataSource | None = None
    error: TransportError | None = None
    alert: str | None = None

    def begin(self) -> int:
        self.generation += 1
        self.phase = LoadPhase.LOADING
        self.error = None
        self.alert = None
        return self.generation

    def _is_current(self, token: int) -> bool:
        if token != self.generation:
            logger.debug("Discarding superseded load %s (current %s)", token, self.generation)
            return False
        return True

    def complete(self, token: int, source: IssueDataSource) -> bool:
        if not self._is_current(token):
            return False
        self.source = source
        self.phase = LoadPhase.LOADED
        return True

    def fail(self, token: int, error: DashboardError) -> bool:
        """Transport errors block the view; anything else is a one-off alert.

        The previously loaded source is kept in both cases.
        """
        if not self._is_current(token):
            return False
        if isinstance(error, TransportError):
            self.phase = LoadPhase.FAILED
            self.error = error
        else:
            self.phase = LoadPhase.LOADED if self.source is not None else LoadPhase.IDLE
            self.alert = str(error)
        return True

    def pop_alert(self) -> str | None:
        alert, self.alert = self.alert, None
        return alert


@dataclass
class SelectionFlow:
    phase: SelectionPhase = SelectionPhase.IDLE
    current: Any = None
    detail: Any = None

    def select(self, value: Any, detail: Any = None) -> None:
        self.current = value
        self.detail = detail
        self.phase = SelectionPhase.SELECTED

    def show(self) -> bool:
        if self.phase is SelectionPhase.IDLE:
            return False
        self.phase = SelectionPhase.DETAIL_SHOWN
        return True

    def dismiss(self) -> None:
        self.current = None
        self.detail = None
        self.phase = SelectionPhase.IDLE

    @property
    def active(self) -> bool:
        return self.phase is not SelectionPhase.IDLE


@dataclass
class DashboardState:
    load: LoadFlow = field(default_factory=LoadFlow)
    filter: SelectionFlow = field(default_factory=SelectionFlow)
    search: SelectionFlow = field(default_factory=SelectionFlow)
    alert: str | None = None
    last_loader: Callable[[], IssueDataSource] | None = None

    @property
    def source(self) -> IssueDataSource | None:
        return self.load.source

    def run_load(self, loader: Callable[[], IssueDataSource]) -> bool:
        """Run ``loader`` under a fresh generation token and install its result."""
        self.last_loader = loader
        token = self.load.begin()
        try:
            source = loader()
        except DashboardError as exc:
            logger.warning("Load %s failed: %s", token, exc)
            self.load.fail(token, exc)
            return False
        if not self.load.complete(token, source):
            return False
        self.filter.dismiss()
        self.search.dismiss()
        return True

    def retry(self) -> bool:
        """Re-run the most recent load; all retries are user-initiated."""
        if self.last_loader is None:
            return False
        return self.run_load(self.last_loader)

    def select_bucket(self, kind: FilterKind | str, value: str) -> SelectedFilter | None:
        """Select a chart bucket and fetch its matching issues once.

        The filtered frame is kept on the selection so reruns while the dialog
        is open do not query the source again.
        """
        selected = SelectedFilter(FilterKind(kind), str(value))
        rows = None
        if self.source is not None:
            try:
                rows = self.source.filter(selected)
            except TransportError as exc:
                logger.error("Filter request for %s failed: %s", selected, exc)
                self.alert = f"Failed to filter issues: {exc}"
                return None
        self.filter.select(selected, rows)
        return selected

    def search_issue(self, issue_id: str) -> bool:
        """Look up ``issue_id``; a miss leaves the current search untouched."""
        query = str(issue_id or "").strip()
        if not query or self.source is None:
            return False
        try:
            record = self.source.find(query)
        except IssueNotFoundError as exc:
            self.alert = str(exc)
            return False
        except TransportError as exc:
            logger.warning("Issue lookup for %s failed: %s", query, exc)
            self.alert = str(exc)
            return False
        self.search.select(record)
        return True

    def pop_alert(self) -> str | None:
        alert = self.alert or self.load.pop_alert()
        self.alert = None
        return alert
