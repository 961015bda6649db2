"""Domain data models for issue records, aggregation buckets, and selections."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

Record = Mapping[str, Any]


class CanonicalField(str, Enum):
    ID = "id"
    ISSUE_TRACKER_TYPE = "issueTrackerType"
    SUBJECT = "subject"
    DESCRIPTION = "description"
    STATE = "state"
    STATUS = "status"
    PRIORITY = "priority"
    ASSIGNED_TO_ID = "assignedToId"
    EMAIL = "email"
    DUE_DATE = "dueDate"
    CREATED_ON = "createdOn"
    CLOSED_ON = "closedOn"


class FilterKind(str, Enum):
    STATUS = "status"
    PRIORITY = "priority"
    TYPE = "type"
    STATE = "state"

    @property
    def field(self) -> CanonicalField:
        if self is FilterKind.TYPE:
            return CanonicalField.ISSUE_TRACKER_TYPE
        return CanonicalField(self.value)


@dataclass(frozen=True, slots=True)
class Bucket:
    name: str
    value: int

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Bucket:
        return cls(name=str(raw.get("name", "")), value=int(raw.get("value") or 0))


@dataclass(frozen=True, slots=True)
class SelectedFilter:
    kind: FilterKind
    value: str


@dataclass(slots=True)
class IssueStats:
    total: int = 0
    by_status: list[Bucket] = field(default_factory=list)
    by_priority: list[Bucket] = field(default_factory=list)
    by_type: list[Bucket] = field(default_factory=list)
    by_state: list[Bucket] = field(default_factory=list)
    avg_resolution_days: str = "0"

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> IssueStats:
        """Build stats from the remote ``/stats`` JSON shape."""

        def buckets(key: str) -> list[Bucket]:
            return [Bucket.from_dict(b) for b in payload.get(key) or [] if isinstance(b, Mapping)]

        return cls(
            total=int(payload.get("total") or 0),
            by_status=buckets("byStatus"),
            by_priority=buckets("byPriority"),
            by_type=buckets("byType"),
            by_state=buckets("byState"),
            avg_resolution_days=str(payload.get("avgResolutionDays") or "0"),
        )

    def buckets_for(self, kind: FilterKind) -> list[Bucket]:
        return {
            FilterKind.STATUS: self.by_status,
            FilterKind.PRIORITY: self.by_priority,
            FilterKind.TYPE: self.by_type,
            FilterKind.STATE: self.by_state,
        }[kind]


@dataclass(frozen=True, slots=True)
class KpiSummary:
    total: int
    open: int
    closed: int
    urgent: int
    avg_resolution_days: str
