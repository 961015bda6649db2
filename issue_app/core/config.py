"""Central configuration, constants, column aliases, and display settings."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

# =============================================================================
# Remote Data Service Settings
# =============================================================================
DEFAULT_API_BASE = "http://localhost:8000/api"
API_BASE_ENV_VAR = "ISSUE_API_BASE"
REQUEST_TIMEOUT_SECONDS: float = 30.0
TIMEZONE = "UTC"

# =============================================================================
# Sentinel Values
# =============================================================================
# Unresolved column value (kept visible in chart buckets)
UNKNOWN = "Unknown"
# Rendered placeholder for unresolved detail fields and missing durations
PLACEHOLDER = "-"
SENTINEL_VALUES: frozenset[str] = frozenset({"", UNKNOWN, PLACEHOLDER})

# =============================================================================
# Column Aliases
# Ordered: the first alias present with a non-empty value wins.
# =============================================================================
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "id": ("id", "ID", "Id", "id "),
    "issueTrackerType": (
        "Issue tracker",
        "Issue tracker ",
        "Issue Tracker",
        "Issue Tracker ",
        "issue tracker",
        "Tracker",
        "Type",
        "type",
    ),
    "subject": ("subject", "Subject", "subject ", "Subject "),
    "description": ("description", "Description", "description "),
    "state": ("State", "state", "State ", "States", "states"),
    "status": ("Status", "status", "Status "),
    "priority": ("Priority", "priority", "Priority "),
    "assignedToId": ("assigned_to_id", "Assigned To", "assigned_to_id "),
    "email": ("email(assigned id)", "Email", "email(assigned id) "),
    "dueDate": ("due_date", "Due Date", "due_date "),
    "createdOn": ("created_on", "Created", "created_on ", "Created On"),
    "closedOn": ("closed_on", "Closed On", "closed_on ", "Closed_On", "closedOn"),
}

# Fields charted as dimensions keep "Unknown" instead of the "-" placeholder
DIMENSION_FIELDS: frozenset[str] = frozenset({"status", "priority", "issueTrackerType", "state"})

# =============================================================================
# Aggregation
# =============================================================================
STATE_TOP_N: int = 10
MS_PER_DAY: int = 86_400_000

# Names looked up in bucket lists for KPI cards
OPEN_STATUS = "Open"
CLOSED_STATUS = "Closed"
URGENT_PRIORITY_NAMES: Sequence[str] = ("Urgent", "Urgent ")

# =============================================================================
# Local File Upload
# =============================================================================
CSV_EXTENSIONS: frozenset[str] = frozenset({"csv"})
EXCEL_EXTENSIONS: frozenset[str] = frozenset({"xlsx", "xls"})
UNSUPPORTED_FILE_MESSAGE = "Please upload a CSV or Excel file (.csv, .xlsx, .xls)"

# =============================================================================
# Display
# =============================================================================
# Upper bounds (inclusive) for resolution badge bands
RESOLUTION_BANDS: Sequence[tuple[int, str]] = (
    (1, "fast"),
    (7, "normal"),
    (30, "slow"),
)
RESOLUTION_BAND_OVERFLOW = "overdue"

RESOLUTION_BAND_COLORS: dict[str, str] = {
    "fast": "#dcfce7",
    "normal": "#dbeafe",
    "slow": "#fef3c7",
    "overdue": "#fee2e2",
}

STATUS_COLORS: dict[str, str] = {
    "Open": "#93c5fd",
    "Closed": "#86efac",
    "Rejected": "#fca5a5",
    "In Progress": "#fcd34d",
    "Resolved": "#6ee7b7",
    "Pending": "#c4b5fd",
}

PRIORITY_COLORS: dict[str, str] = {
    "Urgent": "#fca5a5",
    "Urgent ": "#fca5a5",
    "High": "#fdba74",
    "Normal": "#93c5fd",
    "Low": "#d1d5db",
}

TYPE_COLORS: dict[str, str] = {
    "Bug": "#fca5a5",
    "Support": "#93c5fd",
    "Feature": "#86efac",
}

DEFAULT_COLORS: Sequence[str] = (
    "#93c5fd",
    "#86efac",
    "#fcd34d",
    "#fca5a5",
    "#c4b5fd",
    "#67e8f9",
    "#f9a8d4",
    "#5eead4",
)

DISPLAY_ORDER_TICKET_LIST: Sequence[str] = (
    "id",
    "issueTrackerType",
    "subject",
    "state",
    "status",
    "priority",
    "assignedToId",
    "createdOn",
    "closedOn",
    "resolution_days",
)

# Filter results omit the assignee column
DISPLAY_ORDER_FILTERED: Sequence[str] = (
    "id",
    "issueTrackerType",
    "subject",
    "state",
    "status",
    "priority",
    "createdOn",
    "closedOn",
    "resolution_days",
)

DISPLAY_ORDER_DETAIL: Sequence[str] = (
    "id",
    "issueTrackerType",
    "subject",
    "state",
    "status",
    "priority",
    "assignedToId",
    "email",
    "dueDate",
    "createdOn",
    "closedOn",
    "resolution_days",
    "description",
)


@dataclass(slots=True)
class AppSettings:
    max_table_rows: int = 100
    request_timeout: float = REQUEST_TIMEOUT_SECONDS


SETTINGS = AppSettings()
