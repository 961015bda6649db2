"""Tolerant date parsing for spreadsheet and API date strings.

Two explicit slash formats are recognised before falling back to pandas'
general parser. They disagree on field order:

* ``M/D/YYYY H:MM`` is read month-first (US export with a time part).
* ``D/M/YY`` is read day-first, with a two-digit year pivot at 50.

Resolution-day counts depend on which branch matches, so the order is kept
as-is and pinned down by tests rather than unified.
"""

from __future__ import annotations

import re
from typing import Any

import pandas as pd
import pytz

from .config import SENTINEL_VALUES, TIMEZONE

US_DATETIME_RE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})\s+(\d{1,2}):(\d{2})$")
DAY_FIRST_SHORT_RE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{2})$")
YEAR_PIVOT = 50


def expand_two_digit_year(year: int) -> int:
    return 1900 + year if year > YEAR_PIVOT else 2000 + year


def _calendar_date(year: int, month: int, day: int) -> pd.Timestamp | None:
    try:
        return pd.Timestamp(year=year, month=month, day=day)
    except ValueError:
        return None


def _general_parse(text: str) -> pd.Timestamp | None:
    try:
        ts = pd.to_datetime(text, errors="coerce")
    except (TypeError, ValueError, OverflowError):
        return None
    if ts is None or pd.isna(ts):
        return None
    # Offsets are folded into the dashboard timezone, then dropped so all
    # parsed values compare as naive local timestamps.
    if getattr(ts, "tzinfo", None) is not None:
        ts = ts.tz_convert(pytz.timezone(TIMEZONE)).tz_localize(None)
    return ts


def parse_date(value: Any) -> pd.Timestamp | None:
    """Parse ``value`` into a naive Timestamp, or None when unparseable.

    Examples
    --------
    >>> parse_date("3/5/2024 10:30")
    Timestamp('2024-03-05 00:00:00')
    >>> parse_date("5/3/24")
    Timestamp('2024-03-05 00:00:00')
    >>> parse_date("not a date") is None
    True
    """
    if value is None:
        return None
    text = str(value).strip()
    if text in SENTINEL_VALUES:
        return None

    match = US_DATETIME_RE.match(text)
    if match:
        month, day, year = (int(g) for g in match.groups()[:3])
        return _calendar_date(year, month, day)

    match = DAY_FIRST_SHORT_RE.match(text)
    if match:
        day, month, year = (int(g) for g in match.groups())
        return _calendar_date(expand_two_digit_year(year), month, day)

    return _general_parse(text)
