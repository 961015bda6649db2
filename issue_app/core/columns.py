"""Column resolution: map inconsistent source headers onto canonical fields."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Any

from .column_config import get_aliases
from .config import DIMENSION_FIELDS, PLACEHOLDER, UNKNOWN
from .models import CanonicalField, Record


def _as_text(value: Any) -> str | None:
    """Render a cell as trimmed text, or None when it counts as absent."""
    if value is None:
        return None
    if isinstance(value, float):
        if math.isnan(value):
            return None
        if value.is_integer():
            value = int(value)
    text = str(value).strip()
    return text or None


def resolve_column(record: Record, aliases: Sequence[str]) -> str:
    """Return the first non-empty value found under any of ``aliases``.

    Exact keys are tried first, in alias order. Only when none matches are the
    record's own keys compared trimmed and case-insensitively. Unmatched
    fields resolve to ``"Unknown"``.

    Examples
    --------
    >>> resolve_column({"Status": "Open", "status": "Closed"}, ["Status", "status"])
    'Open'
    >>> resolve_column({" STATUS ": " Open "}, ["Status"])
    'Open'
    >>> resolve_column({"Status": ""}, ["Status"])
    'Unknown'
    """
    for name in aliases:
        if name in record:
            text = _as_text(record[name])
            if text is not None:
                return text

    lowered = [name.lower() for name in aliases]
    for key in record.keys():
        folded = str(key).strip().lower()
        if folded not in lowered:
            continue
        text = _as_text(record[key])
        if text is not None:
            return text
    return UNKNOWN


def resolve_field(record: Record, field: CanonicalField | str) -> str:
    name = CanonicalField(field).value
    return resolve_column(record, get_aliases(name))


def display_value(record: Record, field: CanonicalField | str) -> str:
    """Resolved value for rendering: unresolved non-dimension fields show ``-``."""
    name = CanonicalField(field).value
    value = resolve_field(record, name)
    if value == UNKNOWN and name not in DIMENSION_FIELDS:
        return PLACEHOLDER
    return value


def normalize_record(record: Record) -> dict[str, str]:
    return {f.value: display_value(record, f) for f in CanonicalField}


def normalize_records(records: Iterable[Record]) -> list[dict[str, str]]:
    return [normalize_record(r) for r in records]
