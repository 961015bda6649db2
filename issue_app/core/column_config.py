"""Load column sets and extra header aliases from YAML (with fallbacks).

``columns.yaml`` at the repository root may contain::

    sets:
      ticket_list: [id, subject, status, ...]
    aliases:
      status: ["Ticket Status"]

Extra aliases are appended after the built-in ones, so built-in precedence
is preserved.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from .config import (
    DISPLAY_ORDER_DETAIL,
    DISPLAY_ORDER_FILTERED,
    DISPLAY_ORDER_TICKET_LIST,
    FIELD_ALIASES,
)

logger = logging.getLogger(__name__)

_CACHE: dict[str, dict] | None = None


def _with_canonical(name: str, aliases) -> list[str]:
    # Remote payloads already use canonical keys (e.g. "createdOn")
    out = list(aliases)
    if name.lower() not in {a.strip().lower() for a in out}:
        out.append(name)
    return out


def _defaults() -> dict[str, dict]:
    return {
        "sets": {
            "detail": list(DISPLAY_ORDER_DETAIL),
            "ticket_list": list(DISPLAY_ORDER_TICKET_LIST),
            "filtered": list(DISPLAY_ORDER_FILTERED),
        },
        "aliases": {name: _with_canonical(name, aliases) for name, aliases in FIELD_ALIASES.items()},
    }


def load_column_config(base_path: str | Path | None = None, *, refresh: bool = False) -> dict[str, dict]:
    global _CACHE
    if _CACHE is not None and not refresh:
        return _CACHE
    config = _defaults()
    base = Path(base_path or Path(__file__).resolve().parent.parent.parent)
    yaml_path = base / "columns.yaml"
    if not yaml_path.exists():
        _CACHE = config
        return _CACHE
    try:
        data = yaml.safe_load(yaml_path.read_text()) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Ignoring unreadable %s: %s", yaml_path, exc)
        _CACHE = config
        return _CACHE

    for name, columns in (data.get("sets") or {}).items():
        if columns:
            config["sets"][name] = [str(c) for c in columns]
    for field_name, extra in (data.get("aliases") or {}).items():
        if field_name not in config["aliases"] or not extra:
            continue
        known = config["aliases"][field_name]
        known.extend(str(a) for a in extra if str(a) not in known)
    _CACHE = config
    return _CACHE


def get_columns(set_name: str) -> list[str]:
    return load_column_config()["sets"].get(set_name, [])


def get_aliases(field_name: str) -> tuple[str, ...]:
    return tuple(load_column_config()["aliases"].get(field_name, ()))
