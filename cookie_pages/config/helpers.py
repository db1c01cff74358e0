"""Utility helpers shared by the Code Cookies configuration loader."""

from __future__ import annotations

import datetime as dt
import typing as typ

from .models import SiteConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _require_str(payload: typ.Mapping[str, typ.Any], key: str, *, where: str) -> str:
    """Return ``payload[key]`` as a non-empty string or raise SiteConfigError."""
    value = _optional_str(payload.get(key))
    if not value:
        msg = f"{where} requires a '{key}'."
        raise SiteConfigError(msg)
    return value


def _require_mapping(value: object, *, where: str) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` when it is a mapping; treat ``None`` as empty."""
    match value:
        case None:
            return {}
        case dict():
            return value
        case _:
            msg = f"{where} must be a mapping."
            raise SiteConfigError(msg)


def _as_bool(value: object, *, where: str) -> bool:
    """Coerce YAML booleans, rejecting anything else."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    msg = f"{where} must be true or false, got {value!r}."
    raise SiteConfigError(msg)


def _normalize_path_segment(value: str) -> str:
    """Strip surrounding slashes so a URL path can be joined safely."""
    return value.strip().strip("/")


def _parse_timestamp(value: dt.datetime | dt.date | str | None) -> dt.datetime | None:
    """Return a timezone-aware UTC datetime parsed from ``value``, or None."""
    match value:
        case dt.datetime():
            parsed = value
        case dt.date():
            parsed = dt.datetime(value.year, value.month, value.day)
        case str() as text:
            sanitized = text.strip()
            if not sanitized:
                return None
            if sanitized.endswith("Z"):
                sanitized = sanitized[:-1] + "+00:00"
            try:
                parsed = dt.datetime.fromisoformat(sanitized)
            except ValueError:
                return None
        case _:
            return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=dt.UTC)
    return parsed.astimezone(dt.UTC)


__all__ = [
    "_as_bool",
    "_normalize_path_segment",
    "_optional_str",
    "_parse_timestamp",
    "_require_mapping",
    "_require_str",
]
