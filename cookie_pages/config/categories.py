"""Category and section configuration builders."""

from __future__ import annotations

import typing as typ

from .helpers import (
    _as_bool,
    _normalize_path_segment,
    _optional_str,
    _require_mapping,
    _require_str,
)
from .models import CategoryConfig, SectionConfig, SiteConfigError


def _build_categories(payload: object) -> dict[str, CategoryConfig]:
    """Build category configs keyed by collection tag, keeping YAML order."""
    raw = _require_mapping(payload, where="Categories configuration")
    categories: dict[str, CategoryConfig] = {}
    for key, entry in raw.items():
        tag = str(key)
        categories[tag] = _build_category(tag, entry)
    return categories


def _build_category(tag: str, payload: object) -> CategoryConfig:
    """Build a single category config from its mapping."""
    where = f"Category '{tag}'"
    data = _require_mapping(payload, where=where)
    title = _require_str(data, "title", where=where)
    path = _normalize_path_segment(_optional_str(data.get("path")) or tag)
    if not path:
        msg = f"{where} resolves to an empty 'path'."
        raise SiteConfigError(msg)
    return CategoryConfig(
        tag=tag,
        title=title,
        path=path,
        intro=str(data.get("intro") or ""),
        hidden=_as_bool(data.get("hidden"), where=f"{where} 'hidden'"),
        sections=_build_sections(data.get("sections"), where=where),
    )


def _build_sections(payload: object, *, where: str) -> list[SectionConfig]:
    """Build the ordered section list declared on a category."""
    match payload:
        case None:
            return []
        case list():
            entries = payload
        case _:
            msg = f"{where} 'sections' must be a list."
            raise SiteConfigError(msg)

    sections: list[SectionConfig] = []
    for index, entry in enumerate(entries):
        section_where = f"{where} section {index}"
        data = _require_mapping(entry, where=section_where)
        sections.append(
            SectionConfig(
                title=_require_str(data, "title", where=section_where),
                groups=_build_groups(data.get("groups"), where=section_where),
            )
        )
    return sections


def _build_groups(payload: object, *, where: str) -> dict[int, str]:
    """Return group labels keyed by integer group index."""
    raw: typ.Mapping[object, typ.Any]
    match payload:
        case None:
            return {}
        case dict():
            raw = payload
        case list():
            # A plain list labels groups 0..n-1.
            raw = dict(enumerate(payload))
        case _:
            msg = f"{where} 'groups' must be a mapping or a list."
            raise SiteConfigError(msg)

    groups: dict[int, str] = {}
    for key, label in raw.items():
        if isinstance(key, bool) or not isinstance(key, int):
            msg = f"{where} group keys must be integers, got {key!r}."
            raise SiteConfigError(msg)
        text = _optional_str(label)
        if not text:
            msg = f"{where} group {key} has an empty label."
            raise SiteConfigError(msg)
        groups[key] = text
    return groups


__all__ = ["_build_categories"]
