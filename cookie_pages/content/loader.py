"""Discover markdown articles and turn them into :class:`ArticleRecord` values.

Articles live under the configured content directory. Each ``*.md`` file is an
article; its path relative to the content root (minus the suffix) becomes the
record's ``path_stem`` and therefore its reading order. A ``_defaults.yaml``
file supplies front-matter defaults to every article in its directory and the
directories below it, so a category folder can declare ``tags`` once.

Example
-------
>>> from pathlib import Path
>>> from cookie_pages.content import load_articles
>>> records = load_articles(Path("content"))  # doctest: +SKIP
>>> records[0].path_stem  # doctest: +SKIP
'development-basics/01-what-is-code'
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

from cookie_pages._constants import DEFAULTS_FILENAME

from .front_matter import FrontMatterError, parse_yaml_mapping, split_front_matter
from .models import ArticleRecord, ContentError, url_for_stem

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from cookie_pages.config import CategoryConfig


def load_articles(content_dir: Path) -> list[ArticleRecord]:
    """Load every article under ``content_dir``.

    Parameters
    ----------
    content_dir : Path
        Root directory containing markdown articles.

    Returns
    -------
    list[ArticleRecord]
        One record per markdown file, in path order.

    Raises
    ------
    FileNotFoundError
        If ``content_dir`` does not exist.
    ContentError
        If any article or defaults file is malformed.
    """
    if not content_dir.is_dir():
        msg = f"Content directory '{content_dir}' not found."
        raise FileNotFoundError(msg)

    defaults_cache: dict[Path, dict[str, typ.Any]] = {}
    records: list[ArticleRecord] = []
    for path in sorted(content_dir.rglob("*.md")):
        relative = path.relative_to(content_dir)
        if any(part.startswith(("_", ".")) for part in relative.parts):
            continue
        defaults = _directory_defaults(content_dir, relative.parent, defaults_cache)
        records.append(load_article(path, content_dir=content_dir, defaults=defaults))
    return records


def load_article(
    path: Path,
    *,
    content_dir: Path,
    defaults: typ.Mapping[str, typ.Any] | None = None,
) -> ArticleRecord:
    """Parse one markdown file into an :class:`ArticleRecord`."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ContentError(path, "file is not valid UTF-8") from exc
    try:
        front_matter, body = split_front_matter(text)
    except FrontMatterError as exc:
        raise ContentError(path, str(exc)) from exc

    data: dict[str, typ.Any] = dict(defaults or {})
    data.update(front_matter)
    path_stem = path.relative_to(content_dir).with_suffix("").as_posix()

    return ArticleRecord(
        path_stem=path_stem,
        title=_required_text(data, "title", path),
        url=url_for_stem(path_stem),
        tags=_required_text(data, "tags", path),
        section_index=_optional_index(data, "section_index", path),
        group_index=_optional_index(data, "group_index", path),
        unlisted=_optional_flag(data, "unlisted", path),
        video_id=_optional_text(data, "video_id", path),
        last_update=_optional_text(data, "last_update", path),
        source_path=path,
        body=body,
    )


def validate_against_categories(
    records: cabc.Iterable[ArticleRecord],
    categories: typ.Mapping[str, CategoryConfig],
) -> None:
    """Check section and group indices against the declared category sections.

    Records whose tag has no configured category are left alone; they still get
    article pages but appear on no index.

    Raises
    ------
    ContentError
        For the first record whose ``section_index`` or ``group_index`` does not
        resolve against its category.
    """
    for record in records:
        category = categories.get(record.tags)
        if category is None:
            continue
        if record.section_index is None:
            if record.group_index is not None:
                raise ContentError(
                    record.source_path,
                    "'group_index' requires a 'section_index'",
                )
            continue
        if not 0 <= record.section_index < len(category.sections):
            raise ContentError(
                record.source_path,
                f"section_index {record.section_index} is out of range for "
                f"category '{category.tag}' ({len(category.sections)} sections)",
            )
        section = category.sections[record.section_index]
        if record.group_index is not None and record.group_index not in section.groups:
            known = ", ".join(str(key) for key in sorted(section.groups)) or "none"
            raise ContentError(
                record.source_path,
                f"group_index {record.group_index} is not declared in section "
                f"'{section.title}' (known groups: {known})",
            )


def _directory_defaults(
    content_dir: Path,
    relative_dir: Path,
    cache: dict[Path, dict[str, typ.Any]],
) -> dict[str, typ.Any]:
    """Merge ``_defaults.yaml`` files from the content root down to ``relative_dir``."""
    if relative_dir in cache:
        return cache[relative_dir]
    if relative_dir == Path("."):
        inherited: dict[str, typ.Any] = {}
    else:
        inherited = _directory_defaults(content_dir, relative_dir.parent, cache)
    merged = dict(inherited)
    defaults_path = content_dir / relative_dir / DEFAULTS_FILENAME
    if defaults_path.is_file():
        try:
            merged.update(parse_yaml_mapping(defaults_path.read_text(encoding="utf-8")))
        except FrontMatterError as exc:
            raise ContentError(defaults_path, str(exc)) from exc
    cache[relative_dir] = merged
    return merged


def _required_text(data: typ.Mapping[str, typ.Any], key: str, path: Path) -> str:
    value = _optional_text(data, key, path)
    if not value:
        raise ContentError(path, f"missing required '{key}'")
    return value


def _optional_text(data: typ.Mapping[str, typ.Any], key: str, path: Path) -> str | None:
    """Return a stripped string value, formatting YAML dates as ISO strings."""
    value = data.get(key)
    match value:
        case None:
            return None
        case str():
            return value.strip() or None
        case dt.date():
            return value.isoformat()
        case bool() | list() | dict():
            raise ContentError(path, f"'{key}' must be a string, got {value!r}")
        case _:
            return str(value)


def _optional_index(
    data: typ.Mapping[str, typ.Any], key: str, path: Path
) -> int | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ContentError(path, f"'{key}' must be an integer, got {value!r}")
    return value


def _optional_flag(data: typ.Mapping[str, typ.Any], key: str, path: Path) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ContentError(path, f"'{key}' must be true or false, got {value!r}")
    return value


__all__ = [
    "DEFAULTS_FILENAME",
    "load_article",
    "load_articles",
    "validate_against_categories",
]
