"""Record types produced by the article loader."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path


class ContentError(ValueError):
    """Raised when an article's content or front matter is invalid.

    The message is prefixed with the offending file so build failures point the
    author at what to fix.
    """

    def __init__(self, path: Path | str | None, problem: str) -> None:
        self.path = Path(path) if path is not None else None
        self.problem = problem
        prefix = f"{self.path}: " if self.path is not None else ""
        super().__init__(f"{prefix}{problem}")


@dc.dataclass(frozen=True, slots=True)
class ArticleRecord:
    """One tutorial article parsed from a markdown file.

    Attributes
    ----------
    path_stem : str
        Content path relative to the content root without the ``.md`` suffix,
        using POSIX separators (``python/01-intro``). Unique and ordering key.
    title : str
        Display title.
    url : str
        Site-absolute output URL (``/python/01-intro/``).
    tags : str
        Name of the collection the article belongs to.
    section_index : int or None
        Section of the category index the article is listed under.
    group_index : int or None
        Group label key within that section.
    unlisted : bool
        When true the article is skipped by next-article navigation.
    video_id : str or None
        YouTube id for the deferred video embed.
    last_update : str or None
        Free-text label describing the last content update.
    source_path : Path or None
        Markdown file the record was read from.
    body : str
        Markdown body with the front matter removed.
    """

    path_stem: str
    title: str
    url: str
    tags: str
    section_index: int | None = None
    group_index: int | None = None
    unlisted: bool = False
    video_id: str | None = None
    last_update: str | None = None
    source_path: Path | None = None
    body: str = ""


def url_for_stem(path_stem: str) -> str:
    """Return the directory-style URL an article with ``path_stem`` is served at."""
    return f"/{path_stem.strip('/')}/"


__all__ = ["ArticleRecord", "ContentError", "url_for_stem"]
