"""Reading order, sectioning and next-article navigation for article collections.

Every list the site shows is derived here from the same rule: articles in a
collection are ordered by ``path_stem`` using plain string comparison. That
order drives the numbering on index pages, the section and group layout of
multi-section indexes, and the "Next" button on article pages. Nothing is
cached; each call re-sorts its input.

Example
-------
>>> from cookie_pages.content import ArticleRecord
>>> from cookie_pages.ordering import CollectionIndex, resolve_next_article
>>> records = [
...     ArticleRecord("python/02-vars", "Variables", "/python/02-vars/", "python"),
...     ArticleRecord("python/01-intro", "Intro", "/python/01-intro/", "python"),
... ]
>>> index = CollectionIndex(records)
>>> resolve_next_article(index, "python/01-intro", "python").title
'Variables'
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from cookie_pages.content import ArticleRecord, ContentError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from cookie_pages.config import SectionConfig

NO_GROUP_SEEN = -1


class UnknownCollectionError(KeyError):
    """Raised when a page asks for a collection that nothing declares."""

    def __init__(self, tag: str, known: cabc.Iterable[str]) -> None:
        self.tag = tag
        available = ", ".join(sorted(known)) or "none"
        super().__init__(f"Unknown collection '{tag}'. Known collections: {available}")

    def __str__(self) -> str:
        return str(self.args[0])


class CollectionIndex:
    """Map collection tags to the articles carrying them.

    Parameters
    ----------
    records : Iterable[ArticleRecord]
        Every article known to the build.
    known_tags : Iterable[str], optional
        Tags that are valid even without articles (configured categories).
        Looking one up yields an empty collection instead of an error.
    """

    def __init__(
        self,
        records: cabc.Iterable[ArticleRecord],
        *,
        known_tags: cabc.Iterable[str] = (),
    ) -> None:
        grouped: dict[str, list[ArticleRecord]] = {tag: [] for tag in known_tags}
        for record in records:
            grouped.setdefault(record.tags, []).append(record)
        self._collections = {tag: tuple(items) for tag, items in grouped.items()}

    def get(self, tag: str) -> tuple[ArticleRecord, ...]:
        """Return the articles tagged ``tag`` in arbitrary order.

        Raises
        ------
        UnknownCollectionError
            If ``tag`` has no articles and was not declared as known.
        """
        try:
            return self._collections[tag]
        except KeyError:
            raise UnknownCollectionError(tag, self._collections) from None

    @property
    def tags(self) -> list[str]:
        """Return every collection tag, sorted."""
        return sorted(self._collections)

    def all_records(self) -> list[ArticleRecord]:
        """Return every article across all collections, sorted by path stem."""
        records = [record for items in self._collections.values() for record in items]
        return sorted(records, key=_path_stem)

    def __contains__(self, tag: object) -> bool:
        return tag in self._collections


@dc.dataclass(frozen=True, slots=True)
class GroupLabelRow:
    """Heading row announcing a new group within a section list."""

    kind = "group"
    label: str


@dc.dataclass(frozen=True, slots=True)
class ArticleRow:
    """Numbered article entry in an index list."""

    kind = "article"
    number: int
    record: ArticleRecord


IndexRow = GroupLabelRow | ArticleRow


def _path_stem(record: ArticleRecord) -> str:
    return record.path_stem


def sorted_collection(collections: CollectionIndex, tag: str) -> list[ArticleRecord]:
    """Return the ``tag`` collection ordered ascending by ``path_stem``.

    Ordering is plain string comparison, so ``10-x`` sorts before ``2-x``;
    authors zero-pad their filenames. Python's sort is stable, so duplicate
    stems keep their input order.
    """
    return sorted(
        (record for record in collections.get(tag) if record.tags == tag),
        key=_path_stem,
    )


def section_partition(
    collections: CollectionIndex,
    tag: str,
    sections: cabc.Sequence[SectionConfig],
) -> list[tuple[SectionConfig, list[ArticleRecord]]]:
    """Split the ``tag`` collection into the declared sections.

    Sections come back in declaration order, each paired with its articles in
    reading order. Articles whose ``section_index`` matches no section are left
    out of every partition.
    """
    ordered = sorted_collection(collections, tag)
    return [
        (section, [record for record in ordered if record.section_index == index])
        for index, section in enumerate(sections)
    ]


def render_grouped_list(
    section_records: cabc.Sequence[ArticleRecord],
    sections: cabc.Sequence[SectionConfig],
) -> list[IndexRow]:
    """Lay out one section's articles as numbered rows with group headings.

    Parameters
    ----------
    section_records : Sequence[ArticleRecord]
        Articles of a single section, already in reading order.
    sections : Sequence[SectionConfig]
        The category's sections; group labels are looked up as
        ``sections[record.section_index].groups[record.group_index]``.

    Returns
    -------
    list[GroupLabelRow | ArticleRow]
        A label row before the first article of every run of equal
        ``group_index`` values, and one article row per record numbered
        continuously from 1. Articles without a ``group_index`` never get a
        label.

    Raises
    ------
    ContentError
        If a record names a section or group that is not declared.
    """
    rows: list[IndexRow] = []
    previous_group: int | None = NO_GROUP_SEEN
    for number, record in enumerate(section_records, start=1):
        if record.group_index is not None and record.group_index != previous_group:
            rows.append(GroupLabelRow(label=_group_label(record, sections)))
        previous_group = record.group_index
        rows.append(ArticleRow(number=number, record=record))
    return rows


def numbered_rows(records: cabc.Iterable[ArticleRecord]) -> list[ArticleRow]:
    """Number ``records`` from 1 in the order given, without group headings."""
    return [
        ArticleRow(number=number, record=record)
        for number, record in enumerate(records, start=1)
    ]


def resolve_next_article(
    collections: CollectionIndex, current_path_stem: str, tag: str
) -> ArticleRecord | None:
    """Return the article that follows ``current_path_stem`` in reading order.

    Unlisted articles are skipped. Returns ``None`` when nothing sorts after the
    current article, in which case no next link should be rendered.
    """
    for record in sorted_collection(collections, tag):
        if record.unlisted:
            continue
        if record.path_stem > current_path_stem:
            return record
    return None


def _group_label(record: ArticleRecord, sections: cabc.Sequence[SectionConfig]) -> str:
    section_index = record.section_index
    if section_index is None or not 0 <= section_index < len(sections):
        raise ContentError(
            record.source_path,
            f"group_index {record.group_index} needs a valid section_index, "
            f"got {section_index!r}",
        )
    groups = sections[section_index].groups
    try:
        return groups[typ.cast("int", record.group_index)]
    except KeyError:
        raise ContentError(
            record.source_path,
            f"group_index {record.group_index} is not declared in section "
            f"'{sections[section_index].title}'",
        ) from None


__all__ = [
    "NO_GROUP_SEEN",
    "ArticleRow",
    "CollectionIndex",
    "GroupLabelRow",
    "IndexRow",
    "UnknownCollectionError",
    "numbered_rows",
    "render_grouped_list",
    "resolve_next_article",
    "section_partition",
    "sorted_collection",
]
