"""Rewrite relative links between markdown articles to their published URLs."""

from __future__ import annotations

import posixpath
import typing as typ
from urllib.parse import urlsplit

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from cookie_pages.content.models import url_for_stem

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any


class ArticleLinkExtension(Extension):
    """Point links like ``./02-vars.md#loops`` at the generated article page.

    Authors link articles to each other by filename so the links also work
    when browsing the content folder on GitHub. Insert this extension into a
    ``markdown.Markdown`` instance to turn those links into the directory-style
    URLs the site publishes (``/python/02-vars/#loops``).
    """

    def __init__(self, base_dir: str) -> None:
        super().__init__()
        self.base_dir = base_dir

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the article-link treeprocessor on the Markdown instance."""
        processor = ArticleLinkTreeprocessor(md, self.base_dir)
        md.treeprocessors.register(processor, "cookie_article_links", 15)


class ArticleLinkTreeprocessor(Treeprocessor):
    """Rewrite relative ``.md`` anchors in the parsed markdown tree."""

    def __init__(self, md: Markdown, base_dir: str) -> None:
        super().__init__(md)
        self.base_dir = base_dir

    def run(self, root: Element) -> Element:
        """Rewrite relative article anchors in ``root`` to site URLs."""
        for element in root.iter():
            if element.tag == "a":
                rewritten = self._rewrite(element.get("href"))
                if rewritten:
                    element.set("href", rewritten)
        return root

    def _rewrite(self, target: str | None) -> str | None:
        """Return the site URL for a relative ``.md`` link, or None to keep it."""
        if not target or target.startswith(("#", "/")) or "://" in target:
            return None
        parsed = urlsplit(target)
        if parsed.scheme or parsed.netloc or not parsed.path.endswith(".md"):
            return None

        joined = posixpath.normpath(posixpath.join(self.base_dir, parsed.path))
        while joined.startswith("../"):
            joined = joined[3:]
        if joined in (".", "..", ""):
            return None

        url = url_for_stem(joined[: -len(".md")])
        if parsed.query:
            url = f"{url}?{parsed.query}"
        if parsed.fragment:
            url = f"{url}#{parsed.fragment}"
        return url


__all__ = ["ArticleLinkExtension", "ArticleLinkTreeprocessor"]
