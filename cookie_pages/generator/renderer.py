"""Render article markdown with highlighted code and heading permalinks."""

from __future__ import annotations

import re
import typing as typ
from html import escape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

from .link_rewriter import ArticleLinkExtension

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

CODE_BLOCK_PATTERN = re.compile(r"```([A-Za-z0-9_+#.-]+)?[^\n]*\n(.*?)```", re.DOTALL)
FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
FENCE_LABEL_PATTERN = re.compile(
    r"^([`~]{3,})([A-Za-z0-9_+#.-]+)?(,[^\r\n]+)$", re.MULTILINE
)
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')

PERMALINK_SYMBOL = "🔗"
PERMALINK_CLASS = "article__header--js"


class HtmlContentRenderer:
    """Render markdown and code snippets with consistent styling."""

    def __init__(self, pygments_style: str = "monokai") -> None:
        """Initialize a renderer with the Pygments style used for code blocks.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults to
            ``"monokai"``.
        """
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(
        self, text: str, *, link_base: str | None = None, permalinks: bool = False
    ) -> str:
        """Render markdown into HTML.

        Parameters
        ----------
        text : str
            Markdown source. Raw HTML is passed through untouched.
        link_base : str, optional
            Content-relative directory of the document being rendered. When
            given, relative links to other ``.md`` files are rewritten to the
            URLs those articles are published at.
        permalinks : bool, optional
            Add a permalink anchor to every heading (used for article bodies).
        """
        normalized = self._normalize_fenced_blocks(text)
        if not normalized.strip():
            return ""
        extensions: list[Extension | str] = [
            "fenced_code",
            "codehilite",
            "tables",
            "sane_lists",
            "nl2br",
        ]
        extension_configs: dict[str, dict[str, typ.Any]] = {
            "codehilite": {
                "linenums": False,
                "guess_lang": False,
                "css_class": "codehilite",
                "pygments_style": self.pygments_style,
            }
        }
        if permalinks:
            extensions.append("toc")
            extension_configs["toc"] = {
                "permalink": PERMALINK_SYMBOL,
                "permalink_class": PERMALINK_CLASS,
                "permalink_title": "Link to this section",
            }
        if link_base is not None:
            extensions.append(ArticleLinkExtension(link_base))
        md = Markdown(extensions=extensions, extension_configs=extension_configs)
        html = md.convert(normalized)
        return self._annotate_codehilite(html, normalized)

    def _annotate_codehilite(self, html: str, source_markdown: str) -> str:
        """Attach language metadata to each highlighted block in converted markdown."""
        languages = [
            match.group(1) or "text"
            for match in CODE_BLOCK_PATTERN.finditer(source_markdown)
        ]
        if not languages:
            return html
        lang_iter = iter(languages)

        def _repl(match: re.Match[str]) -> str:
            lang = next(lang_iter, "text")
            return (
                f'<div class="codehilite" data-language="{escape(lang, quote=True)}">'
            )

        return CODEHILITE_OPEN_TAG.sub(_repl, html, len(languages))

    @staticmethod
    def _normalize_fenced_blocks(text: str) -> str:
        """Unindent list-nested fences and drop ``lang,extra`` fence suffixes."""
        without_indent = FENCED_INDENT_PATTERN.sub(r"\1", text)

        def _strip_labels(match: re.Match[str]) -> str:
            fence, language, _extras = match.groups()
            label = language or ""
            return f"{fence}{label}"

        return FENCE_LABEL_PATTERN.sub(_strip_labels, without_indent)


__all__ = ["CODE_BLOCK_PATTERN", "HtmlContentRenderer"]
