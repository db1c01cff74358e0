"""Build the index page of every configured category.

A category without declared sections renders as one numbered list of its whole
collection. A category with sections renders one heading and list per section,
with group labels (``Week 1``, ``Week 2`` …) inserted where the group changes
and numbering running on across groups.
"""

from __future__ import annotations

import typing as typ

from cookie_pages.generator.renderer import HtmlContentRenderer
from cookie_pages.ordering import (
    numbered_rows,
    render_grouped_list,
    section_partition,
    sorted_collection,
)

from .base import base_context, build_environment, output_path_for_url, write_page

if typ.TYPE_CHECKING:
    from pathlib import Path

    from cookie_pages.config import CategoryConfig, SiteConfig
    from cookie_pages.ordering import ArticleRow, CollectionIndex


class CategoryPageBuilder:
    """Render one index page per category in the site configuration."""

    def __init__(
        self,
        site_config: SiteConfig,
        collections: CollectionIndex,
        *,
        renderer: HtmlContentRenderer | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        self.site_config = site_config
        self.collections = collections
        self.renderer = renderer or HtmlContentRenderer(
            site_config.site.pygments_style
        )
        self.env = build_environment(templates_dir)
        self.template = self.env.get_template("category_page.jinja")

    def render(self, category: CategoryConfig) -> str:
        """Return the index page HTML for ``category``."""
        context = base_context(self.site_config, page_title=category.title)
        context.update(
            {
                "category": category,
                "intro_html": self.renderer.markdown(category.intro),
                "sections": self._section_entries(category),
                "rows": self._flat_rows(category),
            }
        )
        return self.template.render(**context)

    def run(self, output_dir: Path) -> list[Path]:
        """Render and write every category index page, returning the paths."""
        written: list[Path] = []
        for category in self.site_config.categories.values():
            output_path = output_path_for_url(output_dir, category.url)
            written.append(write_page(output_path, self.render(category)))
        return written

    def _section_entries(self, category: CategoryConfig) -> list[dict[str, typ.Any]]:
        """Return one ``{section, rows}`` entry per declared section."""
        if not category.sections:
            return []
        return [
            {
                "section": section,
                "rows": render_grouped_list(records, category.sections),
            }
            for section, records in section_partition(
                self.collections, category.tag, category.sections
            )
        ]

    def _flat_rows(self, category: CategoryConfig) -> list[ArticleRow]:
        """Return the single numbered list used when no sections are declared."""
        if category.sections:
            return []
        return numbered_rows(sorted_collection(self.collections, category.tag))


__all__ = ["CategoryPageBuilder"]
