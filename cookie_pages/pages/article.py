"""Render individual tutorial article pages."""

from __future__ import annotations

import posixpath
import typing as typ

from cookie_pages.generator.renderer import HtmlContentRenderer
from cookie_pages.ordering import resolve_next_article

from .base import base_context, build_environment, output_path_for_url, write_page

if typ.TYPE_CHECKING:
    from pathlib import Path

    from cookie_pages.config import SiteConfig
    from cookie_pages.content import ArticleRecord
    from cookie_pages.ordering import CollectionIndex


class ArticlePageBuilder:
    """Render every article with breadcrumbs, body, and a next-article link."""

    def __init__(
        self,
        site_config: SiteConfig,
        collections: CollectionIndex,
        *,
        renderer: HtmlContentRenderer | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        site_config : SiteConfig
            Parsed site configuration; supplies the site name, repository for
            history links, and category titles for breadcrumbs.
        collections : CollectionIndex
            Every loaded article grouped by tag; used for next-article links.
        renderer : HtmlContentRenderer, optional
            Markdown renderer shared with the other builders.
        templates_dir : Path, optional
            Directory containing Jinja templates.
        """
        self.site_config = site_config
        self.collections = collections
        self.renderer = renderer or HtmlContentRenderer(
            site_config.site.pygments_style
        )
        self.env = build_environment(templates_dir)
        self.template = self.env.get_template("article_page.jinja")

    def render(self, article: ArticleRecord) -> str:
        """Return the HTML page for ``article``."""
        body_html = self.renderer.markdown(
            article.body,
            link_base=posixpath.dirname(article.path_stem),
            permalinks=True,
        )
        context = base_context(self.site_config, page_title=article.title)
        context.update(
            {
                "article": article,
                "body_html": body_html,
                "trail": self._breadcrumb_trail(article),
                "history_url": self._history_url(article),
                "next_article": resolve_next_article(
                    self.collections, article.path_stem, article.tags
                ),
                "pygments_css": self.renderer.stylesheet,
            }
        )
        return self.template.render(**context)

    def run(self, output_dir: Path) -> list[Path]:
        """Render and write every article page, returning the written paths."""
        return [
            write_page(
                output_path_for_url(output_dir, article.url), self.render(article)
            )
            for article in self.collections.all_records()
        ]

    def _breadcrumb_trail(self, article: ArticleRecord) -> list[dict[str, str | None]]:
        """Return the crumbs after the site name: category, then the article."""
        category = self.site_config.get_category(article.tags)
        if category is not None:
            category_crumb = {"label": category.title, "href": category.url}
        else:
            category_crumb = {"label": article.tags, "href": f"/{article.tags}/"}
        return [category_crumb, {"label": article.title, "href": None}]

    def _history_url(self, article: ArticleRecord) -> str | None:
        """Return the GitHub commit history URL for the article's source file."""
        site = self.site_config.site
        if not site.repo:
            return None
        source = f"{article.path_stem}.md"
        if site.repo_content_path:
            source = f"{site.repo_content_path}/{source}"
        return f"https://github.com/{site.repo}/commits/{site.branch}/{source}"


__all__ = ["ArticlePageBuilder"]
