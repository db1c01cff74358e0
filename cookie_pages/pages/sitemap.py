"""Write ``sitemap.xml`` listing every published page under the canonical URL."""

from __future__ import annotations

import typing as typ

from cookie_pages._constants import SITEMAP_FILENAME
from cookie_pages.config.helpers import _parse_timestamp

from .base import build_environment, write_page

if typ.TYPE_CHECKING:
    from pathlib import Path

    from cookie_pages.config import SiteConfig
    from cookie_pages.ordering import CollectionIndex


class SitemapBuilder:
    """Render the XML sitemap for the homepage, categories, and articles."""

    def __init__(
        self,
        site_config: SiteConfig,
        collections: CollectionIndex,
        *,
        templates_dir: Path | None = None,
    ) -> None:
        self.site_config = site_config
        self.collections = collections
        self.env = build_environment(templates_dir)
        self.template = self.env.get_template("sitemap.jinja")

    @property
    def enabled(self) -> bool:
        """Return True when a canonical site URL is configured."""
        return bool(self.site_config.site.url)

    def entries(self) -> list[dict[str, str | None]]:
        """Return ``loc``/``lastmod`` pairs in homepage, category, article order."""
        base_url = (self.site_config.site.url or "").rstrip("/")
        entries: list[dict[str, str | None]] = [
            {"loc": f"{base_url}/", "lastmod": None}
        ]
        entries.extend(
            {"loc": f"{base_url}{category.url}", "lastmod": None}
            for category in self.site_config.categories.values()
        )
        for article in self.collections.all_records():
            updated = _parse_timestamp(article.last_update)
            entries.append(
                {
                    "loc": f"{base_url}{article.url}",
                    "lastmod": updated.date().isoformat() if updated else None,
                }
            )
        return entries

    def render(self) -> str:
        """Return the sitemap XML."""
        return self.template.render(entries=self.entries())

    def run(self, output_dir: Path) -> Path | None:
        """Write the sitemap, or return None when no site URL is configured."""
        if not self.enabled:
            return None
        return write_page(output_dir / SITEMAP_FILENAME, self.render())


__all__ = ["SITEMAP_FILENAME", "SitemapBuilder"]
