"""Render the 404 page served for unknown URLs."""

from __future__ import annotations

import typing as typ

from cookie_pages._constants import NOT_FOUND_FILENAME
from cookie_pages.generator.renderer import HtmlContentRenderer

from .base import base_context, build_environment, write_page

if typ.TYPE_CHECKING:
    from pathlib import Path

    from cookie_pages.config import SiteConfig


class NotFoundPageBuilder:
    """Render ``404.html`` from the configured copy."""

    def __init__(
        self,
        site_config: SiteConfig,
        *,
        renderer: HtmlContentRenderer | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        self.site_config = site_config
        self.renderer = renderer or HtmlContentRenderer(
            site_config.site.pygments_style
        )
        self.env = build_environment(templates_dir)
        self.template = self.env.get_template("not_found.jinja")

    def render(self) -> str:
        """Return the 404 page HTML."""
        not_found = self.site_config.not_found
        context = base_context(self.site_config, page_title=not_found.title)
        context["body_html"] = self.renderer.markdown(not_found.body)
        return self.template.render(**context)

    def run(self, output_dir: Path) -> Path:
        """Render and write the 404 page at the root of ``output_dir``."""
        return write_page(output_dir / NOT_FOUND_FILENAME, self.render())


__all__ = ["NOT_FOUND_FILENAME", "NotFoundPageBuilder"]
