"""Code Cookies homepage rendering pipeline.

This module turns the ``homepage`` block of ``config/site.yaml`` and the
configured categories into the static ``index.html`` landing page. The main
entry point is :class:`HomePageBuilder`, which loads the template, injects the
homepage copy plus every visible category, and persists the generated HTML.

Typical usage mirrors the build pipeline:

>>> from pathlib import Path
>>> from cookie_pages.config import load_site_config
>>> builder = HomePageBuilder(load_site_config(Path("config/site.yaml")))  # doctest: +SKIP
>>> builder.run(Path("_site"))  # doctest: +SKIP
PosixPath('_site/index.html')
"""

from __future__ import annotations

import typing as typ

from cookie_pages._constants import INDEX_FILENAME
from cookie_pages.generator.renderer import HtmlContentRenderer

from .base import base_context, build_environment, write_page

if typ.TYPE_CHECKING:
    from pathlib import Path

    from cookie_pages.config import SiteConfig


class HomePageBuilder:
    """Render the landing page listing every visible category."""

    def __init__(
        self,
        site_config: SiteConfig,
        *,
        renderer: HtmlContentRenderer | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        site_config : SiteConfig
            Parsed site configuration; provides the homepage copy and the
            categories in declaration order.
        renderer : HtmlContentRenderer, optional
            Markdown renderer for the intro text. A fresh renderer using the
            configured Pygments style is created when omitted.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to the package
            ``templates`` directory.
        """
        self.site_config = site_config
        self.renderer = renderer or HtmlContentRenderer(
            site_config.site.pygments_style
        )
        self.env = build_environment(templates_dir)
        self.template = self.env.get_template("home_page.jinja")

    def render(self) -> str:
        """Return the homepage HTML."""
        homepage = self.site_config.homepage
        context = base_context(self.site_config, page_title=homepage.title)
        context.update(
            {
                "homepage": homepage,
                "intro_html": self.renderer.markdown(homepage.intro),
                "categories": self.site_config.visible_categories(),
            }
        )
        return self.template.render(**context)

    def run(self, output_dir: Path) -> Path:
        """Render and write ``index.html`` into ``output_dir``."""
        return write_page(output_dir / INDEX_FILENAME, self.render())


__all__ = ["HomePageBuilder"]
