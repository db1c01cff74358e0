"""High-level orchestration for building the whole Code Cookies site.

This module loads articles from the content directory, indexes them by
collection, and drives every page builder to produce the home page, category
indexes, article pages, the 404 page, and the sitemap, then copies static
assets alongside them. It exposes :class:`SiteBuilder`, which consumes a
:class:`~cookie_pages.config.SiteConfig`.

Pages are rendered into a staging directory next to the output directory. The
output directory is only replaced once every page rendered successfully, so a
content or template error never leaves a half-written site behind.

Example
-------
>>> from pathlib import Path
>>> from cookie_pages.config import load_site_config
>>> from cookie_pages.site_builder import SiteBuilder
>>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> SiteBuilder(config).run()  # doctest: +SKIP
BuildResult(output_dir=PosixPath('_site'), pages=[...], ...)
"""

from __future__ import annotations

import dataclasses as dc
import shutil
import tempfile
import typing as typ
from pathlib import Path

from cookie_pages._constants import ASSETS_URL_DIR
from cookie_pages.config import SiteConfigError
from cookie_pages.content import (
    ContentError,
    load_articles,
    validate_against_categories,
)
from cookie_pages.ordering import CollectionIndex
from cookie_pages.pages import (
    ArticlePageBuilder,
    CategoryPageBuilder,
    HomePageBuilder,
    NotFoundPageBuilder,
    SitemapBuilder,
)
from cookie_pages.pages.base import output_path_for_url

from .generator import HtmlContentRenderer

if typ.TYPE_CHECKING:
    from cookie_pages.config import SiteConfig


@dc.dataclass(slots=True)
class BuildResult:
    """Summary of a completed build.

    Attributes
    ----------
    output_dir : Path
        Directory the site was published to.
    pages : list[Path]
        Rendered HTML files, in the order they were written.
    sitemap : Path or None
        Written sitemap, or ``None`` when no site URL is configured.
    assets : Path or None
        Copied assets directory, or ``None`` when there were no assets.
    """

    output_dir: Path
    pages: list[Path]
    sitemap: Path | None
    assets: Path | None

    @property
    def written(self) -> list[Path]:
        """Return every written artefact: pages, then sitemap and assets."""
        paths = list(self.pages)
        if self.sitemap is not None:
            paths.append(self.sitemap)
        if self.assets is not None:
            paths.append(self.assets)
        return paths

    def moved_to(self, output_dir: Path) -> BuildResult:
        """Return the same result with every path re-rooted at ``output_dir``."""

        def _rebase(path: Path) -> Path:
            return output_dir / path.relative_to(self.output_dir)

        return BuildResult(
            output_dir=output_dir,
            pages=[_rebase(path) for path in self.pages],
            sitemap=_rebase(self.sitemap) if self.sitemap else None,
            assets=_rebase(self.assets) if self.assets else None,
        )


class SiteBuilder:
    """Render every page of the site and publish it to the output directory."""

    def __init__(
        self,
        site_config: SiteConfig,
        *,
        templates_dir: Path | None = None,
        output_dir: Path | None = None,
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        site_config : SiteConfig
            Parsed site configuration describing content, assets, and output
            locations plus category index layouts.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        output_dir : Path, optional
            Override for the output directory; defaults to the configured
            ``site.output_dir``.
        """
        self.site_config = site_config
        self.templates_dir = templates_dir
        self.output_dir = output_dir or site_config.site.output_dir
        self.renderer = HtmlContentRenderer(site_config.site.pygments_style)

    def load_collections(self) -> CollectionIndex:
        """Load, validate, and index every article in the content directory.

        Raises
        ------
        ContentError
            If an article is malformed or references an undeclared section or
            group.
        """
        records = load_articles(self.site_config.site.content_dir)
        validate_against_categories(records, self.site_config.categories)
        return CollectionIndex(records, known_tags=self.site_config.categories)

    def check_page_urls(self, collections: CollectionIndex) -> None:
        """Reject pages that would be written to the same output file.

        Raises
        ------
        SiteConfigError
            If two categories resolve to the same ``path``.
        ContentError
            If an article is published at the URL of a category index page or
            the home page.
        """
        owners: dict[Path, str] = {
            output_path_for_url(Path(), "/"): "the home page",
        }
        for category in self.site_config.categories.values():
            target = output_path_for_url(Path(), category.url)
            if target in owners:
                msg = (
                    f"Category '{category.tag}' is published at {category.url}, "
                    f"which is already used by {owners[target]}."
                )
                raise SiteConfigError(msg)
            owners[target] = f"category '{category.tag}'"
        for article in collections.all_records():
            target = output_path_for_url(Path(), article.url)
            if target in owners:
                raise ContentError(
                    article.source_path,
                    f"article URL {article.url} is already used by {owners[target]}",
                )
            owners[target] = f"article '{article.path_stem}'"

    def run(self) -> BuildResult:
        """Build the site and replace the output directory with the result.

        Returns
        -------
        BuildResult
            Paths of everything written, relative to the final output
            directory.

        Notes
        -----
        On any exception the staging directory is removed and the previous
        output directory is left as it was.
        """
        collections = self.load_collections()
        self.check_page_urls(collections)
        output_dir = self.output_dir
        output_dir.parent.mkdir(parents=True, exist_ok=True)
        staging = Path(
            tempfile.mkdtemp(prefix=f".{output_dir.name}-", dir=output_dir.parent)
        )
        staging.chmod(0o755)
        try:
            staged = self._render_into(staging, collections)
            _replace_directory(staging, output_dir)
        except BaseException:
            shutil.rmtree(staging, ignore_errors=True)
            raise
        return staged.moved_to(output_dir)

    def _render_into(self, target: Path, collections: CollectionIndex) -> BuildResult:
        """Render all pages, the sitemap, and assets into ``target``."""
        shared = {"renderer": self.renderer, "templates_dir": self.templates_dir}
        pages: list[Path] = [
            HomePageBuilder(self.site_config, **shared).run(target),
        ]
        pages.extend(
            CategoryPageBuilder(self.site_config, collections, **shared).run(target)
        )
        pages.extend(
            ArticlePageBuilder(self.site_config, collections, **shared).run(target)
        )
        pages.append(NotFoundPageBuilder(self.site_config, **shared).run(target))
        sitemap = SitemapBuilder(
            self.site_config, collections, templates_dir=self.templates_dir
        ).run(target)
        assets = self._copy_assets(target)
        return BuildResult(
            output_dir=target, pages=pages, sitemap=sitemap, assets=assets
        )

    def _copy_assets(self, target: Path) -> Path | None:
        """Copy the configured assets directory to ``target/assets``."""
        source = self.site_config.site.assets_dir
        if not source.is_dir():
            return None
        destination = target / ASSETS_URL_DIR
        shutil.copytree(source, destination)
        return destination


def _replace_directory(staging: Path, output_dir: Path) -> None:
    """Swap ``staging`` into place at ``output_dir``, discarding the old tree."""
    if output_dir.exists():
        retired = output_dir.with_name(f".{output_dir.name}-old")
        if retired.exists():
            shutil.rmtree(retired)
        output_dir.rename(retired)
        staging.rename(output_dir)
        shutil.rmtree(retired, ignore_errors=True)
    else:
        staging.rename(output_dir)


__all__ = ["BuildResult", "SiteBuilder"]
