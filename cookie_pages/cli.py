"""Cyclopts CLI entrypoint for building and previewing the Code Cookies site.

The ``cookie-pages`` console script defined here renders the whole static site
from ``config/site.yaml`` and the Markdown articles it points at, and serves a
local preview that rebuilds when sources change. Typical usage involves
running ``cookie-pages build`` in CI and ``cookie-pages serve`` while writing.

Examples
--------
Build the site with the default configuration:

>>> from cookie_pages.cli import main
>>> main()  # doctest: +SKIP

Build into a custom directory with a canonical URL for the sitemap:

>>> from cookie_pages.cli import app
>>> app(
...     ["build", "--output-dir", "dist", "--site-url", "https://example.com"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import SiteConfigError, apply_overrides, load_site_config
from .content import ContentError
from .pages.base import DEFAULT_TEMPLATES_DIR
from .serve import DEFAULT_HOST, DEFAULT_INTERVAL, DEFAULT_PORT, serve_site
from .site_builder import BuildResult, SiteBuilder

DEFAULT_CONFIG = Path("config/site.yaml")

app = App(name="cookie-pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _build_site(
    config: Path, *, output_dir: Path | None, site_url: str | None
) -> BuildResult:
    """Load ``config``, apply overrides, and build the site."""
    site_config = apply_overrides(
        load_site_config(config), output_dir=output_dir, site_url=site_url
    )
    return SiteBuilder(site_config).run()


def _report_build(result: BuildResult) -> None:
    for path in result.written:
        print(f"wrote {_format_path(path)}")
    if result.sitemap is None:
        print("skipped sitemap (no site url configured)")


@app.command(help="Build every page of the site into the output directory.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    site_url: typ.Annotated[
        str | None,
        Parameter(
            help="Override the canonical site URL", env_var="INPUT_SITE_URL"
        ),
    ] = None,
) -> None:
    """Build the home page, category indexes, articles, 404 page, and sitemap.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Override the configured output directory.
    site_url : str or None, optional
        Override the canonical site URL used for the sitemap. Without any
        URL the sitemap is skipped.

    Raises
    ------
    SystemExit
        With status 1 when the configuration or an article is invalid. The
        previous output directory is left untouched.
    """
    try:
        result = _build_site(config, output_dir=output_dir, site_url=site_url)
    except (ContentError, SiteConfigError, FileNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    _report_build(result)


@app.command(help="Serve the built site locally and rebuild on changes.")
def serve(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    host: typ.Annotated[str, Parameter(help="Interface to bind")] = DEFAULT_HOST,
    port: typ.Annotated[int, Parameter(help="Port to listen on")] = DEFAULT_PORT,
    interval: typ.Annotated[
        float, Parameter(help="Seconds between change checks")
    ] = DEFAULT_INTERVAL,
) -> None:
    """Build once, then serve the output and rebuild whenever sources change.

    The initial build must succeed. Later failures are printed and the last
    good output keeps being served until the sources are fixed.

    Raises
    ------
    SystemExit
        With status 1 when the initial build fails.
    """
    try:
        site_config = apply_overrides(load_site_config(config), output_dir=output_dir)
        result = SiteBuilder(site_config).run()
    except (ContentError, SiteConfigError, FileNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    _report_build(result)

    def rebuild() -> None:
        _report_build(_build_site(config, output_dir=output_dir, site_url=None))

    settings = site_config.site
    serve_site(
        rebuild=rebuild,
        output_dir=result.output_dir,
        watch_paths=[
            config,
            settings.content_dir,
            settings.assets_dir,
            DEFAULT_TEMPLATES_DIR,
        ],
        host=host,
        port=port,
        interval=interval,
    )


def main() -> None:
    """Invoke the Cyclopts application behind the ``cookie-pages`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
