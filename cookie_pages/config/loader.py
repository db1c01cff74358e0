"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .categories import _build_categories
from .helpers import _optional_str, _require_mapping
from .homepage import _build_homepage_config, _build_not_found_config
from .models import SiteConfig, SiteConfigError, SiteSettings


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the site and its categories.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration including site settings, homepage and 404 copy,
        and category index definitions in declaration order.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If required sections or fields are missing or invalid.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from cookie_pages.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> list(config.categories)[:1]  # doctest: +SKIP
    ['development-basics']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):  # pragma: no cover - config error guard
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    return SiteConfig(
        site=_build_site_settings(raw.get("site")),
        homepage=_build_homepage_config(raw.get("homepage")),
        not_found=_build_not_found_config(raw.get("not_found")),
        categories=_build_categories(raw.get("categories")),
        config_path=path,
    )


def _build_site_settings(payload: object) -> SiteSettings:
    """Build site-wide settings, applying defaults for omitted keys."""
    data = _require_mapping(payload, where="Site configuration")
    base = SiteSettings()
    url = _validate_site_url(_optional_str(data.get("url")))
    return SiteSettings(
        name=_optional_str(data.get("name")) or base.name,
        description=_optional_str(data.get("description")) or base.description,
        url=url,
        repo=_optional_str(data.get("repo")),
        branch=_optional_str(data.get("branch")) or base.branch,
        repo_content_path=(_optional_str(data.get("repo_content_path")) or "").strip(
            "/"
        ),
        analytics_project_id=_optional_str(data.get("analytics_project_id")),
        pygments_style=_optional_str(data.get("pygments_style")) or base.pygments_style,
        content_dir=_optional_path(data.get("content_dir")) or base.content_dir,
        assets_dir=_optional_path(data.get("assets_dir")) or base.assets_dir,
        output_dir=_optional_path(data.get("output_dir")) or base.output_dir,
    )


def _optional_path(value: object | None) -> Path | None:
    """Return a Path for a non-empty setting; blank or null keeps the default."""
    text = _optional_str(value)
    return Path(text) if text else None


def _validate_site_url(url: str | None) -> str | None:
    if url and not url.startswith(("http://", "https://")):
        msg = f"Site 'url' must be an absolute http(s) URL, got {url!r}."
        raise SiteConfigError(msg)
    return url


def apply_overrides(
    config: SiteConfig,
    *,
    output_dir: Path | None = None,
    site_url: str | None = None,
) -> SiteConfig:
    """Return ``config`` with command-line overrides applied to its settings.

    Parameters
    ----------
    config : SiteConfig
        Configuration loaded from disk.
    output_dir : Path or None, optional
        Replacement output directory; ``None`` keeps the configured value.
    site_url : str or None, optional
        Replacement canonical site URL; ``None`` keeps the configured value.

    Raises
    ------
    SiteConfigError
        If ``site_url`` is not an absolute http(s) URL.
    """
    changes: dict[str, typ.Any] = {}
    if output_dir is not None:
        changes["output_dir"] = output_dir
    if site_url is not None:
        changes["url"] = _validate_site_url(site_url)
    if not changes:
        return config
    return dc.replace(config, site=dc.replace(config.site, **changes))


__all__ = ["apply_overrides", "load_site_config"]
