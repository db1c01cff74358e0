"""Load and validate the Code Cookies site configuration.

This subpackage parses the project's ``config/site.yaml`` file, applies
defaults, and produces typed dataclasses (:class:`SiteConfig`,
:class:`CategoryConfig`, :class:`SectionConfig`, etc.) that the page builders
consume. The primary entry point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from cookie_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.get_category("python").url  # doctest: +SKIP
'/python/'
"""

from .loader import apply_overrides, load_site_config
from .models import (
    CategoryConfig,
    HomepageConfig,
    NotFoundConfig,
    SectionConfig,
    SiteConfig,
    SiteConfigError,
    SiteSettings,
)

__all__ = [
    "CategoryConfig",
    "HomepageConfig",
    "NotFoundConfig",
    "SectionConfig",
    "SiteConfig",
    "SiteConfigError",
    "SiteSettings",
    "apply_overrides",
    "load_site_config",
]
