"""Typed dataclasses describing Code Cookies site configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class SiteSettings:
    """Site-wide identity, source locations, and output settings."""

    name: str = "Code Cookies"
    description: str = ""
    url: str | None = None
    repo: str | None = None
    branch: str = "main"
    repo_content_path: str = ""
    analytics_project_id: str | None = None
    pygments_style: str = "monokai"
    content_dir: Path = Path("content")
    assets_dir: Path = Path("assets")
    output_dir: Path = Path("_site")


@dc.dataclass(slots=True)
class SectionConfig:
    """A chapter declared on a category index page.

    Attributes
    ----------
    title : str
        Heading rendered above the section's article list.
    groups : dict[int, str]
        Display labels keyed by the ``group_index`` articles declare.
    """

    title: str
    groups: dict[int, str] = dc.field(default_factory=dict)


@dc.dataclass(slots=True)
class CategoryConfig:
    """Index page definition for one article collection."""

    tag: str
    title: str
    path: str
    intro: str = ""
    hidden: bool = False
    sections: list[SectionConfig] = dc.field(default_factory=list)

    @property
    def url(self) -> str:
        """Return the site-absolute URL of the category index page."""
        return f"/{self.path}/"


@dc.dataclass(slots=True)
class HomepageConfig:
    """Copy rendered on the landing page."""

    title: str = ""
    heading: str = ""
    intro: str = ""


@dc.dataclass(slots=True)
class NotFoundConfig:
    """Copy rendered on the 404 page."""

    title: str = "Page not found"
    body: str = ""


@dc.dataclass(slots=True)
class SiteConfig:
    """Fully resolved site configuration."""

    site: SiteSettings
    homepage: HomepageConfig
    not_found: NotFoundConfig
    categories: dict[str, CategoryConfig]
    config_path: Path | None = None

    def get_category(self, tag: str) -> CategoryConfig | None:
        """Return the category declared for ``tag`` or ``None``."""
        return self.categories.get(tag)

    def visible_categories(self) -> list[CategoryConfig]:
        """Return categories shown on the homepage, in declaration order."""
        return [
            category for category in self.categories.values() if not category.hidden
        ]


__all__ = [
    "CategoryConfig",
    "HomepageConfig",
    "NotFoundConfig",
    "SectionConfig",
    "SiteConfig",
    "SiteConfigError",
    "SiteSettings",
]
