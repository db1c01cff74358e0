"""Tests for ``config/site.yaml`` parsing.

These cover the defaults applied to omitted settings, the category, section,
and group structures, and the validation errors raised for malformed input.
"""

from __future__ import annotations

import re
import typing as typ
from pathlib import Path

import pytest

from cookie_pages.config import (
    SiteConfigError,
    apply_overrides,
    load_site_config,
)
from cookie_pages.config.homepage import DEFAULT_NOT_FOUND_BODY

if typ.TYPE_CHECKING:
    from conftest import SiteLayout


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "site.yaml"
    path.write_text(text.strip() + "\n", encoding="utf-8")
    return path


def test_defaults_apply_to_an_empty_config(tmp_path: Path) -> None:
    """An empty file yields the stock settings and no categories."""
    config = load_site_config(_write(tmp_path, "{}"))
    assert config.site.name == "Code Cookies"
    assert config.site.url is None
    assert config.site.branch == "main"
    assert config.site.output_dir == Path("_site")
    assert config.categories == {}
    assert config.not_found.title == "Page not found"
    assert config.not_found.body == DEFAULT_NOT_FOUND_BODY


def test_null_directories_fall_back_to_defaults(tmp_path: Path) -> None:
    """``content_dir: null`` and blank paths keep the stock directories."""
    path = _write(
        tmp_path,
        """
site:
  content_dir: null
  assets_dir: ""
  output_dir: dist
""",
    )
    settings = load_site_config(path).site
    assert settings.content_dir == Path("content")
    assert settings.assets_dir == Path("assets")
    assert settings.output_dir == Path("dist")


def test_categories_keep_declaration_order(tmp_path: Path) -> None:
    """Categories come back keyed by tag in the order the YAML lists them."""
    path = _write(
        tmp_path,
        """
categories:
  rust:
    title: Rust
  development-basics:
    title: Development Basics
    path: /basics/
    hidden: true
  python:
    title: Python
""",
    )
    config = load_site_config(path)
    assert list(config.categories) == ["rust", "development-basics", "python"]
    basics = config.get_category("development-basics")
    assert basics is not None
    assert basics.path == "basics", f"expected slashes stripped, got {basics.path!r}"
    assert basics.url == "/basics/"
    assert config.get_category("rust").url == "/rust/"  # type: ignore[union-attr]
    visible = [category.tag for category in config.visible_categories()]
    assert visible == ["rust", "python"], f"hidden category leaked: {visible!r}"


def test_written_configs_keep_category_order(site_layout: SiteLayout) -> None:
    """Configs written by the fixture list categories as declared, not sorted."""
    site_layout.write_config(
        categories={
            "rust": {"title": "Rust"},
            "python": {"title": "Python"},
            "basics": {"title": "Basics"},
        }
    )
    config = site_layout.load()
    assert list(config.categories) == ["rust", "python", "basics"]


def test_sections_and_groups_are_parsed(tmp_path: Path) -> None:
    """Sections keep their order and groups are keyed by integer index."""
    path = _write(
        tmp_path,
        """
categories:
  python:
    title: Python
    sections:
      - title: Basics
        groups:
          0: Setup
          2: Week 2
      - title: Lists
        groups: [First, Second]
      - title: Extras
""",
    )
    sections = load_site_config(path).categories["python"].sections
    assert [section.title for section in sections] == ["Basics", "Lists", "Extras"]
    assert sections[0].groups == {0: "Setup", 2: "Week 2"}
    assert sections[1].groups == {0: "First", 1: "Second"}
    assert sections[2].groups == {}


@pytest.mark.parametrize(
    ("body", "message"),
    [
        ("categories:\n  python: {}", "requires a 'title'"),
        ("categories: [python]", "must be a mapping"),
        (
            "categories:\n  python:\n    title: Python\n    sections: nope",
            "'sections' must be a list",
        ),
        (
            "categories:\n  python:\n    title: Python\n    sections:\n"
            "      - title: Basics\n        groups:\n          week: Week 1",
            "group keys must be integers",
        ),
        (
            "categories:\n  python:\n    title: Python\n    hidden: sometimes",
            "must be true or false",
        ),
        ("site:\n  url: example.com", "absolute http(s) URL"),
    ],
)
def test_invalid_configuration_is_rejected(
    tmp_path: Path, body: str, message: str
) -> None:
    """Malformed configuration raises SiteConfigError naming the problem."""
    with pytest.raises(SiteConfigError, match=re.escape(message)):
        load_site_config(_write(tmp_path, body))


def test_missing_config_file(tmp_path: Path) -> None:
    """A missing configuration file is reported as FileNotFoundError."""
    with pytest.raises(FileNotFoundError, match="not found"):
        load_site_config(tmp_path / "missing.yaml")


def test_overrides_replace_output_dir_and_url(site_layout: SiteLayout) -> None:
    """Command-line overrides win over the configured values."""
    site_layout.write_config(site={"url": "https://configured.example"})
    config = site_layout.load()
    overridden = apply_overrides(
        config, output_dir=Path("dist"), site_url="https://override.example"
    )
    assert overridden.site.output_dir == Path("dist")
    assert overridden.site.url == "https://override.example"
    assert config.site.url == "https://configured.example", "original was mutated"


def test_overrides_validate_the_site_url(site_layout: SiteLayout) -> None:
    """An override URL must be absolute, like the configured one."""
    site_layout.write_config()
    with pytest.raises(SiteConfigError, match="absolute"):
        apply_overrides(site_layout.load(), site_url="ftp://example.com")


def test_no_overrides_returns_the_same_config(site_layout: SiteLayout) -> None:
    site_layout.write_config()
    config = site_layout.load()
    assert apply_overrides(config) is config
