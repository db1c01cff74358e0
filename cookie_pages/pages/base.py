"""Shared Jinja environment and file-writing helpers for the page builders."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from cookie_pages._constants import INDEX_FILENAME

if typ.TYPE_CHECKING:
    from cookie_pages.config import SiteConfig

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


def build_environment(templates_dir: Path | None = None) -> Environment:
    """Return the Jinja environment every page template renders in.

    Undefined names raise instead of rendering as empty strings so a template
    typo fails the build rather than publishing a broken page.
    """
    return Environment(
        loader=FileSystemLoader(str(templates_dir or DEFAULT_TEMPLATES_DIR)),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )


def base_context(site_config: SiteConfig, *, page_title: str) -> dict[str, typ.Any]:
    """Return the context keys the base layout expects."""
    return {
        "site": site_config.site,
        "page_title": page_title,
    }


def output_path_for_url(output_dir: Path, url: str) -> Path:
    """Map a directory-style URL (``/python/01-intro/``) to its ``index.html``."""
    relative = url.strip("/")
    if not relative:
        return output_dir / INDEX_FILENAME
    return output_dir.joinpath(*relative.split("/"), INDEX_FILENAME)


def write_page(output_path: Path, html: str) -> Path:
    """Write ``html`` to ``output_path`` with a trailing newline."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if not html.endswith("\n"):
        html += "\n"
    output_path.write_text(html, encoding="utf-8")
    return output_path


__all__ = [
    "DEFAULT_TEMPLATES_DIR",
    "base_context",
    "build_environment",
    "output_path_for_url",
    "write_page",
]
