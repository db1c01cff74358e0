"""Homepage and 404 page configuration builders."""

from __future__ import annotations

from .helpers import _optional_str, _require_mapping
from .models import HomepageConfig, NotFoundConfig

DEFAULT_NOT_FOUND_BODY = (
    "Hm. This page does not seem to exist (anymore?). "
    "But no need to worry. Just have a cookie 🍪.\n\n"
    "Go back to the [home page](/)."
)


def _build_homepage_config(payload: object) -> HomepageConfig:
    """Build the homepage configuration from the provided payload."""
    data = _require_mapping(payload, where="Homepage configuration")
    return HomepageConfig(
        title=_optional_str(data.get("title")) or "",
        heading=_optional_str(data.get("heading")) or "",
        intro=str(data.get("intro") or ""),
    )


def _build_not_found_config(payload: object) -> NotFoundConfig:
    """Build the 404 page configuration, falling back to the stock copy."""
    data = _require_mapping(payload, where="Not-found configuration")
    base = NotFoundConfig()
    return NotFoundConfig(
        title=_optional_str(data.get("title")) or base.title,
        body=str(data.get("body") or DEFAULT_NOT_FOUND_BODY),
    )


__all__ = [
    "DEFAULT_NOT_FOUND_BODY",
    "_build_homepage_config",
    "_build_not_found_config",
]
