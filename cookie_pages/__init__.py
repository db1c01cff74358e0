"""Static site generator for the Code Cookies programming articles.

This package exposes the CLI entry points used by ``uv run cookie-pages`` to
build the homepage, category indexes, article pages, 404 page, and sitemap,
and to preview the result locally.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from cookie_pages import main
>>> main()  # doctest: +SKIP
>>> from cookie_pages import app
>>> app.name
('cookie-pages',)
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
