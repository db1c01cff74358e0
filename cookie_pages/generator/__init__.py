"""Markdown rendering for article bodies and page copy."""

from .link_rewriter import ArticleLinkExtension
from .renderer import HtmlContentRenderer

__all__ = ["ArticleLinkExtension", "HtmlContentRenderer"]
