"""Page builders that render the site's HTML documents from templates."""

from .article import ArticlePageBuilder
from .category import CategoryPageBuilder
from .home import HomePageBuilder
from .not_found import NotFoundPageBuilder
from .sitemap import SitemapBuilder

__all__ = [
    "ArticlePageBuilder",
    "CategoryPageBuilder",
    "HomePageBuilder",
    "NotFoundPageBuilder",
    "SitemapBuilder",
]
