"""Read tutorial articles from the content directory."""

from .front_matter import FrontMatterError, split_front_matter
from .loader import load_article, load_articles, validate_against_categories
from .models import ArticleRecord, ContentError, url_for_stem

__all__ = [
    "ArticleRecord",
    "ContentError",
    "FrontMatterError",
    "load_article",
    "load_articles",
    "split_front_matter",
    "url_for_stem",
    "validate_against_categories",
]
