"""Common literal values used across cookie_pages.

These constants keep output filenames and reserved source names centralized so
page builders, the content loader, the preview server, and tests can import
the same values without drifting. Intended for internal use within the
cookie_pages package.

Examples
--------
>>> from cookie_pages import _constants
>>> _constants.NOT_FOUND_FILENAME
'404.html'
>>> _constants.INDEX_FILENAME
'index.html'
"""

INDEX_FILENAME = "index.html"
NOT_FOUND_FILENAME = "404.html"
SITEMAP_FILENAME = "sitemap.xml"
ASSETS_URL_DIR = "assets"
DEFAULTS_FILENAME = "_defaults.yaml"
