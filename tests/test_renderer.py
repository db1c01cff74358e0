"""Tests for markdown rendering and article link rewriting."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from cookie_pages.generator import HtmlContentRenderer


@pytest.fixture
def renderer() -> HtmlContentRenderer:
    return HtmlContentRenderer("monokai")


def _hrefs(html: str) -> list[str | None]:
    soup = BeautifulSoup(html, "html.parser")
    return [anchor.get("href") for anchor in soup.find_all("a")]


@pytest.mark.parametrize(
    ("link", "expected"),
    [
        ("02-vars.md", "/python/02-vars/"),
        ("./02-vars.md#loops", "/python/02-vars/#loops"),
        ("../rust/01-intro.md", "/rust/01-intro/"),
        ("sub/01-deep.md?v=2", "/python/sub/01-deep/?v=2"),
        ("../../../escape.md", "/escape/"),
    ],
)
def test_relative_markdown_links_point_at_article_urls(
    renderer: HtmlContentRenderer, link: str, expected: str
) -> None:
    html = renderer.markdown(f"[next]({link})", link_base="python")
    assert _hrefs(html) == [expected], f"expected {link!r} to become {expected!r}"


@pytest.mark.parametrize(
    "link",
    [
        "https://example.com/readme.md",
        "/python/02-vars/",
        "#section",
        "image.png",
        "mailto:cookie@example.com",
    ],
)
def test_other_links_are_left_alone(renderer: HtmlContentRenderer, link: str) -> None:
    html = renderer.markdown(f"[other]({link})", link_base="python")
    assert _hrefs(html) == [link]


def test_links_are_untouched_without_a_link_base(
    renderer: HtmlContentRenderer,
) -> None:
    html = renderer.markdown("[next](02-vars.md)")
    assert _hrefs(html) == ["02-vars.md"]


def test_fenced_code_is_highlighted_with_language(
    renderer: HtmlContentRenderer,
) -> None:
    """Fenced blocks render as codehilite divs tagged with their language."""
    html = renderer.markdown("```python\nprint('hi')\n```\n\n```\nplain\n```\n")
    soup = BeautifulSoup(html, "html.parser")
    blocks = soup.select("div.codehilite")
    languages = [block.get("data-language") for block in blocks]
    assert languages == ["python", "text"], f"unexpected languages {languages!r}"
    assert "print" in blocks[0].get_text()


def test_list_nested_fences_are_highlighted(renderer: HtmlContentRenderer) -> None:
    """Indented fences with ``lang,extra`` labels still highlight."""
    markdown = "- Example\n\n  ```rust,no_run\n  fn main() {}\n  ```\n"
    soup = BeautifulSoup(renderer.markdown(markdown), "html.parser")
    block = soup.select_one("div.codehilite")
    assert block is not None, "expected a highlighted block"
    assert block.get("data-language") == "rust"


def test_headings_get_permalinks_when_requested(
    renderer: HtmlContentRenderer,
) -> None:
    soup = BeautifulSoup(
        renderer.markdown("## Install Python\n\nText.\n", permalinks=True),
        "html.parser",
    )
    heading = soup.find("h2")
    assert heading is not None
    assert heading.get("id") == "install-python"
    anchor = heading.find("a", class_="article__header--js")
    assert anchor is not None, "expected a permalink anchor in the heading"
    assert anchor.get("href") == "#install-python"


def test_raw_html_passes_through(renderer: HtmlContentRenderer) -> None:
    html = renderer.markdown('<div class="note">Careful</div>\n')
    assert '<div class="note">Careful</div>' in html


def test_blank_markdown_renders_nothing(renderer: HtmlContentRenderer) -> None:
    assert renderer.markdown("  \n") == ""


def test_stylesheet_targets_codehilite(renderer: HtmlContentRenderer) -> None:
    assert ".codehilite" in renderer.stylesheet
