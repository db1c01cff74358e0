"""Shared fixtures that lay out a throwaway site on disk.

The :class:`SiteLayout` helper writes ``site.yaml``, markdown articles, and
assets beneath pytest's ``tmp_path`` using absolute paths, so builds never
depend on the working directory.
"""

from __future__ import annotations

import dataclasses as dc
import io
import typing as typ
from pathlib import Path

import pytest
from ruamel.yaml import YAML

from cookie_pages.config import load_site_config
from cookie_pages.site_builder import SiteBuilder

if typ.TYPE_CHECKING:
    from cookie_pages.config import SiteConfig
    from cookie_pages.site_builder import BuildResult


def dump_yaml(data: typ.Mapping[str, typ.Any]) -> str:
    """Serialise ``data`` as block-style YAML, keeping mapping key order.

    The round-trip dumper writes dicts in insertion order; the safe dumper
    would sort them and scramble the category declaration order.
    """
    yaml = YAML()
    yaml.default_flow_style = False
    stream = io.StringIO()
    yaml.dump(dict(data), stream)
    return stream.getvalue()


@dc.dataclass(slots=True)
class SiteLayout:
    """Paths of a temporary site plus helpers to populate it."""

    root: Path

    @property
    def config_path(self) -> Path:
        return self.root / "site.yaml"

    @property
    def content_dir(self) -> Path:
        return self.root / "content"

    @property
    def assets_dir(self) -> Path:
        return self.root / "assets"

    @property
    def output_dir(self) -> Path:
        return self.root / "_site"

    def write_config(
        self,
        *,
        categories: typ.Mapping[str, typ.Any] | None = None,
        site: typ.Mapping[str, typ.Any] | None = None,
        **sections: typ.Any,
    ) -> Path:
        """Write ``site.yaml`` pointing at this layout's directories."""
        settings = {
            "name": "Test Cookies",
            "content_dir": str(self.content_dir),
            "assets_dir": str(self.assets_dir),
            "output_dir": str(self.output_dir),
        }
        settings.update(site or {})
        payload: dict[str, typ.Any] = {"site": settings, **sections}
        if categories is not None:
            payload["categories"] = dict(categories)
        self.config_path.write_text(dump_yaml(payload), encoding="utf-8")
        return self.config_path

    def write_article(
        self, stem: str, *, body: str = "Body text.\n", **front_matter: typ.Any
    ) -> Path:
        """Write ``content/<stem>.md`` with the given front matter."""
        path = self.content_dir / f"{stem}.md"
        path.parent.mkdir(parents=True, exist_ok=True)
        header = dump_yaml(front_matter) if front_matter else ""
        path.write_text(f"---\n{header}---\n{body}", encoding="utf-8")
        return path

    def write_python_site(self, *, sectioned: bool = True, **site: typ.Any) -> None:
        """Write a five-article ``python`` category, optionally sectioned.

        Sectioned, ``Basics`` holds Intro, then Setup and Editors in group 1,
        then Variables in group 2; ``Advanced`` holds Classes.
        """
        category: dict[str, typ.Any] = {
            "title": "Python",
            "intro": "Learn *Python* from scratch.",
        }
        if sectioned:
            category["sections"] = [
                {"title": "Basics", "groups": {1: "Week 1", 2: "Week 2"}},
                {"title": "Advanced"},
            ]
        self.write_config(categories={"python": category}, site=site)
        articles: list[tuple[str, str, dict[str, int]]] = [
            ("python/01-intro", "Intro", {"section_index": 0}),
            ("python/02-setup", "Setup", {"section_index": 0, "group_index": 1}),
            ("python/03-editors", "Editors", {"section_index": 0, "group_index": 1}),
            (
                "python/04-variables",
                "Variables",
                {"section_index": 0, "group_index": 2},
            ),
            ("python/05-classes", "Classes", {"section_index": 1}),
        ]
        for stem, title, placement in articles:
            self.write_article(
                stem, title=title, tags="python", **(placement if sectioned else {})
            )

    def load(self) -> SiteConfig:
        return load_site_config(self.config_path)

    def build(self) -> BuildResult:
        """Load the config and build the site into ``output_dir``."""
        return SiteBuilder(self.load()).run()


@pytest.fixture
def site_layout(tmp_path: Path) -> SiteLayout:
    """Return an empty site layout rooted in ``tmp_path``."""
    layout = SiteLayout(tmp_path)
    layout.content_dir.mkdir()
    return layout
