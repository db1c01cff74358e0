r"""Split YAML front matter from markdown article sources.

Example
-------
>>> from cookie_pages.content.front_matter import split_front_matter
>>> meta, body = split_front_matter("---\ntitle: Intro\n---\n# Hi\n")
>>> meta["title"], body
('Intro', '# Hi\n')
"""

from __future__ import annotations

import re
import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)(?:\r?\n)?^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE
)


class FrontMatterError(ValueError):
    """Raised when the front matter block is not a YAML mapping."""


def _yaml_loader() -> YAML:
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    return loader


def parse_yaml_mapping(text: str) -> dict[str, typ.Any]:
    """Parse ``text`` as YAML and return it as a dict; empty input yields ``{}``."""
    try:
        loaded = _yaml_loader().load(text)
    except YAMLError as exc:
        msg = f"invalid YAML: {exc}"
        raise FrontMatterError(msg) from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        msg = "front matter must be a YAML mapping"
        raise FrontMatterError(msg)
    return {str(key): value for key, value in loaded.items()}


def split_front_matter(text: str) -> tuple[dict[str, typ.Any], str]:
    """Return ``(metadata, body)`` for a markdown document.

    Parameters
    ----------
    text : str
        Full file contents. Front matter is recognised only when the document
        starts with a ``---`` line and a closing ``---`` line follows.

    Returns
    -------
    tuple[dict[str, Any], str]
        The parsed metadata mapping (empty when there is no front matter) and
        the remaining markdown body.

    Raises
    ------
    FrontMatterError
        If the front matter is not valid YAML or not a mapping.
    """
    match = FRONT_MATTER_PATTERN.match(text)
    if match is None:
        return {}, text
    metadata = parse_yaml_mapping(match.group(1))
    return metadata, text[match.end() :]


__all__ = ["FrontMatterError", "parse_yaml_mapping", "split_front_matter"]
