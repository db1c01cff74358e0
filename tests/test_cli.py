"""Tests for the ``cookie-pages`` command functions.

The Cyclopts commands are plain functions, so these tests call them directly
and inspect stdout/stderr with ``capsys``. ``serve`` is exercised with
``serve_site`` patched out via pytest-mock so no socket is opened.
"""

from __future__ import annotations

import typing as typ

import pytest

from cookie_pages import cli
from cookie_pages.pages.base import DEFAULT_TEMPLATES_DIR

if typ.TYPE_CHECKING:
    from pytest_mock import MockerFixture

    from conftest import SiteLayout


def test_build_reports_written_paths(
    site_layout: SiteLayout,
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Paths are printed relative to the working directory."""
    site_layout.write_python_site()
    monkeypatch.chdir(site_layout.root)
    cli.build(config=site_layout.config_path)
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "wrote _site/index.html", f"unexpected first line {lines[0]!r}"
    assert "wrote _site/python/03-editors/index.html" in lines
    assert "wrote _site/404.html" in lines
    assert lines[-1] == "skipped sitemap (no site url configured)"


def test_build_applies_overrides(
    site_layout: SiteLayout, capsys: pytest.CaptureFixture[str]
) -> None:
    site_layout.write_python_site()
    target = site_layout.root / "dist"
    cli.build(
        config=site_layout.config_path,
        output_dir=target,
        site_url="https://cookies.example",
    )
    out = capsys.readouterr().out
    assert (target / "sitemap.xml").exists()
    assert not site_layout.output_dir.exists(), "configured output_dir was ignored"
    assert "skipped sitemap" not in out
    sitemap = (target / "sitemap.xml").read_text(encoding="utf-8")
    assert "<loc>https://cookies.example/python/</loc>" in sitemap


@pytest.mark.parametrize(
    ("site", "message"),
    [
        ({"url": "example.com"}, "absolute http(s) URL"),
        ({}, "not found"),
    ],
)
def test_build_reports_errors_and_exits(
    site_layout: SiteLayout,
    capsys: pytest.CaptureFixture[str],
    site: dict[str, str],
    message: str,
) -> None:
    """Invalid configuration exits with status 1 and a one-line error."""
    if site:
        site_layout.write_config(site=site)
        config_path = site_layout.config_path
    else:
        config_path = site_layout.root / "missing.yaml"
    with pytest.raises(SystemExit) as excinfo:
        cli.build(config=config_path)
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert captured.err.startswith("error: ")
    assert message in captured.err
    assert captured.out == ""


def test_serve_builds_then_hands_over_to_the_server(
    site_layout: SiteLayout,
    capsys: pytest.CaptureFixture[str],
    mocker: MockerFixture,
) -> None:
    site_layout.write_python_site()
    serve_site = mocker.patch("cookie_pages.cli.serve_site")
    cli.serve(config=site_layout.config_path, host="0.0.0.0", port=9000, interval=0.5)

    assert (site_layout.output_dir / "index.html").exists(), "initial build ran"
    serve_site.assert_called_once()
    kwargs = serve_site.call_args.kwargs
    assert kwargs["output_dir"] == site_layout.output_dir
    assert kwargs["watch_paths"] == [
        site_layout.config_path,
        site_layout.content_dir,
        site_layout.assets_dir,
        DEFAULT_TEMPLATES_DIR,
    ]
    actual = (kwargs["host"], kwargs["port"], kwargs["interval"])
    assert actual == ("0.0.0.0", 9000, 0.5)

    capsys.readouterr()
    site_layout.write_article("python/06-new", title="New", tags="python")
    kwargs["rebuild"]()
    assert (site_layout.output_dir / "python" / "06-new" / "index.html").exists()
    assert "06-new" in capsys.readouterr().out


def test_serve_exits_when_the_first_build_fails(
    site_layout: SiteLayout,
    capsys: pytest.CaptureFixture[str],
    mocker: MockerFixture,
) -> None:
    site_layout.write_python_site()
    site_layout.write_article(
        "python/07-bad", title="Bad", tags="python", group_index=1
    )
    serve_site = mocker.patch("cookie_pages.cli.serve_site")
    with pytest.raises(SystemExit) as excinfo:
        cli.serve(config=site_layout.config_path)
    assert excinfo.value.code == 1
    assert "requires a 'section_index'" in capsys.readouterr().err
    serve_site.assert_not_called()


def test_app_is_named_after_the_console_script() -> None:
    assert cli.app.name[0] == "cookie-pages"
