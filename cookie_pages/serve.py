"""Local preview server that rebuilds the site when sources change.

The server serves the output directory over HTTP on a background thread while
the calling thread polls the content, assets, templates, and config file for
modification-time changes. Any change triggers a rebuild; a failed rebuild is
reported and the last good output keeps being served.

Example
-------
>>> from pathlib import Path
>>> from cookie_pages.serve import serve_site
>>> serve_site(  # doctest: +SKIP
...     rebuild=lambda: None,
...     output_dir=Path("_site"),
...     watch_paths=[Path("content")],
... )
"""

from __future__ import annotations

import functools
import threading
import typing as typ
from http import HTTPStatus
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path

from cookie_pages._constants import NOT_FOUND_FILENAME

if typ.TYPE_CHECKING:
    import collections.abc as cabc

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
DEFAULT_INTERVAL = 1.0


class SiteRequestHandler(SimpleHTTPRequestHandler):
    """Serve the built site, answering unknown paths with the site's 404 page."""

    def send_error(
        self, code: int, message: str | None = None, explain: str | None = None
    ) -> None:
        """Serve ``404.html`` for missing files when the build produced one."""
        not_found = Path(self.directory) / NOT_FOUND_FILENAME
        if code != HTTPStatus.NOT_FOUND or not not_found.is_file():
            super().send_error(code, message, explain)
            return
        body = not_found.read_bytes()
        self.send_response(HTTPStatus.NOT_FOUND, message)
        self.send_header("Content-Type", "text/html; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        if self.command != "HEAD":
            self.wfile.write(body)

    def log_message(self, format: str, *args: typ.Any) -> None:  # noqa: A002
        """Keep request logging out of the rebuild output."""


class ChangeWatcher:
    """Detect file additions, removals, and edits below a set of paths."""

    def __init__(self, paths: cabc.Iterable[Path]) -> None:
        self.paths = list(paths)
        self._snapshot = self.snapshot()

    def snapshot(self) -> dict[Path, float]:
        """Return the modification time of every file below the watched paths."""
        stamps: dict[Path, float] = {}
        for root in self.paths:
            if root.is_file():
                candidates: cabc.Iterable[Path] = [root]
            elif root.is_dir():
                candidates = (path for path in root.rglob("*") if path.is_file())
            else:
                continue
            for path in candidates:
                try:
                    stamps[path] = path.stat().st_mtime
                except FileNotFoundError:
                    continue
        return stamps

    def changed(self) -> bool:
        """Return True when anything changed since the previous call."""
        current = self.snapshot()
        if current == self._snapshot:
            return False
        self._snapshot = current
        return True


def make_server(output_dir: Path, host: str, port: int) -> ThreadingHTTPServer:
    """Return an HTTP server bound to ``host:port`` serving ``output_dir``."""
    handler = functools.partial(SiteRequestHandler, directory=str(output_dir))
    return ThreadingHTTPServer((host, port), handler)


def serve_site(
    *,
    rebuild: cabc.Callable[[], object],
    output_dir: Path,
    watch_paths: cabc.Iterable[Path],
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    interval: float = DEFAULT_INTERVAL,
    report: cabc.Callable[[str], None] = print,
    stop: threading.Event | None = None,
) -> None:
    """Serve ``output_dir`` and call ``rebuild`` whenever a watched file changes.

    Parameters
    ----------
    rebuild : Callable[[], object]
        Builds the site into ``output_dir``. Exceptions it raises are reported
        through ``report`` and do not stop the server.
    output_dir : Path
        Directory served over HTTP.
    watch_paths : Iterable[Path]
        Files and directories whose changes trigger a rebuild.
    host, port : str, int
        Address the HTTP server binds to.
    interval : float
        Seconds between change polls.
    report : Callable[[str], None]
        Receives human-readable status lines.
    stop : threading.Event, optional
        When set, the polling loop exits and the server shuts down. Without it
        the loop runs until interrupted.
    """
    stop = stop or threading.Event()
    watcher = ChangeWatcher(watch_paths)
    server = make_server(output_dir, host, port)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    bound_host, bound_port = server.server_address[:2]
    report(f"serving {output_dir} at http://{bound_host}:{bound_port}/")
    try:
        while not stop.wait(interval):
            if not watcher.changed():
                continue
            report("rebuilding after change")
            try:
                rebuild()
            except Exception as exc:  # noqa: BLE001 - keep serving the last good build
                report(f"build failed: {exc}")
    except KeyboardInterrupt:
        report("server stopped")
    finally:
        server.shutdown()
        server.server_close()
        thread.join()


__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_INTERVAL",
    "DEFAULT_PORT",
    "ChangeWatcher",
    "SiteRequestHandler",
    "make_server",
    "serve_site",
]
