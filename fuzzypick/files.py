"""Directory walking that skips build and tooling directories."""

from __future__ import annotations

import logging
import os
import stat
import threading
import time
from collections.abc import Iterator

log = logging.getLogger(__name__)

IGNORED_PATHS = frozenset(
    {
        "node_modules",
        ".git",
        "dist",
        "build",
        ".next",
        "target",
        "bin",
        "obj",
        "vendor",
        ".idea",
        ".vscode",
        "__pycache__",
        ".astro",
        ".cache",
        ".vercel",
        ".netlify",
        ".github",
        ".wrangler",
        ".svelte-kit",
        ".pnpm-store",
        ".venv",
    }
)


def should_skip(name: str) -> bool:
    """Return True if a directory with this name is not descended into."""
    return name in IGNORED_PATHS


def walk_files(root: str | os.PathLike[str]) -> Iterator[str]:
    """Yield the paths of all files under ``root``, relative to it, in lexical order.

    Raises FileNotFoundError at once if ``root`` does not exist.
    """
    root = os.fspath(root)
    os.stat(root)
    return _walk(root)


def _walk(root: str) -> Iterator[str]:
    info = os.lstat(root)
    if not stat.S_ISDIR(info.st_mode):
        yield os.curdir
        return
    if should_skip(os.path.basename(os.path.normpath(root))):
        return
    yield from _walk_dir(root, "")


def _walk_dir(path: str, relative: str) -> Iterator[str]:
    try:
        with os.scandir(path) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as exc:
        log.warning("Error occurred while traversing: %s", exc)
        return

    for entry in entries:
        rel_path = os.path.join(relative, entry.name) if relative else entry.name
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as exc:
            log.warning("Error occurred while traversing: %s", exc)
            continue
        if is_dir:
            if not should_skip(entry.name):
                yield from _walk_dir(entry.path, rel_path)
        else:
            yield rel_path


class FileCollector:
    """Collects file paths under a root in a background thread."""

    def __init__(self, root: str | os.PathLike[str]) -> None:
        self.root = os.fspath(root)
        os.stat(self.root)
        self._files: list[str] = []
        self._lock = threading.Lock()
        self._done = threading.Event()
        self._thread: threading.Thread | None = None

    def start(self) -> FileCollector:
        """Begin walking in the background; calling it again has no effect."""
        if self._thread is None:
            self._thread = threading.Thread(target=self._collect, daemon=True)
            self._thread.start()
        return self

    def _collect(self) -> None:
        started = time.perf_counter()
        try:
            for path in _walk(self.root):
                with self._lock:
                    self._files.append(path)
        except OSError as exc:
            log.warning("Walk error: %s", exc)
        finally:
            self._done.set()
        elapsed = time.perf_counter() - started
        count = len(self._files)
        rate = count / elapsed if elapsed > 0 else float(count)
        log.info("Processed %d files in %.3fs (%.2f files/sec)", count, elapsed, rate)

    def snapshot(self) -> list[str]:
        """Return a copy of the paths found so far."""
        with self._lock:
            return list(self._files)

    def batches(self, interval: float = 0.005) -> Iterator[list[str]]:
        """Yield growing snapshots every ``interval`` seconds until the walk ends.

        The last snapshot holds every path found; nothing is yielded when the
        walk finds no files.
        """
        self.start()
        sent = 0
        while not self._done.wait(interval):
            files = self.snapshot()
            if len(files) > sent:
                sent = len(files)
                log.debug("Sent %d files", sent)
                yield files
        files = self.snapshot()
        if files:
            yield files