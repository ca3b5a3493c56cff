"""
Locates an executable inside an extracted archive tree whose layout is not
known in advance.
"""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

log = logging.getLogger(__name__)

BIN_DIR_NAME = "bin"


def _sorted_entries(directory: Path) -> list[os.DirEntry]:
    try:
        with os.scandir(directory) as it:
            return sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        log.debug(f"Skipping unreadable directory '{directory}': {e}")
        return []


def _bin_match(entry: os.DirEntry, name: str) -> Path | None:
    """The bin preference rule: a ``bin`` directory holding the executable wins."""
    if entry.name != BIN_DIR_NAME:
        return None
    candidate = Path(entry.path) / name
    return candidate if candidate.is_file() else None


def iter_executables(root: Path, name: str) -> Iterator[Path]:
    """
    Lazily yields every file called ``name`` under ``root``, depth first.

    Directories are expanded from an explicit stack and their entries are
    visited in sorted order, so the sequence is deterministic. When a
    directory is expanded, a ``bin`` child containing the executable is
    yielded before anything else in it. Symlinked directories are not
    followed.

    Args:
        root: Top of the tree to search.
        name: Exact file name to look for.

    Yields:
        Absolute paths, each at most once.
    """
    root = root.resolve()
    if not root.is_dir():
        return

    seen: set[Path] = set()
    stack = [root]
    while stack:
        directory = stack.pop()
        entries = _sorted_entries(directory)
        subdirs = []

        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                match = _bin_match(entry, name)
                if match and match not in seen:
                    seen.add(match)
                    yield match
                subdirs.append(Path(entry.path))

        for entry in entries:
            if entry.name == name and entry.is_file():
                path = Path(entry.path)
                if path not in seen:
                    seen.add(path)
                    yield path

        # Reversed so the first sorted subdirectory is expanded next
        stack.extend(reversed(subdirs))


def find_executable(root: Path, name: str) -> Path | None:
    """Returns the first match of :func:`iter_executables`, or None."""
    match = next(iter_executables(root, name), None)
    if match:
        log.debug(f"Found '{name}' at '{match}'")
    else:
        log.debug(f"No '{name}' found under '{root}'")
    return match
