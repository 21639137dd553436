"""Pure helpers for hierarchical node paths.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic, and trivially unit-testable.

A valid path starts with ``/``, is made of non-empty ``/``-separated
segments and never ends with ``/``.  The root path ``/`` is the only
path allowed to end with the separator.
"""

from __future__ import annotations

from zkcli.exceptions import InvalidPathError

SEPARATOR: str = "/"
ROOT: str = "/"


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def validate_path(path: str) -> str:
    """Return *path* unchanged, or raise :class:`InvalidPathError`."""
    if not path:
        raise InvalidPathError("Path must not be empty.", path=path)
    if not path.startswith(SEPARATOR):
        raise InvalidPathError(
            f"Path must be absolute: {path}",
            hint="Paths start with '/', e.g. /config/service",
            path=path,
        )
    if path == ROOT:
        return path
    if path.endswith(SEPARATOR):
        raise InvalidPathError(
            f"Path must not end with '/': {path}",
            path=path,
        )
    if "" in path[1:].split(SEPARATOR):
        raise InvalidPathError(
            f"Path contains an empty segment: {path}",
            path=path,
        )
    return path


# ---------------------------------------------------------------------------
# Split / join
# ---------------------------------------------------------------------------

def split_path(path: str) -> tuple[str, ...]:
    """Return the segments of *path*; the root path has none."""
    if path == ROOT:
        return ()
    return tuple(path[1:].split(SEPARATOR))


def join_path(parent: str, name: str) -> str:
    """Append a single child *name* to the absolute *parent* path."""
    if parent == ROOT:
        return ROOT + name
    return parent + SEPARATOR + name


def join_relative(prefix: str, name: str) -> str:
    """Append *name* to a relative path; an empty *prefix* yields *name*."""
    if not prefix:
        return name
    return prefix + SEPARATOR + name


def parent_path(path: str) -> str:
    """Return the parent of *path*; the parent of a top-level node is ``/``."""
    segments = split_path(path)
    if len(segments) <= 1:
        return ROOT
    return SEPARATOR + SEPARATOR.join(segments[:-1])


# ---------------------------------------------------------------------------
# Ancestors
# ---------------------------------------------------------------------------

def ancestor_paths(path: str) -> list[str]:
    """Return the ancestors of *path* top-down, excluding root and *path*.

    ``ancestor_paths("/a/b/c")`` is ``["/a", "/a/b"]``.
    """
    result: list[str] = []
    current = parent_path(path)
    while current != ROOT:
        result.append(current)
        current = parent_path(current)
    result.reverse()
    return result
