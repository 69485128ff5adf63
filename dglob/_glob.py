"""Double-star aware replacements for single-level glob functions.

``**`` matches zero or more directory levels, as in ``.gitignore`` files
and zsh. Patterns without it are handed to the plain matcher unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ._backend import FSBackend, OSBackend
from ._expand import RECURSIVE_MARKER, expand_segments, split_pattern
from ._typing import ReadDirFS

logger = logging.getLogger(__name__)


def glob(pattern: str, *, include_hidden: bool = False) -> list[str]:
    """Return the paths on the native filesystem matching *pattern*.

    Unless *include_hidden* is set, wildcards skip dot-files, but the
    recursive walk below a match does not: ``glob("**")`` omits a top-level
    ``.cache`` yet reports ``src/.cache``.
    """
    backend = OSBackend(include_hidden=include_hidden)
    if RECURSIVE_MARKER not in pattern:
        logger.debug("[dglob.passthrough] pattern=%r", pattern)
        return backend.match(pattern)
    return expand_segments(split_pattern(pattern), backend)


def glob_fs(fsys: ReadDirFS, pattern: str) -> list[str]:
    """Return the paths of *fsys* matching *pattern*.

    Patterns without ``**`` are matched against *fsys* as well, never
    against the native filesystem.
    """
    backend = FSBackend(fsys)
    if RECURSIVE_MARKER not in pattern:
        logger.debug(
            "[dglob.passthrough] pattern=%r fs=%s", pattern, type(fsys).__name__
        )
        return backend.match(pattern)
    return expand_segments(split_pattern(pattern), backend)


def expand(
    segments: Iterable[str] | None, *, include_hidden: bool = False
) -> list[str]:
    return expand_segments(segments, OSBackend(include_hidden=include_hidden))


def expand_fs(fsys: ReadDirFS, segments: Iterable[str] | None) -> list[str]:
    return expand_segments(segments, FSBackend(fsys))
