from __future__ import annotations

import logging
from collections.abc import Iterable

from ._backend import FSBackend, OSBackend
from ._path import strip_trailing_sep
from ._typing import GlobBackend, ReadDirFS

logger = logging.getLogger(__name__)

RECURSIVE_MARKER = "**"


class Globs(tuple):
    """A glob pattern split into fragments on every ``**``.

    Adjacent fragments are joined by zero or more directory levels.
    """

    __slots__ = ()

    @classmethod
    def from_pattern(cls, pattern: str) -> Globs:
        return cls(pattern.split(RECURSIVE_MARKER))

    def expand(self, *, include_hidden: bool = False) -> list[str]:
        """Find matches on the native filesystem."""
        return expand_segments(self, OSBackend(include_hidden=include_hidden))

    def expand_fs(self, fsys: ReadDirFS) -> list[str]:
        """Find matches on the abstract filesystem *fsys*."""
        return expand_segments(self, FSBackend(fsys))

    def __repr__(self) -> str:
        return f"Globs({list(self)!r})"


def split_pattern(pattern: str) -> Globs:
    return Globs.from_pattern(pattern)


def _probe(prefix: str, fragment: str, separators: tuple[str, ...]) -> str:
    # Frontier paths are not escaped: a directory named "[x]" acts as a
    # character class in the next probe
    pattern = prefix + fragment
    # An empty pattern lists the current directory
    if not pattern:
        return "*"
    return strip_trailing_sep(pattern, separators)


def expand_segments(
    segments: Iterable[str] | None, backend: GlobBackend
) -> list[str]:
    """Expand *segments* against *backend*.

    Each fragment is matched below every path of the current frontier and
    every match is walked recursively; the walked paths, deduplicated within
    the step, become the next frontier. Errors from the backend propagate and
    nothing is returned.
    """
    fragments = list(segments) if segments is not None else []
    if not fragments:
        return []

    matches: list[str] = [""]
    for fragment in fragments:
        hits: list[str] = []
        seen: set[str] = set()
        for prefix in matches:
            pattern = _probe(prefix, fragment, backend.separators)
            for path in backend.match(pattern):
                for found in backend.walk(path):
                    if found not in seen:
                        seen.add(found)
                        hits.append(found)
        logger.debug(
            "[dglob.step] fragment=%r probes=%d hits=%d",
            fragment,
            len(matches),
            len(hits),
        )
        matches = hits
    return matches
