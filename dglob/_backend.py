from __future__ import annotations

import fnmatch
import glob as _glob
import os
import posixpath
import stat
from collections.abc import Iterator

from ._path import has_magic, join, valid_path
from ._typing import ReadDirFS

# ---------------------------------------------------------------------------
#  Native filesystem
# ---------------------------------------------------------------------------


class OSBackend:
    def __init__(self, include_hidden: bool = False) -> None:
        self.include_hidden: bool = include_hidden
        self.separators: tuple[str, ...] = tuple(
            s for s in (os.sep, os.altsep) if s
        )

    def match(self, pattern: str) -> list[str]:
        """Return the sorted single-level matches of *pattern*."""
        return sorted(_glob.glob(pattern, include_hidden=self.include_hidden))

    def walk(self, root: str) -> Iterator[str]:
        """Yield *root* and every path below it, depth-first in name order.

        Symbolic links are reported but never descended into.
        """
        st = os.lstat(root)
        yield root
        if stat.S_ISDIR(st.st_mode):
            yield from self._walk_dir(root)

    def _walk_dir(self, dir_path: str) -> Iterator[str]:
        with os.scandir(dir_path) as it:
            entries = sorted((e.name, e.is_dir(follow_symlinks=False)) for e in it)
        parent = os.path.normpath(dir_path)
        for name, is_dir in entries:
            child_path = os.path.join(parent, name)
            yield child_path
            if is_dir:
                yield from self._walk_dir(child_path)


# ---------------------------------------------------------------------------
#  Abstract filesystem
# ---------------------------------------------------------------------------


class FSBackend:
    separators: tuple[str, ...] = ("/",)

    def __init__(self, fsys: ReadDirFS) -> None:
        self.fsys = fsys

    def match(self, pattern: str) -> list[str]:
        if not has_magic(pattern):
            if valid_path(pattern) and self.fsys.exists(pattern):
                return [pattern]
            return []
        dirname, basename = posixpath.split(pattern)
        if not dirname:
            dirname = "."
        if has_magic(dirname):
            dirs = self.match(dirname)
        else:
            dirs = [dirname]
        matches: list[str] = []
        for d in dirs:
            matches.extend(self._match_in_dir(d, basename))
        return matches

    def _match_in_dir(self, dirname: str, pattern: str) -> list[str]:
        if not valid_path(dirname):
            return []
        try:
            names = self.fsys.listdir(dirname)
        except (FileNotFoundError, NotADirectoryError):
            return []
        return [
            join(dirname, name)
            for name in sorted(names)
            if fnmatch.fnmatchcase(name, pattern)
        ]

    def walk(self, root: str) -> Iterator[str]:
        if not self.fsys.exists(root):
            raise FileNotFoundError(f"No such file or directory: '{root}'")
        yield root
        if self.fsys.is_dir(root):
            yield from self._walk_dir(root)

    def _walk_dir(self, dir_path: str) -> Iterator[str]:
        for name in sorted(self.fsys.listdir(dir_path)):
            child_path = join(dir_path, name)
            yield child_path
            if self.fsys.is_dir(child_path):
                yield from self._walk_dir(child_path)
