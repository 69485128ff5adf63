from __future__ import annotations

import os
import stat
from collections.abc import Mapping

from ._path import check_path

# ---------------------------------------------------------------------------
#  In-memory tree
# ---------------------------------------------------------------------------


class DirNode:
    __slots__ = ("children",)

    def __init__(self) -> None:
        self.children: dict[str, Node] = {}


class FileNode:
    __slots__ = ("data",)

    def __init__(self, data: bytes) -> None:
        self.data: bytes = data


Node = DirNode | FileNode


class MapFS:
    """A read-mostly in-memory filesystem for use with :func:`dglob.glob_fs`.

    *files* maps unrooted paths to file contents; a key ending in ``/``
    creates an (empty) directory. Parent directories are created on demand.

    Example::

        fsys = MapFS({"a/x.txt": b"", "a/b/y.txt": b"", "empty/": b""})
    """

    def __init__(self, files: Mapping[str, bytes] | None = None) -> None:
        self._root = DirNode()
        for path, data in (files or {}).items():
            if path.endswith("/"):
                self.mkdir(path[:-1], exist_ok=True)
            else:
                self.write_bytes(path, data)

    # -- path helpers --

    def _resolve_path(self, path: str) -> Node | None:
        if path == ".":
            return self._root
        current: Node = self._root
        for part in path.split("/"):
            if not isinstance(current, DirNode):
                return None
            child = current.children.get(part)
            if child is None:
                return None
            current = child
        return current

    def _makedirs(self, path: str) -> DirNode:
        current = self._root
        if path == ".":
            return current
        for part in path.split("/"):
            child = current.children.get(part)
            if child is None:
                child = DirNode()
                current.children[part] = child
            elif not isinstance(child, DirNode):
                raise FileExistsError(f"Not a directory: '{path}'")
            current = child
        return current

    # -- mutation --

    def mkdir(self, path: str, exist_ok: bool = False) -> None:
        check_path(path)
        node = self._resolve_path(path)
        if node is not None:
            if isinstance(node, DirNode) and exist_ok:
                return
            raise FileExistsError(f"File exists: '{path}'")
        self._makedirs(path)

    def write_bytes(self, path: str, data: bytes) -> None:
        check_path(path)
        if path == ".":
            raise IsADirectoryError(f"Is a directory: '{path}'")
        parent_path, _, name = path.rpartition("/")
        parent = self._makedirs(parent_path or ".")
        if isinstance(parent.children.get(name), DirNode):
            raise IsADirectoryError(f"Is a directory: '{path}'")
        parent.children[name] = FileNode(bytes(data))

    # -- queries --

    def read_bytes(self, path: str) -> bytes:
        node = self._resolve_path(check_path(path))
        if node is None:
            raise FileNotFoundError(f"No such file: '{path}'")
        if isinstance(node, DirNode):
            raise IsADirectoryError(f"Is a directory: '{path}'")
        return node.data

    def listdir(self, path: str) -> list[str]:
        node = self._resolve_path(check_path(path))
        if node is None:
            raise FileNotFoundError(f"No such directory: '{path}'")
        if not isinstance(node, DirNode):
            raise NotADirectoryError(f"Not a directory: '{path}'")
        return list(node.children.keys())

    def exists(self, path: str) -> bool:
        try:
            return self._resolve_path(check_path(path)) is not None
        except ValueError:
            return False

    def is_dir(self, path: str) -> bool:
        try:
            return isinstance(self._resolve_path(check_path(path)), DirNode)
        except ValueError:
            return False

    def is_file(self, path: str) -> bool:
        try:
            return isinstance(self._resolve_path(check_path(path)), FileNode)
        except ValueError:
            return False


# ---------------------------------------------------------------------------
#  OS directory
# ---------------------------------------------------------------------------


class DirFS:
    """Expose the directory tree rooted at *root* as a read-only filesystem."""

    def __init__(self, root: str | os.PathLike[str]) -> None:
        self.root: str = os.fspath(root)

    def _os_path(self, path: str) -> str:
        check_path(path)
        if path == ".":
            return self.root
        return os.path.join(self.root, *path.split("/"))

    def listdir(self, path: str) -> list[str]:
        return os.listdir(self._os_path(path))

    def exists(self, path: str) -> bool:
        try:
            return os.path.lexists(self._os_path(path))
        except ValueError:
            return False

    def is_dir(self, path: str) -> bool:
        try:
            st = os.lstat(self._os_path(path))
        except (OSError, ValueError):
            return False
        return stat.S_ISDIR(st.st_mode)

    def __repr__(self) -> str:
        return f"DirFS({self.root!r})"
