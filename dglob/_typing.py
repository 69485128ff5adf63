from collections.abc import Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class ReadDirFS(Protocol):
    """Read-only filesystem addressed by unrooted, slash-separated paths.

    ``"."`` names the root directory.
    """

    def listdir(self, path: str) -> list[str]: ...

    def is_dir(self, path: str) -> bool: ...

    def exists(self, path: str) -> bool: ...


class GlobBackend(Protocol):
    """A single-level matcher paired with a recursive walker."""

    separators: tuple[str, ...]

    def match(self, pattern: str) -> list[str]: ...

    def walk(self, root: str) -> Iterator[str]: ...
