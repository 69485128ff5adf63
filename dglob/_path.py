_MAGIC = frozenset("*?[")


def has_magic(pattern: str) -> bool:
    return any(c in _MAGIC for c in pattern)


def valid_path(name: str) -> bool:
    """Report whether *name* is a usable abstract-filesystem path.

    Paths are unrooted and slash-separated. ``"."`` is the root; otherwise
    no element may be empty, ``.`` or ``..``.
    """
    if name == ".":
        return True
    if not name:
        return False
    return all(part not in ("", ".", "..") for part in name.split("/"))


def check_path(name: str) -> str:
    if not valid_path(name):
        raise ValueError(f"Invalid path: '{name}'")
    return name


def join(dirname: str, name: str) -> str:
    if dirname == ".":
        return name
    return dirname + "/" + name


def strip_trailing_sep(pattern: str, separators: tuple[str, ...]) -> str:
    """Drop one trailing separator unless *pattern* names a root.

    ``"/"`` and drive roots such as ``"C:\\"`` are returned unchanged.
    """
    if not pattern or pattern[-1] not in separators:
        return pattern
    head = pattern.rstrip("".join(separators))
    if not head:
        return pattern
    if "\\" in separators and len(head) == 2 and head[1] == ":":
        return pattern
    return pattern[:-1]
