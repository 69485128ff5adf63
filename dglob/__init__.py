from ._backend import FSBackend, OSBackend
from ._expand import Globs, expand_segments, split_pattern
from ._fs import DirFS, MapFS
from ._glob import expand, expand_fs, glob, glob_fs
from ._typing import GlobBackend, ReadDirFS

__all__ = [
    "glob",
    "glob_fs",
    "expand",
    "expand_fs",
    "expand_segments",
    "split_pattern",
    "Globs",
    "MapFS",
    "DirFS",
    "ReadDirFS",
    "GlobBackend",
    "OSBackend",
    "FSBackend",
]
__version__ = "0.1.0"
