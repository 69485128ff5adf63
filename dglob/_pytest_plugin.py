"""pytest fixture plugin.

Usage::

    # conftest.py
    pytest_plugins = ["dglob._pytest_plugin"]

This makes the ``mapfs`` fixture automatically available::

    def test_something(mapfs):
        mapfs.write_bytes("src/main.py", b"")
        assert glob_fs(mapfs, "**/*.py") == ["src/main.py"]
"""

import pytest

from ._fs import MapFS


@pytest.fixture
def mapfs() -> MapFS:
    """An empty :class:`MapFS`, independent per test (function scope)."""
    return MapFS()
