import pytest
from dglob import MapFS
from dglob._pytest_plugin import mapfs  # noqa: F401

from tests.helpers.trees import SAMPLE_TREE, make_tree


@pytest.fixture
def sample_fs() -> MapFS:
    """root/{a/x.txt, a/b/y.txt, c.txt} held in memory."""
    return MapFS(SAMPLE_TREE)


@pytest.fixture
def sample_root(tmp_path):
    """The same tree as ``sample_fs`` written to disk; returns the ``root`` dir."""
    make_tree(tmp_path, SAMPLE_TREE)
    return tmp_path / "root"
