"""Property-based tests using Hypothesis."""
import pytest

try:
    from hypothesis import given, settings
    import hypothesis.strategies as st
    HAS_HYPOTHESIS = True
except ImportError:
    HAS_HYPOTHESIS = False

from dglob import FSBackend, MapFS, glob_fs, split_pattern
from dglob._path import valid_path

pytestmark = pytest.mark.skipif(not HAS_HYPOTHESIS, reason="hypothesis not installed")

if HAS_HYPOTHESIS:
    segment = st.sampled_from(["a", "b", "x", "y.txt"])
    file_path = st.lists(segment, min_size=1, max_size=4).map("/".join)
    file_sets = st.lists(file_path, min_size=1, max_size=12)
else:
    file_sets = None


def build(paths):
    """Build a MapFS from *paths*, skipping entries that clash with earlier ones."""
    fsys = MapFS()
    written = []
    for path in paths:
        try:
            fsys.write_bytes(path, b"")
        except (FileExistsError, IsADirectoryError):
            continue
        written.append(path)
    return fsys, written


def all_paths(written):
    found = set()
    for path in written:
        parts = path.split("/")
        for i in range(1, len(parts) + 1):
            found.add("/".join(parts[:i]))
    return found


@given(paths=file_sets)
@settings(max_examples=60)
def test_marker_only_yields_every_path_once(paths):
    fsys, written = build(paths)
    result = glob_fs(fsys, "**")
    assert len(result) == len(set(result))
    assert set(result) == all_paths(written)


@given(paths=file_sets)
@settings(max_examples=60)
def test_results_are_existing_valid_paths(paths):
    fsys, _ = build(paths)
    for path in glob_fs(fsys, "**/*.txt"):
        assert valid_path(path)
        assert fsys.exists(path)


@given(paths=file_sets, pattern=st.sampled_from(["*", "a/*", "*/x", "a/?", "*/*.txt"]))
@settings(max_examples=60)
def test_fast_path_equivalence(paths, pattern):
    fsys, _ = build(paths)
    assert glob_fs(fsys, pattern) == FSBackend(fsys).match(pattern)


@given(paths=file_sets)
@settings(max_examples=60)
def test_recursive_literal_is_union_over_descendants(paths):
    fsys, written = build(paths)
    everything = all_paths(written)
    anchors = {p for p in everything if p == "a/x" or (p.startswith("a/") and p.endswith("/x"))}
    expected = {p for p in everything if any(p == m or p.startswith(m + "/") for m in anchors)}
    result = glob_fs(fsys, "a/**/x")
    assert len(result) == len(set(result))
    assert set(result) == expected


@given(paths=file_sets)
@settings(max_examples=40)
def test_adjacent_markers_equal_single(paths):
    fsys, _ = build(paths)
    assert glob_fs(fsys, "a/**/**/x") == glob_fs(fsys, "a/**/x")


@given(paths=file_sets, pattern=st.sampled_from(["**", "a/**", "**/x", "a/**/*.txt"]))
@settings(max_examples=40)
def test_idempotent(paths, pattern):
    fsys, _ = build(paths)
    assert glob_fs(fsys, pattern) == glob_fs(fsys, pattern)


@given(pattern=st.text(alphabet="ab/*?", max_size=12))
@settings(max_examples=60)
def test_split_rejoins_to_pattern(pattern):
    assert "**".join(split_pattern(pattern)) == pattern
