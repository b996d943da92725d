import pytest

from stormurl.paths import directory_of, remove_dot_segments, resolve_path


@pytest.mark.paths
@pytest.mark.parametrize(
    "path,expected",
    [
        ("/a/b/c/./../../g", "/a/g"),
        ("mid/content=5/../6", "mid/6"),
        ("/../a", "/a"),
        ("/a/b/..", "/a/"),
        ("/a/b/.", "/a/b/"),
        (".", ""),
        ("../a", "a"),
        (
            "/path/to/page/../../../another/location/no-replace/",
            "/another/location/no-replace/",
        ),
        ("/no/dots", "/no/dots"),
    ],
)
def test_remove_dot_segments(path: str, expected: str) -> None:
    assert remove_dot_segments(path) == expected


@pytest.mark.paths
def test_directory_of() -> None:
    assert directory_of("/foo/bar") == "/foo/"
    assert directory_of("/foo/bar/") == "/foo/bar/"
    assert directory_of("page") == ""


@pytest.mark.paths
@pytest.mark.parametrize(
    "base,replacement,join,expected",
    [
        ("/foo/bar", "./baz", True, "/foo/baz"),
        ("/foo/bar/", "../baz", True, "/foo/baz"),
        ("/foo/bar/", "./../baz", True, "/foo/baz"),
        ("/path/to/page/", "/another/location/second", True, "/another/location/second"),
        ("/path/to/page/", "../another/location/", True, "/path/to/another/location/"),
        ("/another/location", "../../path/to/page", True, "/path/to/page"),
        ("/foo/bar", "baz", False, "baz"),
        ("/a/./b", None, False, "/a/b"),
        (None, "x", True, "x"),
        ("page", "other", True, "other"),
    ],
    ids=(
        "join_single_dot",
        "join_double_dot",
        "join_multiple_dots",
        "join_absolute",
        "join_keeps_trailing_slash",
        "join_onto_file",
        "replace_relative",
        "no_replacement",
        "no_base",
        "relative_base",
    ),
)
def test_resolve_path(
    base: str | None, replacement: str | None, join: bool, expected: str
) -> None:
    assert resolve_path(base, replacement, join) == expected
