"""
Path Resolution
===============

Removal of dot-segments and joining of relative paths onto a base path as
described in RFC 3986 sections 5.2.3 and 5.2.4.

"""


def remove_dot_segments(path: str) -> str:
    """Remove '.' and '..' segments from a path

    Segments are processed left to right, a '..' removes the preceding
    segment and is dropped on its own if there is nothing to remove so
    the result never escapes the root. A trailing '/' left behind by a
    removed segment is kept.

    Parameters
    ----------
    path : str
        path possibly containing dot-segments

    Returns
    -------
    str
        path with all dot-segments resolved

    Examples
    --------
    >>> remove_dot_segments("/a/b/c/./../../g")
    '/a/g'
    >>> remove_dot_segments("/../a")
    '/a'
    """
    _result: str = ""
    while path:
        if path.startswith("./") or path.startswith("../"):
            _, _, path = path.partition("/")
        elif path.startswith("/./") or path == "/.":
            path = f"/{path[len('/./') :]}"
        elif path.startswith("/../") or path == "/..":
            path = f"/{path[len('/../') :]}"
            _result, _, _ = _result.rpartition("/")
        elif path in (".", ".."):
            path = ""
        else:
            if path.startswith("/"):
                path = path[1:]
                _result += "/"
            _segment, _slash, _rest = path.partition("/")
            path = _slash + _rest
            _result += _segment
    return _result


def directory_of(path: str) -> str:
    """Return the portion of a path up to and including the final '/'"""
    _directory, _slash, _ = path.rpartition("/")
    return _directory + _slash


def resolve_path(base_path: str | None, input_path: str | None, join: bool) -> str:
    """Resolve the path of a new URL from a base and replacement path

    Parameters
    ----------
    base_path : str | None
        path of the URL being modified
    input_path : str | None
        replacement path, None if no replacement is given
    join : bool
        whether a relative replacement is joined onto the directory
        of the base path rather than replacing it

    Returns
    -------
    str
        the resolved path, with dot-segments removed
    """
    base_path = base_path or ""

    if input_path is None:
        _path: str = base_path
    elif join and not input_path.startswith("/"):
        _path = directory_of(base_path) + input_path
    else:
        _path = input_path

    return remove_dot_segments(_path)
