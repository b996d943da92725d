"""
URL Builder
===========

Builds a URL from a base URL and a set of replacement components in the
manner of the PECL ``http_build_url`` function, producing an RFC 3986
compliant, correctly encoded result.

Components are merged in a fixed order: scheme, credentials, host, port,
path, query and fragment. By default any component present in the
replacement overwrites the base component, ``MergeFlags`` strip individual
components or join the path and query instead.

"""

import logging
import typing

from stormurl.config.parameters import BuilderSpecifications
from stormurl.encoding import ComponentKind, encode_component, encode_path
from stormurl.flags import MergeFlags, MergeOptions
from stormurl.models import UrlParts
from stormurl.parser import URLInput, to_parts
from stormurl.paths import resolve_path
from stormurl.query import merge_query

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = BuilderSpecifications()


class BuildResult(typing.NamedTuple):
    """Built URL along with its decomposed parts"""

    url: str
    parts: UrlParts


def _replace_or_keep(
    base: UrlParts, replace: UrlParts, component: str
) -> typing.Any | None:
    _replacement = getattr(replace, component)
    return _replacement if _replacement is not None else getattr(base, component)


def _encode_optional(value: str | None, component_kind: ComponentKind) -> str | None:
    return encode_component(value, component_kind) if value is not None else None


def build_url_detailed(
    url: URLInput,
    replace: URLInput | None = None,
    flags: int | MergeFlags | MergeOptions = MergeFlags.REPLACE,
    settings: BuilderSpecifications | None = None,
) -> BuildResult:
    """Build a URL, returning both the URL string and its parts

    Parameters
    ----------
    url : str | UrlParts | Mapping[str, Any]
        the base URL
    replace : str | UrlParts | Mapping[str, Any] | None, optional
        components replacing or joining those of the base URL
    flags : int | MergeFlags | MergeOptions, optional
        how components are combined, by default plain replacement
    settings : BuilderSpecifications, optional
        default port and opaque scheme tables, by default the built-in tables

    Returns
    -------
    BuildResult
        the URL string and the parts it was assembled from

    Raises
    ------
    MalformedInputError
        if either input, or the flags, cannot be interpreted
    InvalidPortError
        if a port is non-numeric or outside 1-65535
    """
    settings = settings or DEFAULT_SETTINGS
    _options: MergeOptions = MergeOptions.from_flags(flags)
    _base: UrlParts = to_parts(url)
    _replace: UrlParts = to_parts(replace)

    _scheme: str | None = _replace_or_keep(_base, _replace, "scheme")

    if settings.is_opaque(_scheme):
        logger.debug("Treating '%s' as an opaque scheme", _scheme)
        _opaque_data: str = _replace_or_keep(_base, _replace, "path") or ""
        _components: dict[str, typing.Any] = {
            "scheme": _scheme,
            "path": encode_path(_opaque_data, ComponentKind.OPAQUE) or None,
        }
    else:
        _components = {
            "scheme": _scheme,
            "user": None
            if _options.strip_user
            else _replace_or_keep(_base, _replace, "user"),
            "pass": None
            if _options.strip_pass
            else _replace_or_keep(_base, _replace, "password"),
            "host": _replace_or_keep(_base, _replace, "host"),
            "port": None
            if _options.strip_port
            else _replace_or_keep(_base, _replace, "port"),
            "path": None
            if _options.strip_path
            else encode_path(
                resolve_path(_base.path, _replace.path, _options.join_path)
            ),
        }

        if _components["port"] and _components["port"] == settings.default_port(
            _scheme
        ):
            logger.debug(
                "Removing default port %s for scheme '%s'", _components["port"], _scheme
            )
            _components["port"] = None

        if not _components["user"]:
            _components["user"] = _components["pass"] = None

        # A host is always followed by at least the root path
        _path: str = _components["path"] or ""
        if _components["host"] and not _path.startswith("/"):
            _path = f"/{_path}"
        _components["path"] = _path or None

        _components["user"] = _encode_optional(
            _components["user"], ComponentKind.USERINFO
        )
        _components["pass"] = _encode_optional(
            _components["pass"], ComponentKind.USERINFO
        )

    _components["query"] = (
        None
        if _options.strip_query
        else merge_query(_base.query, _replace.query, _options.join_query) or None
    )
    _components["fragment"] = (
        None
        if _options.strip_fragment
        else _encode_optional(
            _replace_or_keep(_base, _replace, "fragment"), ComponentKind.FRAGMENT
        )
        or None
    )

    _parts = UrlParts.model_validate(
        {k: v for k, v in _components.items() if v is not None}
    )

    return BuildResult(url=_parts.to_string(), parts=_parts)


def build_url(
    url: URLInput,
    replace: URLInput | None = None,
    flags: int | MergeFlags | MergeOptions = MergeFlags.REPLACE,
    settings: BuilderSpecifications | None = None,
) -> str:
    """Build a URL from a base URL and replacement components

    Parameters
    ----------
    url : str | UrlParts | Mapping[str, Any]
        the base URL
    replace : str | UrlParts | Mapping[str, Any] | None, optional
        components replacing or joining those of the base URL
    flags : int | MergeFlags | MergeOptions, optional
        how components are combined, by default plain replacement
    settings : BuilderSpecifications, optional
        default port and opaque scheme tables, by default the built-in tables

    Returns
    -------
    str
        the new URL

    Examples
    --------
    >>> build_url("https://example.com/", "/a/b/c/./../../g")
    'https://example.com/a/g'
    >>> build_url(
    ...     "http://www.example.com:8080/foo?a[2]=b#frag",
    ...     "?a[2]=1&b=c&a[3]=b",
    ...     MergeFlags.JOIN_QUERY | MergeFlags.STRIP_PORT
    ...     | MergeFlags.STRIP_FRAGMENT | MergeFlags.STRIP_PATH,
    ... )
    'http://www.example.com/?a%5B2%5D=1&a%5B3%5D=b&b=c'
    """
    return build_url_detailed(url, replace, flags, settings).url
