"""Stormurl URL building library."""

from stormurl.builder import BuildResult, build_url, build_url_detailed
from stormurl.encoding import ComponentKind, encode_component
from stormurl.exception import InvalidPortError, MalformedInputError, UrlBuildError
from stormurl.flags import MergeFlags, MergeOptions
from stormurl.generator import UrlGenerator
from stormurl.models import UrlParts
from stormurl.parser import parse_url
from stormurl.paths import remove_dot_segments, resolve_path
from stormurl.query import build_query, merge_query, parse_query
from stormurl.version import __version__

__all__ = [
    "BuildResult",
    "ComponentKind",
    "InvalidPortError",
    "MalformedInputError",
    "MergeFlags",
    "MergeOptions",
    "UrlBuildError",
    "UrlGenerator",
    "UrlParts",
    "__version__",
    "build_query",
    "build_url",
    "build_url_detailed",
    "encode_component",
    "merge_query",
    "parse_query",
    "parse_url",
    "remove_dot_segments",
    "resolve_path",
]
