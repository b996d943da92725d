"""
URL Parsing
===========

Conversion of URL input, either a URL string or a mapping of components
as produced by PHP's ``parse_url``, into ``UrlParts``.

"""

import collections.abc
import logging
import re
import typing
import urllib.parse

import pydantic

from stormurl.exception import InvalidPortError, MalformedInputError
from stormurl.models import CONTROL_CHARACTER_REGEX, UrlParts
from stormurl.utilities import parse_pydantic_error

logger = logging.getLogger(__name__)

_CONTROL_CHARACTER = re.compile(CONTROL_CHARACTER_REGEX)

URLInput = str | UrlParts | collections.abc.Mapping[str, typing.Any]


def _validate_parts(value: typing.Any, components: dict[str, typing.Any]) -> UrlParts:
    try:
        return UrlParts.model_validate(components)
    except pydantic.ValidationError as e:
        _error_str: str = parse_pydantic_error(e)
        if any(error["loc"][:1] == ("port",) for error in e.errors()):
            raise InvalidPortError(components.get("port"), _error_str) from e
        raise MalformedInputError(value, _error_str) from e


def parse_url(url: str) -> UrlParts:
    """Split a URL string into its components

    Empty components are treated as absent, as PHP's 'parse_url' does.

    Parameters
    ----------
    url : str
        URL or relative reference

    Returns
    -------
    UrlParts
        the decomposed URL

    Raises
    ------
    MalformedInputError
        if the string contains control characters or cannot be split
    InvalidPortError
        if the port is non-numeric or out of range
    """
    if _CONTROL_CHARACTER.search(url):
        raise MalformedInputError(url, "control characters are not permitted")

    try:
        _parsed_url = urllib.parse.urlsplit(url)
    except ValueError as e:
        raise MalformedInputError(url, f"{e}") from e

    try:
        _port: int | None = _parsed_url.port
    except ValueError as e:
        _, _, _port_str = _parsed_url.netloc.rpartition(":")
        raise InvalidPortError(_port_str, f"{e}") from e

    _components: dict[str, typing.Any] = {
        "scheme": _parsed_url.scheme or None,
        "user": _parsed_url.username or None,
        "pass": _parsed_url.password,
        "host": _parsed_url.hostname or None,
        "port": _port,
        "path": _parsed_url.path or None,
        "query": _parsed_url.query or None,
        "fragment": _parsed_url.fragment or None,
    }

    return _validate_parts(url, _components)


def to_parts(value: URLInput | None) -> UrlParts:
    """Convert any supported URL input to ``UrlParts``

    Parameters
    ----------
    value : str | UrlParts | Mapping[str, Any] | None
        URL string, parts, or mapping of component name to value.
        None gives empty parts.

    Returns
    -------
    UrlParts
        a new parts instance, never the one given

    Raises
    ------
    MalformedInputError
        if the value is of an unsupported type or has unknown components
    InvalidPortError
        if the port is non-numeric or out of range
    """
    if value is None:
        return UrlParts()

    if isinstance(value, UrlParts):
        return value.model_copy(deep=True)

    if isinstance(value, str):
        return parse_url(value)

    if isinstance(value, collections.abc.Mapping):
        return _validate_parts(value, dict(value))

    raise MalformedInputError(
        value, f"expected a string or mapping, got '{type(value).__name__}'"
    )
