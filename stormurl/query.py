"""
Query Strings
=============

Parsing, merging and serialisation of query strings.

Parsing follows the rules PHP applies when populating ``$_GET``: a key
repeated without brackets keeps only its last value while bracketed keys
(``a[]=1``, ``a[k]=1``) build nested structures. Parsed structures are
held as nested dictionaries of strings. Numeric keys are held as integers
whether they were appended with empty brackets (``a[]``), written out
(``a[0]``) or taken from the position of a sequence item, so that each index
refers to a single entry. Written out indices are remembered as
``QueryIndex`` keys and are written back as such.

"""

import collections.abc
import logging
import re
import typing

from deepmerge import Merger

from stormurl.encoding import ComponentKind, encode_component
from stormurl.exception import MalformedInputError

logger = logging.getLogger(__name__)

_BRACKETED_KEY = re.compile(r"^(?P<name>[^\[\]]+)(?P<subkeys>(?:\[[^\[\]]*\])+)$")
_SUBKEY = re.compile(r"\[([^\[\]]*)\]")
_ENCODED_BRACKETS = re.compile(r"%5[BbDd]")
_INTEGER_KEY = re.compile(r"^(0|[1-9][0-9]*)$")


class QueryIndex(int):
    """Integer key written out explicitly in a query, e.g. the 0 of 'a[0]'

    Compares and hashes as the plain integer, a dictionary updated with
    either form keeps the key it already holds.
    """


QueryKey = str | int
QueryValue = typing.Union[str, None, dict[QueryKey, "QueryValue"]]

# Replacement values overwrite base values key by key, recursing into
# nested structures as PHP's array_replace_recursive does
query_merger = Merger(
    [(dict, ["merge"])],
    ["override"],
    ["override"],
)


def _next_index(container: dict[QueryKey, QueryValue]) -> int:
    _indices: list[int] = [key for key in container if isinstance(key, int)]
    return max(_indices, default=-1) + 1


def _canonical_key(key: typing.Any) -> QueryKey:
    if isinstance(key, QueryIndex):
        return key
    if isinstance(key, int) and not isinstance(key, bool):
        return int(key)
    _key: str = f"{key}"
    return QueryIndex(_key) if _INTEGER_KEY.match(_key) else _key


def _is_sequence(container: dict[QueryKey, QueryValue]) -> bool:
    return all(
        type(key) is int and key == _position
        for _position, key in enumerate(container)
    )


def split_key(key: str) -> tuple[str, list[str]]:
    """Split a query key into its name and bracketed subkeys

    Parameters
    ----------
    key : str
        query key, brackets may be percent-encoded

    Returns
    -------
    tuple[str, list[str]]
        the base name and a list of subkeys, '' representing an
        append ('[]'). Keys with unbalanced brackets are returned whole.

    Examples
    --------
    >>> split_key("a[b][]")
    ('a', ['b', ''])
    """
    _key: str = _ENCODED_BRACKETS.sub(
        lambda m: "[" if m.group()[2] in "Bb" else "]", key
    )

    if not (_match := _BRACKETED_KEY.match(_key)):
        return key, []

    return _match.group("name"), _SUBKEY.findall(_match.group("subkeys"))


def parse_query(query: str) -> dict[QueryKey, QueryValue]:
    """Parse a query string into a nested dictionary

    Keys and values are kept in their original encoding, a key given
    without '=' is recorded with the value None.

    Parameters
    ----------
    query : str
        query string, without the leading '?'

    Returns
    -------
    dict[QueryKey, QueryValue]
        parsed query

    Examples
    --------
    >>> parse_query("test=1&test=2")
    {'test': '2'}
    >>> parse_query("test[]=1&test[]=2")
    {'test': {0: '1', 1: '2'}}
    """
    _params: dict[QueryKey, QueryValue] = {}

    for _pair in query.split("&"):
        _key, _equals, _value = _pair.partition("=")
        if not _key:
            continue

        _name, _subkeys = split_key(_key)
        _container: dict[QueryKey, QueryValue] = _params
        _path: list[str] = [_name, *_subkeys]

        for _depth, _part in enumerate(_path):
            _part = _canonical_key(_part) if _part else _next_index(_container)
            if _depth == len(_path) - 1:
                _container[_part] = _value if _equals else None
                break
            if not isinstance(_container.get(_part), dict):
                _container[_part] = {}
            _container = _container[_part]

    return _params


def _normalize_value(value: typing.Any) -> QueryValue:
    if isinstance(value, collections.abc.Mapping):
        return {
            _canonical_key(k): _normalize_value(v) for k, v in value.items()
        }
    if isinstance(value, (list, tuple)):
        return {i: _normalize_value(v) for i, v in enumerate(value)}
    if value is None:
        return None
    if isinstance(value, bool):
        return "1" if value else "0"
    return f"{value}"


def normalize_query(
    query: str | collections.abc.Mapping[typing.Any, typing.Any] | None,
) -> dict[QueryKey, QueryValue]:
    """Convert a query given as a string or a mapping to a parsed dictionary

    Structured input is copied, sequences becoming integer keyed
    dictionaries and scalars strings. Numeric keys, including numeric
    strings, become integers.
    """
    if query is None:
        return {}

    if isinstance(query, str):
        return parse_query(query.removeprefix("?"))

    if not isinstance(query, collections.abc.Mapping):
        raise MalformedInputError(query, "query must be a string or a mapping")

    return _normalize_value(query)


def _flatten(
    params: dict[QueryKey, QueryValue], prefix: str | None = None
) -> collections.abc.Iterator[str]:
    _appended: bool = _is_sequence(params)

    for key, value in params.items():
        _name: str = encode_component(f"{key}", ComponentKind.QUERY)
        if prefix is not None:
            _name = f"{prefix}%5B{'' if _appended else _name}%5D"

        if isinstance(value, dict):
            yield from _flatten(value, _name)
        elif value is None:
            yield _name
        else:
            yield f"{_name}={encode_component(value, ComponentKind.QUERY)}"


def build_query(
    params: str | collections.abc.Mapping[typing.Any, typing.Any] | None,
) -> str:
    """Serialise a query to an RFC 3986 encoded string

    Nested values use bracket notation. Sequences, and containers whose
    appended keys run 0 to n-1 in order, are written with empty brackets,
    any other key is written out.

    Examples
    --------
    >>> build_query({"test": [1, 2]})
    'test%5B%5D=1&test%5B%5D=2'
    >>> build_query({"a": {"k": "v"}, "flag": None})
    'a%5Bk%5D=v&flag'
    >>> build_query({"a": {5: "x"}})
    'a%5B5%5D=x'
    """
    return "&".join(_flatten(normalize_query(params)))


def merge_query(
    base_query: str | collections.abc.Mapping[typing.Any, typing.Any] | None,
    replace_query: str | collections.abc.Mapping[typing.Any, typing.Any] | None,
    join: bool,
) -> str:
    """Determine the query string of a new URL

    Parameters
    ----------
    base_query : str | Mapping | None
        query of the URL being modified
    replace_query : str | Mapping | None
        replacement query, None if no replacement is given
    join : bool
        merge the replacement into the base query rather than
        replacing it

    Returns
    -------
    str
        the encoded query string, empty if there is no query
    """
    if replace_query is None:
        return build_query(base_query)

    if not join:
        return build_query(replace_query)

    logger.debug("Joining query '%s' onto '%s'", replace_query, base_query)

    _params: dict[QueryKey, QueryValue] = query_merger.merge(
        normalize_query(base_query), normalize_query(replace_query)
    )
    return build_query(_params)
