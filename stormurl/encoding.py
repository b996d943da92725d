"""
Percent Encoding
================

Encoding of individual URL components following RFC 3986. Sequences which
are already valid percent-encoded triplets are kept (normalised to upper
case hex digits) so that encoding an already encoded value is a no-op.

"""

import enum
import re
import urllib.parse

_PCT_TRIPLET = re.compile(r"%[0-9A-Fa-f]{2}")


class ComponentKind(str, enum.Enum):
    """Type of URL component being encoded.

    Path segments, query keys/values and user info are encoded with only
    the RFC 3986 unreserved characters left as-is, the caller supplies a
    single segment, key or value at a time. Fragments are encoded as a
    whole and keep the characters RFC 3986 allows within them. The data of
    opaque schemes keeps the sub-delimiters and ':' but not '@'.
    """

    PATH = "path"
    QUERY = "query"
    USERINFO = "userinfo"
    FRAGMENT = "fragment"
    OPAQUE = "opaque"


_SAFE_CHARACTERS: dict[ComponentKind, str] = {
    ComponentKind.PATH: "",
    ComponentKind.QUERY: "",
    ComponentKind.USERINFO: "",
    ComponentKind.FRAGMENT: "/?:@!$&'()*+,;=",
    ComponentKind.OPAQUE: ":!$&'()*+,;=",
}


def encode_component(
    raw: str, component_kind: ComponentKind = ComponentKind.PATH
) -> str:
    """Percent-encode a URL component without double encoding

    Parameters
    ----------
    raw : str
        the unencoded, or partially encoded, component
    component_kind : ComponentKind, optional
        the kind of component, by default a path segment

    Returns
    -------
    str
        the encoded component

    Examples
    --------
    >>> encode_component("<b>")
    '%3Cb%3E'
    >>> encode_component("%3cb%3E")
    '%3Cb%3E'
    """
    _safe: str = _SAFE_CHARACTERS[ComponentKind(component_kind)]
    _out_str: str = ""
    _position: int = 0

    for _match in _PCT_TRIPLET.finditer(raw):
        _out_str += urllib.parse.quote(raw[_position : _match.start()], safe=_safe)
        _out_str += _match.group().upper()
        _position = _match.end()

    return _out_str + urllib.parse.quote(raw[_position:], safe=_safe)


def encode_path(
    path: str, component_kind: ComponentKind = ComponentKind.PATH
) -> str:
    """Encode each segment of a path, keeping the '/' separators"""
    return "/".join(
        encode_component(segment, component_kind) for segment in path.split("/")
    )

