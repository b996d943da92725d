import typing

import pydantic

from stormurl.query import build_query


SCHEME_REGEX: str = r"^[A-Za-z][A-Za-z0-9+\-.]*$"
CONTROL_CHARACTER_REGEX: str = r"[\x00-\x1f\x7f]"

# Well-known ports, dropped from the output when they match the scheme
DEFAULT_PORTS: dict[str, int] = {
    "ftp": 21,
    "ssh": 22,
    "telnet": 23,
    "gopher": 70,
    "http": 80,
    "ws": 80,
    "nntp": 119,
    "imap": 143,
    "ldap": 389,
    "https": 443,
    "wss": 443,
    "ldaps": 636,
    "imaps": 993,
    "pop3s": 995,
}

# Schemes whose content after the colon has no authority
OPAQUE_SCHEMES: tuple[str, ...] = (
    "mailto",
    "tel",
    "sms",
    "news",
    "urn",
    "data",
    "javascript",
)

PortNumber = typing.Annotated[int, pydantic.Field(ge=1, le=65535)]
SchemeString = typing.Annotated[str, pydantic.StringConstraints(pattern=SCHEME_REGEX)]
QueryMapping = dict[str | int, typing.Any]


class UrlParts(pydantic.BaseModel):
    """Decomposed form of a URL.

    Unset components are ``None``, a component set to an empty string is
    considered present, so a replacement ``query=""`` clears the query.
    The credential field is exposed as ``password`` and accepted as ``pass``.
    """

    model_config = pydantic.ConfigDict(extra="forbid", populate_by_name=True)
    scheme: SchemeString | None = None
    user: str | None = None
    password: str | None = pydantic.Field(None, alias="pass")
    host: str | None = None
    port: PortNumber | None = None
    path: str | None = None
    query: str | QueryMapping | None = None
    fragment: str | None = None

    @pydantic.field_validator("scheme")
    @classmethod
    def lower_scheme(cls, v: str | None) -> str | None:
        return v.lower() if v else v

    @property
    def authority(self) -> str:
        """Authority component, 'user:pass@host:port', of the parts"""
        _out_str: str = ""
        if self.user:
            _out_str += self.user
            if self.password is not None:
                _out_str += f":{self.password}"
            _out_str += "@"
        if self.host:
            _out_str += f"[{self.host}]" if ":" in self.host else self.host
        if self.port:
            _out_str += f":{self.port}"
        return _out_str

    def to_dict(self) -> dict[str, typing.Any]:
        """Return the parts as a mapping keyed as PHP's 'parse_url' does"""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_string(self) -> str:
        """Construct string form of the URL

        Components are rendered as they are held, any encoding
        must already have been applied.
        """
        _out_str: str = ""
        _path: str = self.path or ""
        if self.scheme:
            _out_str += f"{self.scheme}:"
        if self.host:
            _out_str += f"//{self.authority}"
            if not _path.startswith("/"):
                _path = f"/{_path}"
        _out_str += _path
        if isinstance(self.query, dict):
            _query: str = build_query(self.query)
        else:
            _query = self.query or ""
        if _query:
            _out_str += f"?{_query}"
        if self.fragment:
            _out_str += f"#{self.fragment}"
        return _out_str

    def __str__(self) -> str:
        return self.to_string()
