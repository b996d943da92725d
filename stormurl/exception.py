"""
Stormurl Exception Types
========================

Custom exceptions for failures while parsing or building URLs.

"""


class UrlBuildError(ValueError):
    """Base class for all URL building failures"""

    pass


class MalformedInputError(UrlBuildError):
    """For URL input which cannot be interpreted"""

    def __init__(self, value: object, extra: str | None = None) -> None:
        self.value = value
        super().__init__(
            f"Failed to interpret '{value}' as a URL"
            f"{f', {extra}' if extra else ''}"
        )


class InvalidPortError(UrlBuildError):
    """For ports which are non-numeric or outside 1-65535"""

    def __init__(self, port: object, extra: str | None = None) -> None:
        self.port = port
        super().__init__(
            f"Invalid port '{port}', expected an integer between 1 and 65535"
            f"{f', {extra}' if extra else ''}"
        )
