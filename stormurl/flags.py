"""
Merge Flags
===========

Bitmask flags controlling how ``build_url`` combines a URL with its
replacement. The values match the constants of the PECL ``http_build_url``
function so integer flags from existing callers can be passed unchanged.

"""

import enum

import pydantic

from stormurl.exception import MalformedInputError


class MergeFlags(enum.IntFlag):
    REPLACE = 0
    JOIN_PATH = 1
    JOIN_QUERY = 2
    STRIP_USER = 4
    STRIP_PASS = 8
    STRIP_AUTH = STRIP_USER | STRIP_PASS
    STRIP_PORT = 32
    STRIP_PATH = 64
    STRIP_QUERY = 128
    STRIP_FRAGMENT = 256
    STRIP_ALL = (
        STRIP_AUTH | STRIP_PORT | STRIP_PATH | STRIP_QUERY | STRIP_FRAGMENT
    )


_ALL_FLAGS: int = int(
    MergeFlags.JOIN_PATH | MergeFlags.JOIN_QUERY | MergeFlags.STRIP_ALL
)


class MergeOptions(pydantic.BaseModel):
    """Per-component merge behaviour, one switch per concern"""

    model_config = pydantic.ConfigDict(extra="forbid", frozen=True)
    strip_user: bool = False
    strip_pass: bool = False
    strip_port: bool = False
    strip_path: bool = False
    strip_query: bool = False
    strip_fragment: bool = False
    join_path: bool = False
    join_query: bool = False

    @classmethod
    def from_flags(cls, flags: "int | MergeFlags | MergeOptions") -> "MergeOptions":
        """Create options from a bitmask of ``MergeFlags``

        Parameters
        ----------
        flags : int | MergeFlags | MergeOptions
            combined flags, an existing options instance is returned as is

        Returns
        -------
        MergeOptions
            the equivalent options

        Raises
        ------
        MalformedInputError
            if the flags contain undefined bits
        """
        if isinstance(flags, MergeOptions):
            return flags

        if isinstance(flags, bool) or not isinstance(flags, int) or flags & ~_ALL_FLAGS:
            raise MalformedInputError(flags, "unrecognised merge flags")

        _flags = MergeFlags(flags)

        return cls(
            strip_user=MergeFlags.STRIP_USER in _flags,
            strip_pass=MergeFlags.STRIP_PASS in _flags,
            strip_port=MergeFlags.STRIP_PORT in _flags,
            strip_path=MergeFlags.STRIP_PATH in _flags,
            strip_query=MergeFlags.STRIP_QUERY in _flags,
            strip_fragment=MergeFlags.STRIP_FRAGMENT in _flags,
            join_path=MergeFlags.JOIN_PATH in _flags,
            join_query=MergeFlags.JOIN_QUERY in _flags,
        )

    def to_flags(self) -> MergeFlags:
        """Return the bitmask equivalent of these options"""
        _flags = MergeFlags.REPLACE
        for _flag, _enabled in (
            (MergeFlags.STRIP_USER, self.strip_user),
            (MergeFlags.STRIP_PASS, self.strip_pass),
            (MergeFlags.STRIP_PORT, self.strip_port),
            (MergeFlags.STRIP_PATH, self.strip_path),
            (MergeFlags.STRIP_QUERY, self.strip_query),
            (MergeFlags.STRIP_FRAGMENT, self.strip_fragment),
            (MergeFlags.JOIN_PATH, self.join_path),
            (MergeFlags.JOIN_QUERY, self.join_query),
        ):
            if _enabled:
                _flags |= _flag
        return _flags
