"""
URL Generator
=============

Generates absolute URLs for paths relative to the URL of the request
currently being handled, normalising every URL it returns through
``build_url``.

"""

import collections.abc
import logging
import re
import typing

from stormurl.builder import build_url, build_url_detailed
from stormurl.config.user import StormUrlConfiguration
from stormurl.encoding import encode_component
from stormurl.flags import MergeFlags
from stormurl.models import UrlParts

logger = logging.getLogger(__name__)

_ABSOLUTE_URL = re.compile(r"^(#|//|[A-Za-z][A-Za-z0-9+\-.]*://)")


class UrlGenerator:
    """Generate URLs relative to the current request URL

    Examples
    --------
    >>> generator = UrlGenerator("https://www.example.com/path/?query=arg#fragment")
    >>> generator.to("/test/")
    'https://www.example.com/test'
    >>> generator.to("")
    'https://www.example.com/'
    """

    def __init__(
        self,
        current_url: str,
        *,
        config: StormUrlConfiguration | None = None,
        debug: bool | None = None,
    ) -> None:
        """Initialise a generator for the given request URL

        Parameters
        ----------
        current_url : str
            absolute URL of the current request
        config : StormUrlConfiguration, optional
            configuration to use, by default fetched for this project
        debug : bool, optional
            enable debug logging, by default as set in the configuration
        """
        self._config: StormUrlConfiguration = config or StormUrlConfiguration.fetch()

        logging.getLogger(self.__class__.__module__).setLevel(
            logging.DEBUG
            if (debug is not None and debug)
            or (debug is None and self._config.client.debug)
            else logging.INFO
        )

        self._current: UrlParts = build_url_detailed(
            current_url, settings=self._config.builder
        ).parts
        self._forced_scheme: str | None = self._config.generator.scheme
        self._forced_root: str | None = (
            f"{self._config.generator.root_url}".rstrip("/")
            if self._config.generator.root_url
            else None
        )

        logger.debug("Created URL generator for '%s'", self._current)

    def force_scheme(self, scheme: str | None) -> None:
        """Use the given scheme for all generated URLs"""
        self._forced_scheme = scheme.lower() if scheme else None

    def force_root_url(self, root: str | None) -> None:
        """Use the given root, rather than that of the current URL"""
        self._forced_root = root.rstrip("/") if root else None

    def is_valid_url(self, path: str) -> bool:
        """Returns whether the path is already a URL which can be used as-is"""
        if _ABSOLUTE_URL.match(path):
            return True
        _scheme, _colon, _ = path.partition(":")
        return bool(_colon) and self._config.builder.is_opaque(_scheme)

    def format_scheme(self, secure: bool | None = None) -> str:
        """Return the scheme to use for a generated URL"""
        if secure is not None:
            return "https" if secure else "http"
        return self._forced_scheme or self._current.scheme or "http"

    def format_root(self, scheme: str) -> str:
        """Return the root, without trailing slash, for the given scheme"""
        if self._forced_root:
            _root = build_url(
                self._forced_root, {"scheme": scheme}, settings=self._config.builder
            )
        else:
            _root = build_url(
                self._current,
                {"scheme": scheme},
                MergeFlags.STRIP_AUTH
                | MergeFlags.STRIP_PATH
                | MergeFlags.STRIP_QUERY
                | MergeFlags.STRIP_FRAGMENT,
                settings=self._config.builder,
            )
        return _root.rstrip("/")

    def to(
        self,
        path: str,
        extra: collections.abc.Iterable[typing.Any] | None = None,
        secure: bool | None = None,
    ) -> str:
        """Generate an absolute URL for the given path

        Parameters
        ----------
        path : str
            path relative to the root, or an absolute URL
        extra : Iterable, optional
            additional path segments, each is percent-encoded
        secure : bool, optional
            force https (True) or http (False), by default the
            current scheme

        Returns
        -------
        str
            the generated URL, never ending in '/' unless the path is the root
        """
        if self.is_valid_url(path):
            return build_url(path, settings=self._config.builder)

        _tail: str = "/".join(encode_component(f"{segment}") for segment in extra or [])
        _root: str = self.format_root(self.format_scheme(secure))
        _path, _question, _query = path.partition("?")
        _path = f"{_path}/{_tail}".strip("/")

        return build_url(
            f"{_root}/{_path}".rstrip("/") + (f"?{_query}" if _question else ""),
            settings=self._config.builder,
        )

    def current(self) -> str:
        """Return the current URL without query string or fragment"""
        return build_url(
            self._current,
            flags=MergeFlags.STRIP_QUERY | MergeFlags.STRIP_FRAGMENT,
            settings=self._config.builder,
        )

    def full(self) -> str:
        """Return the current URL including its query string"""
        return build_url(
            self._current,
            flags=MergeFlags.STRIP_FRAGMENT,
            settings=self._config.builder,
        )
