"""
Stormurl Configuration File Models
==================================

Pydantic models for elements of the Stormurl configuration file

"""

import logging
import typing

import pydantic

import stormurl.models as su_models


logger = logging.getLogger(__name__)


class ClientGeneralOptions(pydantic.BaseModel):
    debug: bool = False


class BuilderSpecifications(pydantic.BaseModel):
    """Scheme tables used when building URLs

    Values given are merged over the built-in tables rather than
    replacing them.
    """

    model_config = pydantic.ConfigDict(frozen=True)
    default_ports: dict[str, su_models.PortNumber] = pydantic.Field(
        default_factory=lambda: dict(su_models.DEFAULT_PORTS)
    )
    opaque_schemes: tuple[su_models.SchemeString, ...] = su_models.OPAQUE_SCHEMES

    @pydantic.field_validator("default_ports")
    @classmethod
    def merge_default_ports(cls, v: dict[str, int]) -> dict[str, int]:
        return su_models.DEFAULT_PORTS | {k.lower(): port for k, port in v.items()}

    @pydantic.field_validator("opaque_schemes")
    @classmethod
    def merge_opaque_schemes(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        _extra = tuple(
            s.lower() for s in v if s.lower() not in su_models.OPAQUE_SCHEMES
        )
        return su_models.OPAQUE_SCHEMES + tuple(dict.fromkeys(_extra))

    def default_port(self, scheme: str | None) -> int | None:
        """Return the well-known port for a scheme if there is one"""
        return self.default_ports.get(scheme.lower()) if scheme else None

    def is_opaque(self, scheme: str | None) -> bool:
        """Returns whether the scheme carries no authority component"""
        return bool(scheme) and scheme.lower() in self.opaque_schemes


class GeneratorSpecifications(pydantic.BaseModel):
    root_url: pydantic.AnyUrl | None = None
    scheme: typing.Literal["http", "https"] | None = None

    @pydantic.field_validator("root_url")
    @classmethod
    def check_root_url(cls, v: pydantic.AnyUrl | None) -> pydantic.AnyUrl | None:
        if v and (v.query or v.fragment):
            raise AssertionError(
                f"Root URL '{v}' must not contain a query string or fragment"
            )
        return v
