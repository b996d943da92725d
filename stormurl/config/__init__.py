"""
Stormurl Configuration
======================

"""

from stormurl.config.parameters import (
    BuilderSpecifications,
    ClientGeneralOptions,
    GeneratorSpecifications,
)
from stormurl.config.user import StormUrlConfiguration

__all__ = [
    "BuilderSpecifications",
    "ClientGeneralOptions",
    "GeneratorSpecifications",
    "StormUrlConfiguration",
]
