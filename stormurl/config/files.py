"""
Stormurl Config File Lists
==========================

Contains lists of valid Stormurl configuration file names.

"""

CONFIG_FILE_NAMES: list[str] = ["stormurl.toml", ".stormurl.toml"]

PYPROJECT_FILE_NAME: str = "pyproject.toml"
