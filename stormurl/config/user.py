"""
Stormurl Configuration File Model
=================================

Pydantic model for the Stormurl TOML configuration file

"""

import functools
import logging
import os
import pathlib
import typing

import pydantic
import toml

import stormurl.utilities as su_util
from stormurl.config.files import CONFIG_FILE_NAMES, PYPROJECT_FILE_NAME
from stormurl.config.parameters import (
    BuilderSpecifications,
    ClientGeneralOptions,
    GeneratorSpecifications,
)

logger = logging.getLogger(__name__)


class StormUrlConfiguration(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(revalidate_instances="always")
    client: ClientGeneralOptions = ClientGeneralOptions()
    builder: BuilderSpecifications = BuilderSpecifications()
    generator: GeneratorSpecifications = GeneratorSpecifications()

    @classmethod
    def _load_pyproject_configs(cls) -> dict | None:
        """Recover any Stormurl configurations from pyproject.toml"""
        _pyproject_toml = su_util.find_first_instance_of_file(
            file_names=[PYPROJECT_FILE_NAME], check_user_space=False
        )

        if not _pyproject_toml:
            return None

        _project_data = toml.load(_pyproject_toml)

        return _project_data.get("tool", {}).get("stormurl")

    @pydantic.validate_call
    def write(self, out_directory: pydantic.DirectoryPath) -> pathlib.Path:
        """Write this configuration to a TOML file in the given directory"""
        _out_file: pathlib.Path = out_directory.joinpath(CONFIG_FILE_NAMES[0])
        with _out_file.open("w") as out_f:
            toml.dump(self.model_dump(mode="json", exclude_none=True), out_f)
        return _out_file

    @classmethod
    @su_util.prettify_pydantic
    def fetch(
        cls,
        root_url: str | None = None,
        scheme: typing.Literal["http", "https"] | None = None,
        debug: bool | None = None,
    ) -> "StormUrlConfiguration":
        """Retrieve the Stormurl configuration for this project

        Parameters
        ----------
        root_url : str, optional
            override the root URL used by URL generators
        scheme : 'http' | 'https', optional
            override the scheme used by URL generators
        debug : bool, optional
            override debug logging

        Return
        ------
        StormUrlConfiguration
            object containing configurations

        """
        _config_dict: dict[str, dict[str, typing.Any]] = (
            cls._load_pyproject_configs() or {}
        )

        try:
            _file_config: dict[str, dict[str, typing.Any]] = toml.load(
                cls.config_file()
            )
            for _section, _values in _file_config.items():
                _config_dict[_section] = _config_dict.get(_section, {}) | _values
        except FileNotFoundError:
            logger.debug("No config file found, using defaults")

        _config_dict["client"] = _config_dict.get("client", {})
        _config_dict["generator"] = _config_dict.get("generator", {})

        # Ranking of configurations is:
        # Arguments > Environment Variables > Configuration File > pyproject.toml
        if _root_url := root_url or os.environ.get("STORMURL_ROOT_URL"):
            _config_dict["generator"]["root_url"] = _root_url

        if _scheme := scheme or os.environ.get("STORMURL_SCHEME"):
            _config_dict["generator"]["scheme"] = _scheme

        if debug is not None:
            _config_dict["client"]["debug"] = debug
        elif _debug_env := os.environ.get("STORMURL_DEBUG"):
            _config_dict["client"]["debug"] = _debug_env

        return StormUrlConfiguration(**_config_dict)

    @classmethod
    @functools.lru_cache
    def config_file(cls) -> pathlib.Path:
        """Returns the path of top level configuration file used for the session"""
        _config_file: pathlib.Path | None = su_util.find_first_instance_of_file(
            CONFIG_FILE_NAMES, check_user_space=True
        )

        if not _config_file:
            raise FileNotFoundError("Failed to find Stormurl configuration file")

        return _config_file
