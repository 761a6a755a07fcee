import json
import logging.config
from pathlib import Path
from typing import Any, Self

import yaml
from pydantic import BaseModel, Field, computed_field

from inline_builder import MODULE_ROOT
from inline_builder.builder import BetterBuilder
from inline_builder.config.loader import MultiFileLoader
from inline_builder.exception import ConfigError


DICT_CONFIG_KEYS = frozenset({
    "version", "formatters", "filters", "handlers", "loggers", "root", "incremental", "disable_existing_loggers"
})


class Logging(BetterBuilder, BaseModel):
    """
    Logging config in the schema of :py:func:`logging.config.dictConfig`
    plus the name of the entry in ``loggers`` to use for this package.
    """
    version: int = Field(description="The dictConfig schema version", default=1)
    formatters: dict[str, Any] = Field(description="Formatter configs by formatter ID", default_factory=dict)
    filters: dict[str, Any] = Field(description="Filter configs by filter ID", default_factory=dict)
    handlers: dict[str, Any] = Field(description="Handler configs by handler ID", default_factory=dict)
    loggers: dict[str, Any] = Field(description="Logger configs by logger name", default_factory=dict)
    root: dict[str, Any] = Field(description="Config for the root logger", default_factory=dict)
    incremental: bool = Field(description="Apply on top of the existing logging config", default=False)
    disable_existing_loggers: bool = Field(description="Disable loggers not named in this config", default=False)

    name: str | None = Field(
        description="The entry in 'loggers' to apply to the logger for this package",
        default=None,
    )

    @computed_field(
        description="The configuration for the selected logger"
    )
    @property
    def logger(self) -> dict[str, Any]:
        """The configuration for the selected logger"""
        return self.loggers.get(self.name, {})

    @property
    def dict_config(self) -> dict[str, Any]:
        """
        The config to pass to :py:func:`logging.config.dictConfig`.

        Derived from the current field values on each access:
        escaped ANSI codes (``\\33``) in formats are unescaped
        and the selected logger's config is applied to the logger for this package.
        """
        config = self.model_dump(include=DICT_CONFIG_KEYS)
        for formatter in config["formatters"].values():
            if "format" in formatter:
                formatter["format"] = formatter["format"].replace(r"\33", "\33")

        if self.logger:
            config["loggers"][MODULE_ROOT] = config["loggers"][self.name]
        return config

    def configure_logging(self) -> None:
        """Configures logging using the currently stored config."""
        logging.config.dictConfig(self.dict_config)

        if self.logger:
            logging.getLogger(MODULE_ROOT).debug(f"Logging config set to: {self.name}")


class BuilderConfig(BetterBuilder, BaseModel):
    logging: Logging = Field(
        description="Configuration for the runtime logger",
        default_factory=Logging,
    )

    @classmethod
    def from_file(cls, config_file_path: str | Path) -> Self:
        """
        Create config from the config found in the given ``config_file_path``

        :raise ConfigError: When the file does not hold a mapping at its top level.
        """
        config_map = MultiFileLoader.load(config_file_path)
        if config_map is None:
            config_map = {}
        if not isinstance(config_map, dict):
            raise ConfigError("Config file does not contain a mapping", value=str(config_file_path))

        return cls(**config_map)

    def model_dump_yaml(self) -> str:
        """Generates a YAML representation of the model using ``yaml.safe_dump``."""
        data = json.loads(self.model_dump_json(exclude={"logging": {"logger"}}))
        return yaml.safe_dump(data, indent=2, default_flow_style=False, allow_unicode=True, sort_keys=False)
