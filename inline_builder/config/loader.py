"""
Handles loading of config from a config file (e.g. YAML or JSON).
"""
import json
import logging
from collections.abc import Iterator, Mapping, MutableMapping
from contextlib import contextmanager
from io import TextIOWrapper
from pathlib import Path
from typing import Any

import yaml

from inline_builder.exception import ConfigError

logger = logging.getLogger(__name__)


def merge_missing(base: MutableMapping[str, Any], other: Mapping[str, Any]) -> None:
    """
    Recursively add the keys in ``other`` missing from ``base`` to ``base``.
    Values already present in ``base`` are kept.
    """
    for key, value in other.items():
        if key not in base:
            base[key] = value
        elif isinstance(base[key], MutableMapping) and isinstance(value, Mapping):
            merge_missing(base[key], value)


class MultiFileLoader(yaml.SafeLoader):
    """YAML loader which includes additional config files from paths found within a given parent YAML file."""

    include_key = "include"

    @classmethod
    def load(cls, path: str | Path) -> Any:
        """
        Load a file of any recognised file type by this loader from the given ``path``.

        :param path: The path of the file to load.
        :raise ConfigError: If the file type is not recognised.
        """
        logger.debug(f"Loading config from: {path}")
        match (path := Path(path)).suffix.casefold():
            case ".json":
                return cls._load_json(path)
            case suffix if suffix in (".yml", ".yaml"):
                return cls._load_yaml(path)
            case _:
                raise ConfigError("Unrecognised file type", value=path)

    @staticmethod
    @contextmanager
    def _load_stream(path: Path) -> Iterator[TextIOWrapper]:
        with path.open("r", encoding="utf-8") as stream:
            yield stream

    @classmethod
    def _load_yaml(cls, path: Path) -> Any:
        with cls._load_stream(path) as stream:
            return yaml.load(stream, cls)

    @classmethod
    def _load_json(cls, path: Path) -> Any:
        with cls._load_stream(path) as stream:
            return json.load(stream)

    def __init__(self, stream: Any):
        super().__init__(stream)
        try:
            self._parent_path = Path(stream.name).parent
        except AttributeError:
            self._parent_path = Path.cwd()

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = True) -> dict[Any, Any]:
        """Construct the mapping and merge in the mappings of any included files"""
        mapping = super().construct_mapping(node, deep=deep)
        if self.include_key not in mapping:
            return mapping

        paths = mapping.pop(self.include_key)
        if isinstance(paths, str):
            paths = [paths]
        if not isinstance(paths, list) or not all(isinstance(path, str) for path in paths):
            raise ConfigError("Include must be a path or list of paths", value=paths)

        for path in map(Path, paths):
            if not path.is_absolute():
                path = self._parent_path.joinpath(path)
            if not path.is_file():
                logger.debug(f"Skipping missing include file: {path}")
                continue

            include = self.load(path)
            if not isinstance(include, Mapping):
                raise ConfigError("Included file is not a mapping", value=path)
            merge_missing(mapping, include)

        return mapping
