"""
Application settings.

Defaults live in the dataclasses below. A TOML file can override any of them, section by section:

    [search]
    depth = 4

    [database]
    url = "sqlite:///othello.db"

The file is read from $OTHELLO_CONFIG_TOML (default: ./config.toml). $OTHELLO_SEARCH_DEPTH overrides the depth only.
"""

import os
import tomllib
from dataclasses import dataclass, field, fields
from typing import Any, Self

CONFIG_PATH_ENV = "OTHELLO_CONFIG_TOML"
SEARCH_DEPTH_ENV = "OTHELLO_SEARCH_DEPTH"


@dataclass
class SearchConfig:
    # deeper search costs exponentially more: the caller picks a depth that fits the time it has
    depth: int = 5


@dataclass
class EngineConfig:
    name: str = "ArcOthelloFH"


@dataclass
class DatabaseConfig:
    url: str = "sqlite:///othello.db"
    echo: bool = False


@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    engine: EngineConfig = field(default_factory=EngineConfig)
    database: DatabaseConfig = field(default_factory=DatabaseConfig)

    @classmethod
    def load_from_toml(cls, path: str = "config.toml") -> Self:
        """Missing file: defaults. Unknown sections / keys are ignored."""
        config = cls()
        if not os.path.exists(path):
            return config
        with open(path, "rb") as f:
            raw = tomllib.load(f)

        for section in fields(config):
            if section.name in raw:
                _merge(getattr(config, section.name), raw[section.name])
        return config

    @classmethod
    def from_environment(cls) -> Self:
        config = cls.load_from_toml(os.environ.get(CONFIG_PATH_ENV, "config.toml"))
        override_depth = os.environ.get(SEARCH_DEPTH_ENV)
        if override_depth:
            config.search.depth = int(override_depth)
        return config


def _merge(section: Any, values: dict[str, Any]) -> None:
    for key, value in values.items():
        if hasattr(section, key):
            setattr(section, key, value)


# single globally importable config instance
CONFIG = Config.from_environment()
