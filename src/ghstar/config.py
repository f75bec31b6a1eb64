import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from mashumaro.exceptions import InvalidFieldValue, MissingField
from mashumaro.mixins.toml import DataClassTOMLMixin

from .errors import ConfigError
from .survey import PICKERS

logger = logging.getLogger(__name__)


@dataclass
class CloneConfig:
    output_dir: str = field(default=".")
    git_config: Sequence[str] = field(default_factory=list)


@dataclass
class SelectConfig:
    picker: str = field(default="survey")


@dataclass
class Config(DataClassTOMLMixin):
    clone: CloneConfig = field(default_factory=CloneConfig)
    select: SelectConfig = field(default_factory=SelectConfig)


CONFIG_FILE_PATH = Path("ghstar.toml")


def load_config(cfg_path: Path = CONFIG_FILE_PATH) -> Config:
    if not cfg_path.exists():
        logger.info(f"not found {cfg_path}, use default config")
        return Config()
    content = cfg_path.read_text(encoding="utf-8")
    logger.info(f"use config from {cfg_path}")
    try:
        config = Config.from_toml(content)
    except (tomllib.TOMLDecodeError, InvalidFieldValue, MissingField) as e:
        raise ConfigError(f"invalid {cfg_path}: {e}") from e
    logger.debug(f"{config=}")

    if config.select.picker not in PICKERS:
        raise ConfigError(
            f"unknown picker {config.select.picker!r}, expected one of {tuple(PICKERS)}"
        )
    return config
