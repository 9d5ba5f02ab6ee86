import os
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, PositiveInt


class BufferConfig(BaseModel):
    max_lines: PositiveInt = 1000


class PromptConfig(BaseModel):
    max_length: PositiveInt = 1023


class DisplayConfig(BaseModel):
    title: str = "ZEPTEX EDITOR version 1.0"
    placeholder: str = "~"


type LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(BaseModel):
    level: LogLevel = "WARNING"
    file: Path | None = None


class Config(BaseModel):
    buffer: BufferConfig = BufferConfig()
    prompt: PromptConfig = PromptConfig()
    display: DisplayConfig = DisplayConfig()
    logging: LoggingConfig = LoggingConfig()


def get_config_path() -> Path:
    try:
        xdg_config_home = Path(os.environ["XDG_CONFIG_HOME"])
    except KeyError:
        xdg_config_home = Path.home() / ".config"
    return xdg_config_home / "zeptex" / "config.toml"


def load_config(config_path: Path) -> Config:
    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return Config()
    else:
        return Config.model_validate(data)


@lru_cache(1)
def get_config() -> Config:
    return load_config(get_config_path())
