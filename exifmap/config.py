# -*- coding: utf-8 -*-

from typing import Literal, Optional, get_args

import toml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError


IfdName = Literal["0th", "Exif", "GPS", "Interop", "1st"]
LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS = list(get_args(LogLevel))


class ExifMapConfig(BaseModel):
    map_link: bool = False
    json_output: bool = False
    json_indent: int = Field(default=2, ge=0)
    # longer display strings are cut and marked as truncated
    max_value_length: Optional[int] = Field(default=None, gt=0)
    ifds: list[IfdName] = ["0th", "Exif", "GPS", "Interop", "1st"]
    log_level: LogLevel = "WARNING"
    model_config = ConfigDict(extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value):
        return value.upper() if isinstance(value, str) else value


def load_config(path: str | None = None) -> ExifMapConfig:
    """Load settings from a TOML file, top level or under an [exifmap] table."""
    if path is None:
        return ExifMapConfig()
    try:
        data = toml.load(path)
    except (OSError, toml.TomlDecodeError) as e:
        raise ConfigError(f"Failed to read config {path}: {e}") from e
    data = data.get("exifmap", data)
    try:
        return ExifMapConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e
