"""Configuration loading utilities for textfold."""
from __future__ import annotations

import codecs
from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .paths import default_config_path
from .utils.text import is_ascii_compatible


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Logging verbosity level")

    def normalized_level(self) -> str:
        return self.level.upper()


class EncodingConfig(BaseModel):
    internal_encoding: str = Field(
        default="UTF-8",
        description="Interpretation encoding used by length and substring helpers",
    )
    func_overload: bool = Field(
        default=False,
        description="Make length and substring helpers count characters instead of bytes",
    )

    @field_validator("internal_encoding")
    @classmethod
    def _validate_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding: {value}") from exc
        if not is_ascii_compatible(value):
            raise ValueError(f"Encoding is not ASCII-compatible: {value}")
        return value


class TransliterationConfig(BaseModel):
    locale: Optional[str] = Field(
        default=None,
        description="Locale enabling extra digraphs (de_DE, da_DK, ca, ...)",
    )


class FlattenConfig(BaseModel):
    max_depth: Optional[int] = Field(default=None, ge=1)


class AppConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    encoding: EncodingConfig = Field(default_factory=EncodingConfig)
    transliteration: TransliterationConfig = Field(default_factory=TransliterationConfig)
    flatten: FlattenConfig = Field(default_factory=FlattenConfig)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    yield Path.cwd() / ".textfold" / "config.yaml"
    yield default_config_path()


def load_config(path: Optional[Path] = None) -> AppConfig:
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
            try:
                return AppConfig.model_validate(data)
            except ValidationError as exc:
                raise ValueError(f"Invalid configuration in {candidate}: {exc}") from exc
    return DEFAULT_CONFIG.model_copy(deep=True)


def dump_default_config(target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(DEFAULT_CONFIG.model_dump(mode="json"), handle, sort_keys=False)
