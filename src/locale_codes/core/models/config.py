"""Settings for dataset location, locale defaults and logging."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DataConfig(BaseModel):
    """Dataset location configuration."""

    data_dir: Path | None = None  # None = packaged dataset
    languages_file: str = "languages.json"
    countries_file: str = "countries.json"
    currencies_file: str = "currencies.json"
    scripts_file: str = "scripts.json"
    regions_file: str = "regions.json"

    def file_for(self, registry: str) -> str:
        """Get the dataset file name for a registry."""
        return getattr(self, f"{registry}_file")


class LocaleConfig(BaseModel):
    """Locale builder defaults."""

    default_mode: Literal["strict", "lenient"] = "strict"
    separator: Literal["-", "_"] = "-"


class LogConfig(BaseModel):
    """Log level and output format for the CLI."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    structured: bool = False


class Config(BaseSettings):
    """Settings read from the environment (prefix LOCALE_CODES_) or YAML."""

    model_config = SettingsConfigDict(
        env_prefix="LOCALE_CODES_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    data: DataConfig = Field(default_factory=DataConfig)
    locale: LocaleConfig = Field(default_factory=LocaleConfig)
    logs: LogConfig = Field(default_factory=LogConfig)
    eager_load: bool = False

    @classmethod
    def from_yaml(cls, path: Path | str) -> Config:
        """Read settings from a YAML file; an empty file yields the defaults."""
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"No settings file at {path}")
        return cls.from_dict(yaml.safe_load(path.read_text(encoding="utf-8")) or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Build settings from plain data, e.g. a parsed YAML mapping."""
        return cls(**data)

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible settings (paths rendered as strings)."""
        return self.model_dump(mode="json")

    def to_yaml(self, path: Path | str) -> None:
        """Write settings to a YAML file, creating parent directories."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(yaml.safe_dump(self.to_dict(), sort_keys=False), encoding="utf-8")

    def merge(self, other: Config) -> Config:
        """Overlay ``other`` on these settings section by section."""
        return Config.from_dict(_overlay(self.model_dump(), other.model_dump()))


def _overlay(base: dict[str, Any], top: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in top.items():
        below = merged.get(key)
        if isinstance(below, dict) and isinstance(value, dict):
            value = _overlay(below, value)
        merged[key] = value
    return merged
