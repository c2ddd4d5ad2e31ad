"""Configuration for moss.

Settings come from ``.moss/config.toml`` inside the source folder and from
``MOSS_``-prefixed environment variables. The structural heuristics
(homepage priority, flat-site threshold) are deliberately not configurable.
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from moss.exceptions import InputError

logger = logging.getLogger(__name__)

CONFIG_FILE = Path(".moss") / "config.toml"


def _deep_merge(destination: dict[str, Any], source: Mapping[str, Any]) -> dict[str, Any]:
    """Merge source into destination, with source values overwriting."""
    for key, value in source.items():
        if isinstance(value, Mapping) and isinstance(destination.get(key), Mapping):
            destination[key] = _deep_merge(dict(destination[key]), value)
        else:
            destination[key] = value
    return destination


class SiteSettings(BaseModel):
    """Site-wide metadata."""

    site_name: str | None = Field(default=None, description="Overrides the title inferred from the homepage")
    author: str | None = Field(default=None, description="Emitted as a meta author tag")
    description: str | None = Field(default=None, description="Emitted as a meta description tag")


class MossConfig(BaseSettings):
    """Root configuration.

    Supports environment variable overrides with the pattern
    ``MOSS_SECTION__KEY`` (e.g. ``MOSS_SITE__SITE_NAME``).
    """

    site: SiteSettings = Field(default_factory=SiteSettings)

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="MOSS_",
        env_nested_delimiter="__",
    )

    @classmethod
    def load(cls, source_root: Path | None = None) -> MossConfig:
        """Load configuration for ``source_root``.

        Priority (highest to lowest):
        1. Environment variables (MOSS_SECTION__KEY)
        2. Config file (.moss/config.toml)
        3. Defaults
        """
        root_path = source_root if source_root is not None else Path.cwd()
        config_file = root_path / CONFIG_FILE

        file_settings: dict[str, Any] = {}
        if config_file.is_file():
            try:
                with config_file.open("rb") as f:
                    file_settings = tomllib.load(f)
            except tomllib.TOMLDecodeError as exc:
                raise InputError(str(config_file), f"Invalid config file {config_file}: {exc}") from exc
            logger.debug("Loaded config from %s", config_file)

        env_settings = cls().model_dump(exclude_unset=True)
        merged = _deep_merge(file_settings, env_settings)

        try:
            return cls.model_validate(merged)
        except ValidationError as exc:
            raise InputError(str(config_file), f"Invalid configuration in {config_file}: {exc}") from exc
