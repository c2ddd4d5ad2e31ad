"""Configuration loading."""

from moss.config.settings import CONFIG_FILE, MossConfig, SiteSettings

__all__ = ["CONFIG_FILE", "MossConfig", "SiteSettings"]
