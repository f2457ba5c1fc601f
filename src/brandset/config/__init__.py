"""Configuration module."""

from brandset.config.models import BrandsetConfig, FontSpec, MetadataConfig, ThemeConfig
from brandset.config.loader import load_config

__all__ = ["BrandsetConfig", "FontSpec", "MetadataConfig", "ThemeConfig", "load_config"]
