"""Configuration file loading."""

import logging
from pathlib import Path

import yaml

from brandset.config.models import BrandsetConfig

logger = logging.getLogger(__name__)

CONFIG_NAMES = ["brandset.yaml", "brandset.yml", ".brandset.yaml", ".brandset.yml"]


def load_config(config_path: Path) -> BrandsetConfig:
    """Load configuration from a YAML file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    logger.debug("Loaded configuration from %s", config_path)
    return BrandsetConfig(**data)


def find_config_file(start_dir: Path) -> Path | None:
    """Search for configuration file in directory and parents."""
    current = start_dir.resolve()
    while current != current.parent:
        for name in CONFIG_NAMES:
            config_path = current / name
            if config_path.exists():
                return config_path
        current = current.parent

    return None
