"""Configuration handling for license-classifier."""
from __future__ import annotations

from license_classifier.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from license_classifier.config.loader import (
    find_config_file,
    load_config,
    load_config_file,
)
from license_classifier.models.config import ClassifierConfig

__all__ = [
    "ClassifierConfig",
    "DEFAULT_CONFIG_NAMES",
    "find_config_file",
    "get_default_config",
    "load_config",
    "load_config_file",
]
