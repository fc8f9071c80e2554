"""Default configuration values for license-classifier."""

from __future__ import annotations

from license_classifier.models.config import ClassifierConfig

# Default configuration file names to search for
DEFAULT_CONFIG_NAMES = [".license-classifier.yaml", ".license-classifier.yml"]


def get_default_config() -> ClassifierConfig:
    """Get the default configuration.

    Returns:
        ClassifierConfig with all defaults (no policy, enrichment enabled).
    """
    return ClassifierConfig()
