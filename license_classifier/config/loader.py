"""Locate and read the license-classifier policy file."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from license_classifier.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from license_classifier.exceptions import ConfigurationError
from license_classifier.models.config import ClassifierConfig


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Return the policy file that applies to a directory.

    ``.license-classifier.yaml`` wins over ``.license-classifier.yml`` when
    both are present.

    Args:
        start_dir: Directory to look in, the working directory if omitted.

    Returns:
        The first existing candidate, or None.
    """
    directory = start_dir or Path.cwd()
    candidates = (directory / name for name in DEFAULT_CONFIG_NAMES)
    return next((path for path in candidates if path.exists()), None)


def load_config_file(path: Path) -> ClassifierConfig:
    """Parse a YAML policy file into a ClassifierConfig.

    A file holding nothing but whitespace or comments yields the defaults,
    so an empty policy file behaves like no policy file.

    Raises:
        ConfigurationError: The file is unreadable, is not YAML, is not a
            mapping, or holds unknown keys or out-of-range values.
    """
    try:
        data: Any = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file '{path}': {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in '{path}': {e}") from e

    if data is None:
        return get_default_config()

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration in '{path}': "
            f"expected a mapping at root level, got {type(data).__name__}"
        )

    try:
        return ClassifierConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in '{path}': {format_validation_errors(e)}"
        ) from e


def format_validation_errors(error: ValidationError) -> str:
    """Flatten a pydantic error into ``field.path: message`` pairs.

    Shared by the policy file and the dependency manifest loaders. Pairs
    are joined with ``"; "``; errors without a location report ``root``.
    """
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'root'}: {err['msg']}"
        for err in error.errors()
    )


def load_config(config_path: str | None = None) -> ClassifierConfig:
    """Resolve the effective configuration for a scan.

    An explicit ``--config`` path is always read. Without one, a policy file
    in the working directory is used when present, and the defaults (no
    policy, enrichment on) otherwise.

    Raises:
        ConfigurationError: The chosen file cannot be loaded.
    """
    path = Path(config_path) if config_path is not None else find_config_file()
    if path is None:
        return get_default_config()
    return load_config_file(path)
