"""Package registry lookups used for license enrichment."""

from license_classifier.registries.base import BaseRegistry
from license_classifier.registries.npm import NpmRegistry
from license_classifier.registries.pypi import PyPIRegistry

__all__ = [
    "BaseRegistry",
    "NpmRegistry",
    "PyPIRegistry",
]
