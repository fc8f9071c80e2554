"""PyPI license lookup."""

from typing import Any, Optional
from urllib.parse import quote

from license_classifier.constants import PYPI_BASE_URL
from license_classifier.models.dependency import Ecosystem
from license_classifier.registries.base import BaseRegistry

OSI_CLASSIFIER_PREFIX = "License :: OSI Approved ::"

# Placeholder PyPI reports when the author left the field empty
UNKNOWN_LICENSE = "UNKNOWN"


def _usable(value: Any) -> Optional[str]:
    """Return value if it is a meaningful license string."""
    if not isinstance(value, str):
        return None
    if not value.strip() or value.strip() == UNKNOWN_LICENSE:
        return None
    return value


def license_from_classifiers(classifiers: Any) -> Optional[str]:
    """Extract a license name from trove classifiers.

    Args:
        classifiers: The ``info.classifiers`` list from PyPI.

    Returns:
        Text after the last ``::`` of the first OSI-approved license
        classifier, or None if there is none.
    """
    if not isinstance(classifiers, list):
        return None

    for classifier in classifiers:
        if isinstance(classifier, str) and classifier.startswith(OSI_CLASSIFIER_PREFIX):
            name = classifier.split("::")[-1].strip()
            if name:
                return name

    return None


class PyPIRegistry(BaseRegistry):
    """Registry lookup against the PyPI JSON API."""

    ecosystem = Ecosystem.PIP

    def build_url(self, package_name: str, version: str) -> str:
        return (
            f"{PYPI_BASE_URL}/{quote(package_name, safe='')}/"
            f"{quote(version, safe='')}/json"
        )

    def extract_license(self, data: Any) -> Optional[str]:
        """Extract license from a PyPI release document.

        Checks ``info.license``, then ``info.license_expression`` (PEP 639
        metadata), then the OSI-approved license classifiers.

        Args:
            data: Decoded PyPI JSON API response.

        Returns:
            Raw license label, or None if not found.
        """
        if not isinstance(data, dict):
            return None

        info = data.get("info")
        if not isinstance(info, dict):
            return None

        license_str = _usable(info.get("license"))
        if license_str is not None:
            return license_str

        expression = _usable(info.get("license_expression"))
        if expression is not None:
            return expression

        return license_from_classifiers(info.get("classifiers"))
