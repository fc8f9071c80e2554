"""npm registry license lookup."""

from typing import Any, Optional
from urllib.parse import quote

from license_classifier.constants import NPM_REGISTRY_URL
from license_classifier.models.dependency import Ecosystem
from license_classifier.registries.base import BaseRegistry


class NpmRegistry(BaseRegistry):
    """Registry lookup against the public npm registry."""

    ecosystem = Ecosystem.NPM

    def build_url(self, package_name: str, version: str) -> str:
        # Scoped names ("@scope/pkg") travel as a single path segment
        return (
            f"{NPM_REGISTRY_URL}/{quote(package_name, safe='')}/"
            f"{quote(version, safe='')}"
        )

    def extract_license(self, data: Any) -> Optional[str]:
        """Extract license from an npm version document.

        The ``license`` field is either a bare string or, in older
        packages, an object with a ``type`` field.

        Args:
            data: Decoded npm version document.

        Returns:
            Raw license label, or None if not present.
        """
        if not isinstance(data, dict):
            return None

        license_field = data.get("license")
        if isinstance(license_field, str):
            return license_field if license_field.strip() else None

        if isinstance(license_field, dict):
            license_type = license_field.get("type")
            if isinstance(license_type, str) and license_type.strip():
                return license_type

        return None
