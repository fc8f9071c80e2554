"""Base registry interface."""

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx

from license_classifier.constants import DEFAULT_REQUEST_TIMEOUT
from license_classifier.exceptions import NetworkError
from license_classifier.models.dependency import Ecosystem


class BaseRegistry(ABC):
    """Abstract base class for package registry license lookups.

    Subclasses know how to address one ecosystem's registry and how to pull
    a raw license label out of its JSON response. Failures surface as
    NetworkError so callers can decide whether they matter.
    """

    ecosystem: Ecosystem

    @abstractmethod
    def build_url(self, package_name: str, version: str) -> str:
        """Build the metadata URL for an exact package version.

        Args:
            package_name: The package name.
            version: The exact package version.

        Returns:
            Absolute URL of the registry's JSON metadata.
        """

    @abstractmethod
    def extract_license(self, data: Any) -> Optional[str]:
        """Extract a raw license label from decoded registry JSON.

        Args:
            data: Decoded JSON body. May be any JSON value.

        Returns:
            Raw license label, or None if the response carries none.
        """

    async def fetch_license(
        self,
        client: httpx.AsyncClient,
        package_name: str,
        version: str,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ) -> Optional[str]:
        """Look up the license label of a package version.

        Args:
            client: Shared HTTP client.
            package_name: The package name.
            version: The exact package version.
            timeout: Seconds after which the request is abandoned.

        Returns:
            Raw license label, or None if the registry has none.

        Raises:
            NetworkError: On transport failure, an unusable URL, timeout,
                non-success status or a body that is not JSON.
        """
        url = self.build_url(package_name, version)
        try:
            response = await asyncio.wait_for(
                client.get(url, timeout=httpx.Timeout(timeout)),
                timeout=timeout,
            )
        except asyncio.TimeoutError as e:
            raise NetworkError(
                f"Timed out fetching {package_name}@{version} after {timeout}s"
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NetworkError(f"Failed to fetch {package_name}@{version}: {e}") from e

        if not response.is_success:
            raise NetworkError(
                f"Registry returned HTTP {response.status_code} "
                f"for {package_name}@{version}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise NetworkError(
                f"Invalid JSON from registry for {package_name}@{version}"
            ) from e

        return self.extract_license(data)
