"""Best-effort license enrichment from public package registries.

Dependencies that arrive without a license label are looked up in the
registry of their ecosystem. Lookups run in fixed-size batches: requests
inside a batch are concurrent, and a batch starts only after the previous
one has fully settled. A failed lookup leaves the dependency's license as
None; nothing here is fatal to the scan.
"""
import asyncio
import logging
from typing import Optional, Sequence

import httpx

from license_classifier.constants import DEFAULT_BATCH_SIZE, DEFAULT_REQUEST_TIMEOUT
from license_classifier.exceptions import NetworkError
from license_classifier.models.dependency import Dependency
from license_classifier.registries.base import BaseRegistry
from license_classifier.registries.npm import NpmRegistry
from license_classifier.registries.pypi import PyPIRegistry

logger = logging.getLogger(__name__)

# Ecosystems are enriched in this order
DEFAULT_REGISTRIES: tuple[BaseRegistry, ...] = (NpmRegistry(), PyPIRegistry())


def _batches(items: list[Dependency], size: int) -> list[list[Dependency]]:
    return [items[i:i + size] for i in range(0, len(items), size)]


async def _enrich_one(
    registry: BaseRegistry,
    dep: Dependency,
    client: httpx.AsyncClient,
    timeout: float,
) -> bool:
    """Fill in the license of a single dependency.

    Returns:
        True if a license was written onto the dependency.
    """
    try:
        license_str = await registry.fetch_license(
            client, dep.name, dep.version, timeout=timeout
        )
    except NetworkError as e:
        # Lookup failures degrade to "license unknown"
        logger.debug("License lookup skipped for %s: %s", dep.display_name, e)
        return False

    if license_str is None or dep.license is not None:
        return False

    dep.license = license_str
    return True


async def _enrich_ecosystem(
    registry: BaseRegistry,
    dependencies: Sequence[Dependency],
    client: httpx.AsyncClient,
    batch_size: int,
    timeout: float,
) -> int:
    pending = [
        dep
        for dep in dependencies
        if dep.ecosystem == registry.ecosystem and dep.license is None
    ]
    if not pending:
        return 0

    enriched = 0
    for batch in _batches(pending, batch_size):
        results = await asyncio.gather(
            *(_enrich_one(registry, dep, client, timeout) for dep in batch)
        )
        enriched += sum(1 for ok in results if ok)

    logger.debug(
        "Enriched %d of %d %s dependencies",
        enriched,
        len(pending),
        registry.ecosystem.value,
    )
    return enriched


async def enrich_licenses(
    dependencies: Sequence[Dependency],
    client: Optional[httpx.AsyncClient] = None,
    registries: Optional[Sequence[BaseRegistry]] = None,
    batch_size: int = DEFAULT_BATCH_SIZE,
    timeout: float = DEFAULT_REQUEST_TIMEOUT,
) -> int:
    """Look up missing licenses in package registries.

    Only dependencies whose license is None are queried, and an existing
    license is never overwritten. Dependencies are updated in place.

    Args:
        dependencies: Dependencies to enrich.
        client: Optional shared httpx.AsyncClient. If not provided, one is
            created for the duration of the call.
        registries: Registries to query, one per supported ecosystem.
            Defaults to npm then PyPI.
        batch_size: Maximum number of concurrent requests.
        timeout: Per-request timeout in seconds.

    Returns:
        Number of dependencies whose license was filled in.
    """
    if batch_size < 1:
        raise ValueError(f"batch_size must be at least 1, got {batch_size}")

    active = DEFAULT_REGISTRIES if registries is None else tuple(registries)

    async def run(c: httpx.AsyncClient) -> int:
        total = 0
        for registry in active:
            total += await _enrich_ecosystem(
                registry, dependencies, c, batch_size, timeout
            )
        return total

    if client is not None:
        enriched = await run(client)
    else:
        async with httpx.AsyncClient() as new_client:
            enriched = await run(new_client)

    logger.info("Recovered %d license(s) from package registries", enriched)
    return enriched
