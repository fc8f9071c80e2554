"""Scanner module for dependency loading, enrichment and classification."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from license_classifier.analysis.filtering import filter_ignored_packages
from license_classifier.analysis.policy import evaluate_license_policy
from license_classifier.analysis.resolver import is_recognized_license, resolve_license
from license_classifier.analysis.summary import summarize_licenses
from license_classifier.config.loader import format_validation_errors
from license_classifier.enrichment import enrich_licenses
from license_classifier.exceptions import ScanError
from license_classifier.models.config import ClassifierConfig
from license_classifier.models.dependency import Dependency
from license_classifier.models.scan import (
    ClassifiedDependency,
    IgnoredPackagesSummary,
    ScanResult,
)

logger = logging.getLogger(__name__)

_DEPENDENCY_LIST = TypeAdapter(list[Dependency])


def load_dependencies(path: Path) -> list[Dependency]:
    """Load dependency records from a JSON manifest.

    The manifest is either a list of records or an object holding the list
    under a ``dependencies`` key. Each record needs ``name``, ``version`` and
    ``ecosystem``; ``license`` is optional.

    Args:
        path: Path to the JSON manifest.

    Returns:
        List of Dependency records in file order.

    Raises:
        ScanError: If the file cannot be read, is not JSON, or records
            fail validation.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ScanError(f"Cannot read dependency manifest '{path}': {e}") from e

    try:
        data: Any = json.loads(content)
    except json.JSONDecodeError as e:
        raise ScanError(f"Invalid JSON in '{path}': {e}") from e

    if isinstance(data, dict):
        data = data.get("dependencies")

    if not isinstance(data, list):
        raise ScanError(
            f"Invalid dependency manifest '{path}': "
            "expected a list of dependencies or a 'dependencies' key"
        )

    try:
        return _DEPENDENCY_LIST.validate_python(data)
    except ValidationError as e:
        raise ScanError(
            f"Invalid dependency manifest '{path}': {format_validation_errors(e)}"
        ) from e


def classify_dependencies(
    dependencies: list[Dependency],
) -> list[ClassifiedDependency]:
    """Classify the current license of every dependency.

    Args:
        dependencies: Dependencies, enriched or not.

    Returns:
        ClassifiedDependency list sorted case-insensitively by name.
    """
    classified = [
        ClassifiedDependency(
            dependency=dep,
            license_info=resolve_license(dep.license),
            recognized=is_recognized_license(dep.license),
        )
        for dep in dependencies
    ]
    return sorted(
        classified,
        key=lambda c: (c.dependency.name.lower(), c.dependency.version),
    )


async def run_scan(
    dependencies: list[Dependency],
    config: ClassifierConfig,
    client: Optional[httpx.AsyncClient] = None,
) -> ScanResult:
    """Enrich, classify and evaluate a list of dependencies.

    Args:
        dependencies: Dependencies from the upstream manifest.
        config: Configuration for enrichment and policy checking.
        client: Optional shared httpx.AsyncClient for registry lookups.

    Returns:
        ScanResult with classifications, summary and policy violations.
    """
    # Ignored packages never reach the registries
    filter_result = filter_ignored_packages(dependencies, config)

    ignored_summary = None
    if filter_result.ignored_count > 0:
        ignored_summary = IgnoredPackagesSummary(
            ignored_count=filter_result.ignored_count,
            ignored_names=filter_result.ignored_names,
        )

    enriched = 0
    if config.skip_enrichment:
        logger.debug("Registry enrichment disabled by configuration")
    else:
        enriched = await enrich_licenses(
            filter_result.dependencies,
            client=client,
            batch_size=config.batch_size,
            timeout=config.request_timeout,
        )

    classified = classify_dependencies(filter_result.dependencies)

    return ScanResult(
        dependencies=classified,
        summary=summarize_licenses(classified),
        enriched_count=enriched,
        policy_violations=evaluate_license_policy(classified, config),
        ignored_packages_summary=ignored_summary,
    )
