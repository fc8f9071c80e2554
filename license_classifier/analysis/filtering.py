"""Dependency filtering for ignored packages configuration."""

from __future__ import annotations

from typing import NamedTuple

from license_classifier.models.config import ClassifierConfig
from license_classifier.models.dependency import Dependency


class FilterResult(NamedTuple):
    """Result of filtering dependencies.

    Attributes:
        dependencies: Dependencies kept after filtering.
        ignored_count: Number of dependencies that were ignored.
        ignored_names: Names of dependencies that were ignored.
    """

    dependencies: list[Dependency]
    ignored_count: int
    ignored_names: list[str]


def filter_ignored_packages(
    dependencies: list[Dependency],
    config: ClassifierConfig,
) -> FilterResult:
    """Filter out ignored packages from the list.

    Package name matching is case-sensitive.

    Args:
        dependencies: Dependencies to filter.
        config: Configuration with ignored_packages list.

    Returns:
        FilterResult with kept dependencies and summary of ignored ones.
        If ignored_packages is None or empty, returns all dependencies.
    """
    if not config.ignored_packages:
        return FilterResult(
            dependencies=dependencies,
            ignored_count=0,
            ignored_names=[],
        )

    ignored_set = set(config.ignored_packages)
    kept: list[Dependency] = []
    ignored_names: list[str] = []

    for dep in dependencies:
        if dep.name in ignored_set:
            ignored_names.append(dep.name)
        else:
            kept.append(dep)

    return FilterResult(
        dependencies=kept,
        ignored_count=len(ignored_names),
        ignored_names=ignored_names,
    )
