"""Aggregate license metrics for classified dependencies."""
from __future__ import annotations

from license_classifier.models.scan import ClassifiedDependency, LicenseSummary


def summarize_licenses(classified: list[ClassifiedDependency]) -> LicenseSummary:
    """Compute license metrics for a scan.

    Dependencies without any license label count as unknown. Labels that
    were classified through the fallback count as unrecognized.

    Args:
        classified: Dependencies with their license classification.

    Returns:
        LicenseSummary with counts per category and risk tier.
    """
    risk_counts = {"low": 0, "medium": 0, "high": 0}
    unique: set[str] = set()
    copyleft = 0
    unknown = 0
    unrecognized = 0
    osi_approved = 0

    for item in classified:
        info = item.license_info
        if info is None:
            unknown += 1
            continue

        if item.dependency.license is not None:
            unique.add(item.dependency.license)
        if info.is_copyleft:
            copyleft += 1
        if info.is_osi_approved:
            osi_approved += 1
        if not item.recognized:
            unrecognized += 1
        risk_counts[info.risk.value] += 1

    return LicenseSummary(
        total_dependencies=len(classified),
        copyleft_count=copyleft,
        unknown_license_count=unknown,
        unrecognized_license_count=unrecognized,
        osi_approved_count=osi_approved,
        unique_licenses=len(unique),
        risk_counts=risk_counts,
    )
