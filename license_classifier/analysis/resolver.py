"""License label resolution.

Maps raw, free-form license labels onto catalog classifications. Resolution
is a pure function of the label: exact catalog key, then exact alias, then
the first alias contained in the label, then a medium-risk fallback for
labels nobody recognizes.
"""
from __future__ import annotations

from typing import Optional

from license_classifier.analysis.catalog import LICENSE_ALIASES, LICENSE_CATALOG
from license_classifier.models.license import LicenseInfo, RiskLevel


def _match_canonical(label: str) -> Optional[str]:
    """Find the catalog key a trimmed label refers to.

    Args:
        label: License label, already stripped of surrounding whitespace.

    Returns:
        Canonical catalog key, or None if no matching path applies.
    """
    if label in LICENSE_CATALOG:
        return label

    lowered = label.lower()
    if lowered in LICENSE_ALIASES:
        return LICENSE_ALIASES[lowered]

    # First alias in definition order wins
    for alias, canonical in LICENSE_ALIASES.items():
        if alias in lowered:
            return canonical

    return None


def _catalog_info(canonical: str) -> LicenseInfo:
    entry = LICENSE_CATALOG[canonical]
    return LicenseInfo(
        name=canonical,
        spdx_id=entry.spdx_id,
        is_osi_approved=entry.is_osi_approved,
        is_copyleft=entry.is_copyleft,
        risk=entry.risk,
    )


def resolve_license(raw: Optional[str]) -> Optional[LicenseInfo]:
    """Classify a raw license label.

    Args:
        raw: License label as found on the dependency, or None when the
            dependency carries no license at all.

    Returns:
        LicenseInfo for any string, including empty and unrecognized ones.
        None only when raw is None.
    """
    if raw is None:
        return None

    label = raw.strip()
    canonical = _match_canonical(label)
    if canonical is not None:
        return _catalog_info(canonical)

    # Unrecognized: neither provably safe nor dangerous, flag for review
    return LicenseInfo(
        name=label,
        spdx_id=label,
        is_osi_approved=False,
        is_copyleft=False,
        risk=RiskLevel.MEDIUM,
    )


def is_recognized_license(raw: Optional[str]) -> bool:
    """Check whether a raw label matches the license catalog.

    Args:
        raw: License label or None.

    Returns:
        True if resolve_license() classifies the label from the catalog
        rather than falling back.
    """
    if raw is None:
        return False
    return _match_canonical(raw.strip()) is not None
