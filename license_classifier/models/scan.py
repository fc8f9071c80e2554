"""Scan-related Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, Field

from license_classifier.models.dependency import Dependency
from license_classifier.models.license import LicenseInfo
from license_classifier.models.policy import PolicyViolation


class Verbosity(Enum):
    """Output verbosity levels."""

    QUIET = "quiet"
    NORMAL = "normal"
    VERBOSE = "verbose"


class ScanOptions(BaseModel):
    """Options for a license scan operation."""

    model_config = {"extra": "forbid"}

    format: Literal["terminal", "json"] = Field(
        default="terminal",
        description="Output format for scan results",
    )
    verbosity: Verbosity = Field(
        default=Verbosity.NORMAL,
        description="Output verbosity level (quiet, normal, verbose)",
    )


class ClassifiedDependency(BaseModel):
    """A dependency paired with the classification of its current license."""

    model_config = {"extra": "forbid"}

    dependency: Dependency
    license_info: Optional[LicenseInfo] = Field(
        default=None,
        description="Classification, None when the dependency has no license",
    )
    recognized: bool = Field(
        default=False,
        description="Whether the license label matched the license catalog",
    )


class IgnoredPackagesSummary(BaseModel):
    """Summary of packages that were ignored during scanning."""

    model_config = {"extra": "forbid"}

    ignored_count: int = Field(
        default=0,
        description="Number of packages that were ignored",
    )
    ignored_names: Optional[list[str]] = Field(
        default=None,
        description="Names of packages that were ignored",
    )


class LicenseSummary(BaseModel):
    """Aggregate license metrics for a set of classified dependencies."""

    model_config = {"extra": "forbid"}

    total_dependencies: int = 0
    copyleft_count: int = 0
    unknown_license_count: int = Field(
        default=0, description="Dependencies with no license label at all"
    )
    unrecognized_license_count: int = Field(
        default=0, description="Dependencies whose label is not in the catalog"
    )
    osi_approved_count: int = 0
    unique_licenses: int = Field(default=0, description="Distinct raw license labels")
    risk_counts: dict[str, int] = Field(
        default_factory=lambda: {"low": 0, "medium": 0, "high": 0},
        description="Dependencies per risk tier",
    )


class ScanResult(BaseModel):
    """Result of a license scan operation."""

    model_config = {"extra": "forbid"}

    dependencies: list[ClassifiedDependency] = Field(
        default_factory=list,
        description="Dependencies with license classification",
    )
    summary: LicenseSummary = Field(default_factory=LicenseSummary)
    enriched_count: int = Field(
        default=0, description="Licenses recovered from package registries"
    )
    policy_violations: list[PolicyViolation] = Field(
        default_factory=list,
        description="List of license policy violations",
    )
    ignored_packages_summary: Optional[IgnoredPackagesSummary] = Field(
        default=None,
        description="Summary of packages ignored during scanning",
    )

    @property
    def has_issues(self) -> bool:
        """Check if the scan result has any policy violations.

        Returns:
            True if policy_violations exist, False otherwise.
        """
        return len(self.policy_violations) > 0
