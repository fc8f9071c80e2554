"""Pydantic data models for license-classifier."""

from license_classifier.models.config import ClassifierConfig
from license_classifier.models.dependency import Dependency, Ecosystem
from license_classifier.models.license import LicenseInfo, RiskLevel
from license_classifier.models.policy import PolicyViolation
from license_classifier.models.scan import (
    ClassifiedDependency,
    IgnoredPackagesSummary,
    LicenseSummary,
    ScanOptions,
    ScanResult,
    Verbosity,
)

__all__ = [
    "ClassifiedDependency",
    "ClassifierConfig",
    "Dependency",
    "Ecosystem",
    "IgnoredPackagesSummary",
    "LicenseInfo",
    "LicenseSummary",
    "PolicyViolation",
    "RiskLevel",
    "ScanOptions",
    "ScanResult",
    "Verbosity",
]
