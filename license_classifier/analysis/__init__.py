"""License analysis logic for license-classifier."""
from license_classifier.analysis.catalog import (
    LICENSE_ALIASES,
    LICENSE_CATALOG,
    CatalogEntry,
)
from license_classifier.analysis.filtering import FilterResult, filter_ignored_packages
from license_classifier.analysis.policy import evaluate_license_policy
from license_classifier.analysis.resolver import is_recognized_license, resolve_license
from license_classifier.analysis.summary import summarize_licenses

__all__ = [
    "CatalogEntry",
    "FilterResult",
    "LICENSE_ALIASES",
    "LICENSE_CATALOG",
    "evaluate_license_policy",
    "filter_ignored_packages",
    "is_recognized_license",
    "resolve_license",
    "summarize_licenses",
]
