"""JSON output formatter for license classification results."""
import json
from datetime import datetime, timezone
from typing import Any, Optional

from license_classifier import __version__
from license_classifier.constants import LEGAL_DISCLAIMER
from license_classifier.models.license import LicenseInfo
from license_classifier.models.scan import ScanResult


def _license_info_dict(info: Optional[LicenseInfo]) -> Optional[dict[str, Any]]:
    if info is None:
        return None
    return info.model_dump(mode="json")


class ScanJsonFormatter:
    """Format classification results as JSON output.

    Consumed by CI tooling and report generators downstream.
    """

    def format_scan_result(self, result: ScanResult) -> str:
        """Format scan result as JSON string.

        Args:
            result: The scan result to format.

        Returns:
            JSON string representation of the scan result.
        """
        output = {
            "scan_metadata": self._build_scan_metadata(),
            "summary": self._build_summary(result),
            "dependencies": self._build_dependencies(result),
            "policy_violations": [
                violation.model_dump(mode="json")
                for violation in result.policy_violations
            ],
        }
        return json.dumps(output, indent=2)

    def format_license_infos(
        self, labels: list[str], infos: list[Optional[LicenseInfo]]
    ) -> str:
        """Format classifications of raw license labels as JSON.

        Args:
            labels: Raw labels as given by the user.
            infos: Classification for each label, in the same order.

        Returns:
            JSON array of {"input", "classification"} objects.
        """
        output = [
            {"input": label, "classification": _license_info_dict(info)}
            for label, info in zip(labels, infos)
        ]
        return json.dumps(output, indent=2)

    def _build_scan_metadata(self) -> dict[str, Any]:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        return {
            "generated_at": timestamp,
            "tool_version": __version__,
            "disclaimer": LEGAL_DISCLAIMER,
            "disclaimer_type": "informational",
        }

    def _build_summary(self, result: ScanResult) -> dict[str, Any]:
        """Build summary section.

        Args:
            result: The scan result.

        Returns:
            Dictionary with license metrics and overall status.
        """
        ignored_packages = None
        if result.ignored_packages_summary and result.ignored_packages_summary.ignored_count > 0:
            ignored_packages = {
                "count": result.ignored_packages_summary.ignored_count,
                "names": result.ignored_packages_summary.ignored_names or [],
            }

        summary = result.summary.model_dump(mode="json")
        summary.update({
            "enriched_count": result.enriched_count,
            "policy_violations_count": len(result.policy_violations),
            "ignored_packages": ignored_packages,
            "has_issues": result.has_issues,
            "overall_status": "POLICY_VIOLATIONS" if result.has_issues else "PASS",
        })
        return summary

    def _build_dependencies(self, result: ScanResult) -> list[dict[str, Any]]:
        return [
            {
                "name": item.dependency.name,
                "version": item.dependency.version,
                "ecosystem": item.dependency.ecosystem.value,
                "license": item.dependency.license,
                "recognized": item.recognized,
                "classification": _license_info_dict(item.license_info),
            }
            for item in result.dependencies
        ]
