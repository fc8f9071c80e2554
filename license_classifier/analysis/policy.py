"""License policy checking against configuration."""
from __future__ import annotations

from license_classifier.models.config import ClassifierConfig
from license_classifier.models.policy import PolicyViolation
from license_classifier.models.scan import ClassifiedDependency


def evaluate_license_policy(
    classified: list[ClassifiedDependency],
    config: ClassifierConfig,
) -> list[PolicyViolation]:
    """Check classified dependencies against the configured policy.

    Rules are evaluated independently, so one dependency can produce
    several violations.

    Args:
        classified: Dependencies with their license classification.
        config: Configuration holding the policy settings.

    Returns:
        List of policy violations. Empty when no policy is configured.
    """
    violations: list[PolicyViolation] = []
    allowed_set = (
        set(config.allowed_licenses) if config.allowed_licenses is not None else None
    )

    for item in classified:
        dep = item.dependency
        info = item.license_info

        if info is None:
            if config.fail_on_unknown:
                violations.append(
                    PolicyViolation(
                        package_name=dep.name,
                        package_version=dep.version,
                        detected_license=None,
                        rule="no_unknown_license",
                        reason="Unknown license",
                    )
                )
            if allowed_set is not None:
                violations.append(
                    PolicyViolation(
                        package_name=dep.name,
                        package_version=dep.version,
                        detected_license=None,
                        rule="allowed_licenses",
                        reason="Unknown license is not in allowed list",
                    )
                )
            continue

        if allowed_set is not None and not (
            info.spdx_id in allowed_set or info.name in allowed_set
        ):
            violations.append(
                PolicyViolation(
                    package_name=dep.name,
                    package_version=dep.version,
                    detected_license=info.spdx_id,
                    rule="allowed_licenses",
                    reason=f"License '{info.spdx_id}' not in allowed list",
                )
            )

        if config.fail_on_copyleft and info.is_copyleft:
            violations.append(
                PolicyViolation(
                    package_name=dep.name,
                    package_version=dep.version,
                    detected_license=info.spdx_id,
                    rule="no_copyleft",
                    reason=f"Copyleft license '{info.spdx_id}'",
                )
            )

        if config.max_risk is not None and info.risk > config.max_risk:
            violations.append(
                PolicyViolation(
                    package_name=dep.name,
                    package_version=dep.version,
                    detected_license=info.spdx_id,
                    rule="max_risk",
                    reason=(
                        f"Risk '{info.risk.value}' exceeds maximum "
                        f"'{config.max_risk.value}'"
                    ),
                )
            )

    return violations
