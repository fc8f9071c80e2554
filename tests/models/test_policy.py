"""Tests for policy models."""
import pytest
from pydantic import ValidationError

from license_classifier.models.policy import PolicyViolation


class TestPolicyViolation:
    """Tests for PolicyViolation."""

    def test_unknown_license_violation(self) -> None:
        """Test that detected_license may be None."""
        violation = PolicyViolation(
            package_name="mystery",
            package_version="0.1.0",
            detected_license=None,
            rule="no_unknown_license",
            reason="Unknown license",
        )

        assert violation.detected_license is None
        assert violation.rule == "no_unknown_license"

    def test_unknown_rule_is_rejected(self) -> None:
        """Test that rule names are restricted to the known rules."""
        with pytest.raises(ValidationError):
            PolicyViolation(
                package_name="x",
                package_version="1.0.0",
                detected_license="MIT",
                rule="no_mit",  # type: ignore[arg-type]
                reason="nope",
            )
