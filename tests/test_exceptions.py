"""Tests for custom exceptions."""
import pytest

from license_classifier.exceptions import (
    ConfigurationError,
    LicenseClassifierError,
    NetworkError,
    ScanError,
)


class TestExceptionHierarchy:
    """Tests for exception hierarchy."""

    def test_base_error_is_exception(self) -> None:
        """Test that LicenseClassifierError inherits from Exception."""
        assert issubclass(LicenseClassifierError, Exception)

    @pytest.mark.parametrize("error_cls", [NetworkError, ConfigurationError, ScanError])
    def test_errors_inherit_from_base(self, error_cls: type) -> None:
        """Test that every package error shares the base class."""
        assert issubclass(error_cls, LicenseClassifierError)

    def test_network_error_can_be_raised(self) -> None:
        """Test that NetworkError can be raised with a message."""
        with pytest.raises(LicenseClassifierError, match="Connection failed"):
            raise NetworkError("Connection failed")

    def test_scan_error_preserves_cause(self) -> None:
        """Test that chained causes survive re-raising."""
        cause = ValueError("bad record")
        try:
            raise ScanError("Invalid manifest") from cause
        except ScanError as e:
            assert e.__cause__ is cause
