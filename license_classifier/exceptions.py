"""Custom exceptions for license-classifier."""


class LicenseClassifierError(Exception):
    """Base exception for all license-classifier errors."""

    pass


class NetworkError(LicenseClassifierError):
    """Exception raised when a registry lookup fails."""

    pass


class ConfigurationError(LicenseClassifierError):
    """Exception raised when configuration is invalid."""

    pass


class ScanError(LicenseClassifierError):
    """Exception raised when a dependency manifest cannot be loaded."""

    pass
