"""Output formatters for license-classifier."""

from license_classifier.output.scan_json import ScanJsonFormatter
from license_classifier.output.terminal import TerminalFormatter

__all__ = [
    "ScanJsonFormatter",
    "TerminalFormatter",
]
