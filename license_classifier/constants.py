"""Constants for license-classifier."""

# Exit codes
EXIT_SUCCESS = 0  # No policy violations
EXIT_ISSUES = 1  # Policy violations found
EXIT_ERROR = 2  # Scan failed due to error

# Enrichment defaults
DEFAULT_BATCH_SIZE = 10
DEFAULT_REQUEST_TIMEOUT = 5.0

NPM_REGISTRY_URL = "https://registry.npmjs.org"
PYPI_BASE_URL = "https://pypi.org/pypi"

LEGAL_DISCLAIMER = (
    "This tool provides license information for informational purposes only. "
    "It does not constitute legal advice. Consult a qualified attorney for "
    "legal guidance on license compliance."
)

# Short disclaimer for terminal display
LEGAL_DISCLAIMER_SHORT = (
    "This tool provides license information for informational purposes only. "
    "It does not constitute legal advice."
)
