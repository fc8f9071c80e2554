"""License catalog and alias table.

The catalog maps canonical identifiers to their classification. The alias
table maps lower-case free-form variants to catalog keys. Both are fixed at
import time and never mutated.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, NamedTuple

from license_classifier.models.license import RiskLevel


class CatalogEntry(NamedTuple):
    """Classification properties of a catalog license.

    Attributes:
        spdx_id: SPDX identifier reported for the license.
        is_osi_approved: Whether the license is OSI approved.
        is_copyleft: Whether the license is copyleft.
        risk: Compliance risk tier.
    """

    spdx_id: str
    is_osi_approved: bool
    is_copyleft: bool
    risk: RiskLevel


LOW = RiskLevel.LOW
MEDIUM = RiskLevel.MEDIUM
HIGH = RiskLevel.HIGH

# Keys are case-sensitive canonical identifiers
LICENSE_CATALOG: Mapping[str, CatalogEntry] = MappingProxyType({
    # Permissive
    "MIT": CatalogEntry("MIT", True, False, LOW),
    "Apache-2.0": CatalogEntry("Apache-2.0", True, False, LOW),
    "BSD-2-Clause": CatalogEntry("BSD-2-Clause", True, False, LOW),
    "BSD-3-Clause": CatalogEntry("BSD-3-Clause", True, False, LOW),
    "ISC": CatalogEntry("ISC", True, False, LOW),
    "0BSD": CatalogEntry("0BSD", True, False, LOW),
    "Unlicense": CatalogEntry("Unlicense", True, False, LOW),
    "CC0-1.0": CatalogEntry("CC0-1.0", False, False, LOW),
    "BSL-1.0": CatalogEntry("BSL-1.0", True, False, LOW),
    "PSF-2.0": CatalogEntry("PSF-2.0", True, False, LOW),
    "Zlib": CatalogEntry("Zlib", True, False, LOW),
    # Weak copyleft
    "MPL-2.0": CatalogEntry("MPL-2.0", True, True, MEDIUM),
    "LGPL-2.0": CatalogEntry("LGPL-2.0-only", True, True, MEDIUM),
    "LGPL-2.1": CatalogEntry("LGPL-2.1-only", True, True, MEDIUM),
    "LGPL-3.0": CatalogEntry("LGPL-3.0-only", True, True, MEDIUM),
    # Strong copyleft
    "GPL-2.0": CatalogEntry("GPL-2.0-only", True, True, HIGH),
    "GPL-3.0": CatalogEntry("GPL-3.0-only", True, True, HIGH),
    "AGPL-3.0": CatalogEntry("AGPL-3.0-only", True, True, HIGH),
    "SSPL-1.0": CatalogEntry("SSPL-1.0", False, True, HIGH),
})

# Substring matching walks this table in definition order and stops at the
# first hit, so longer and more specific variants must precede the generic
# ones they contain ("lgpl-2.1" before "gpl-2", "0bsd" before "bsd").
LICENSE_ALIASES: Mapping[str, str] = MappingProxyType({
    # AGPL (contains "gpl")
    "agpl-3.0-only": "AGPL-3.0",
    "agpl-3.0-or-later": "AGPL-3.0",
    "agpl-3.0": "AGPL-3.0",
    "agplv3": "AGPL-3.0",
    "agpl": "AGPL-3.0",
    # LGPL (contains "gpl")
    "lgpl-2.0-only": "LGPL-2.0",
    "lgpl-2.0-or-later": "LGPL-2.0",
    "lgpl-2.0": "LGPL-2.0",
    "lgpl-2.1-only": "LGPL-2.1",
    "lgpl-2.1-or-later": "LGPL-2.1",
    "lgpl-2.1": "LGPL-2.1",
    "lgplv2": "LGPL-2.0",
    "lgpl-3.0-only": "LGPL-3.0",
    "lgpl-3.0-or-later": "LGPL-3.0",
    "lgpl-3.0": "LGPL-3.0",
    "lgplv3": "LGPL-3.0",
    "lgpl": "LGPL-3.0",
    # GPL
    "gpl-2.0-only": "GPL-2.0",
    "gpl-2.0-or-later": "GPL-2.0",
    "gpl-2.0": "GPL-2.0",
    "gpl-2": "GPL-2.0",
    "gplv2": "GPL-2.0",
    "gpl-3.0-only": "GPL-3.0",
    "gpl-3.0-or-later": "GPL-3.0",
    "gpl-3.0": "GPL-3.0",
    "gpl-3": "GPL-3.0",
    "gplv3": "GPL-3.0",
    "gpl": "GPL-3.0",
    # Other copyleft
    "sspl-1.0": "SSPL-1.0",
    "sspl": "SSPL-1.0",
    "mpl-2.0": "MPL-2.0",
    "mpl 2.0": "MPL-2.0",
    "mpl": "MPL-2.0",
    # Apache
    "apache license 2.0": "Apache-2.0",
    "apache license, version 2.0": "Apache-2.0",
    "apache software license": "Apache-2.0",
    "apache 2.0": "Apache-2.0",
    "apache-2.0": "Apache-2.0",
    "apache2": "Apache-2.0",
    # BSD family (0BSD contains "bsd")
    "0bsd": "0BSD",
    "bsd-2": "BSD-2-Clause",
    "bsd-3": "BSD-3-Clause",
    "bsd": "BSD-3-Clause",
    # Public domain style
    "cc0-1.0": "CC0-1.0",
    "cc0": "CC0-1.0",
    "unlicense": "Unlicense",
    # Other permissive
    "bsl-1.0": "BSL-1.0",
    "boost software license": "BSL-1.0",
    "python software foundation": "PSF-2.0",
    "psf-2.0": "PSF-2.0",
    "zlib": "Zlib",
    "isc": "ISC",
    "(mit)": "MIT",
    "mit": "MIT",
})
