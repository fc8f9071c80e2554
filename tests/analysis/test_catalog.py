"""Tests for the license catalog and alias table."""
from types import MappingProxyType

import pytest

from license_classifier.analysis.catalog import (
    LICENSE_ALIASES,
    LICENSE_CATALOG,
    CatalogEntry,
)
from license_classifier.models.license import RiskLevel


class TestLicenseCatalog:
    """Tests for LICENSE_CATALOG."""

    def test_entries_are_catalog_entries(self) -> None:
        """Test that every catalog value is a CatalogEntry."""
        for entry in LICENSE_CATALOG.values():
            assert isinstance(entry, CatalogEntry)
            assert isinstance(entry.risk, RiskLevel)

    def test_catalog_is_read_only(self) -> None:
        """Test that the catalog cannot be mutated at runtime."""
        assert isinstance(LICENSE_CATALOG, MappingProxyType)
        with pytest.raises(TypeError):
            LICENSE_CATALOG["WTFPL"] = CatalogEntry(  # type: ignore[index]
                "WTFPL", False, False, RiskLevel.LOW
            )

    def test_copyleft_licenses_are_not_low_risk(self) -> None:
        """Test that copyleft licenses carry at least medium risk."""
        for key, entry in LICENSE_CATALOG.items():
            if entry.is_copyleft:
                assert entry.risk >= RiskLevel.MEDIUM, key

    def test_strong_copyleft_is_high_risk(self) -> None:
        """Test risk of GPL family licenses."""
        for key in ("GPL-2.0", "GPL-3.0", "AGPL-3.0", "SSPL-1.0"):
            assert LICENSE_CATALOG[key].risk == RiskLevel.HIGH

    def test_cc0_is_not_osi_approved(self) -> None:
        """Test that CC0-1.0 is low risk but not OSI approved."""
        entry = LICENSE_CATALOG["CC0-1.0"]

        assert entry.is_osi_approved is False
        assert entry.risk == RiskLevel.LOW


class TestLicenseAliases:
    """Tests for LICENSE_ALIASES."""

    def test_every_alias_targets_a_catalog_key(self) -> None:
        """Test that no alias points outside the catalog."""
        missing = {
            alias: target
            for alias, target in LICENSE_ALIASES.items()
            if target not in LICENSE_CATALOG
        }
        assert missing == {}

    def test_aliases_are_lower_case_and_trimmed(self) -> None:
        """Test that alias keys are stored in their lookup form."""
        for alias in LICENSE_ALIASES:
            assert alias == alias.lower().strip()

    def test_alias_table_is_read_only(self) -> None:
        """Test that the alias table cannot be mutated at runtime."""
        with pytest.raises(TypeError):
            LICENSE_ALIASES["wtfpl"] = "MIT"  # type: ignore[index]

    def test_specific_aliases_precede_contained_aliases(self) -> None:
        """Test that an alias never comes after a shorter alias it contains.

        Substring matching stops at the first alias in definition order, so
        "lgpl-2.1" must be checked before "gpl-2" and "gpl".
        """
        order = list(LICENSE_ALIASES)
        for index, alias in enumerate(order):
            for earlier in order[:index]:
                assert earlier not in alias, (
                    f"'{earlier}' is checked before the more specific '{alias}'"
                )
