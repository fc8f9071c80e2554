"""License classification Pydantic models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class RiskLevel(Enum):
    """Compliance risk tier, ordered low < medium < high."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        """Position of this tier in the low/medium/high ordering."""
        return _RISK_ORDER.index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank >= other.rank


_RISK_ORDER = (RiskLevel.LOW, RiskLevel.MEDIUM, RiskLevel.HIGH)


class LicenseInfo(BaseModel):
    """Classification of a raw license label.

    ``name`` is the canonical catalog key for recognized licenses, or the
    trimmed input when the label is not recognized.
    """

    model_config = {"extra": "forbid", "frozen": True}

    name: str = Field(description="Canonical catalog key or trimmed input")
    spdx_id: str = Field(description="SPDX identifier")
    is_osi_approved: bool = Field(description="Approved by the Open Source Initiative")
    is_copyleft: bool = Field(description="Requires derivative works to share terms")
    risk: RiskLevel = Field(description="Compliance risk tier")
