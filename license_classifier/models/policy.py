"""Policy-related Pydantic models for license-classifier."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

PolicyRule = Literal["allowed_licenses", "no_copyleft", "no_unknown_license", "max_risk"]


class PolicyViolation(BaseModel):
    """A license policy violation for a dependency."""

    model_config = {"extra": "forbid"}

    package_name: str = Field(description="Name of the package with violation")
    package_version: str = Field(description="Version of the package")
    detected_license: Optional[str] = Field(
        default=None,
        description="Classified license (None if unknown)",
    )
    rule: PolicyRule = Field(description="Policy rule that was violated")
    reason: str = Field(description="Why this is a violation")
