"""Configuration Pydantic models for license-classifier."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from license_classifier.constants import DEFAULT_BATCH_SIZE, DEFAULT_REQUEST_TIMEOUT
from license_classifier.models.license import RiskLevel


class ClassifierConfig(BaseModel):
    """Configuration for license-classifier.

    Policy fields default to "off", so an empty configuration never
    produces violations.
    """

    model_config = {"extra": "forbid"}

    allowed_licenses: Optional[List[str]] = Field(
        default=None,
        description="List of allowed SPDX identifiers or canonical names. "
        "Dependencies with other licenses will be flagged.",
    )
    ignored_packages: Optional[List[str]] = Field(
        default=None,
        description="List of package names to skip during scanning.",
    )
    fail_on_copyleft: bool = Field(
        default=False,
        description="Flag dependencies with copyleft licenses.",
    )
    fail_on_unknown: bool = Field(
        default=False,
        description="Flag dependencies whose license could not be found.",
    )
    max_risk: Optional[RiskLevel] = Field(
        default=None,
        description="Highest acceptable risk tier (low, medium, high).",
    )
    skip_enrichment: bool = Field(
        default=False,
        description="Do not query package registries for missing licenses.",
    )
    batch_size: int = Field(
        default=DEFAULT_BATCH_SIZE,
        ge=1,
        description="Maximum concurrent registry requests.",
    )
    request_timeout: float = Field(
        default=DEFAULT_REQUEST_TIMEOUT,
        gt=0,
        description="Per-request registry timeout in seconds.",
    )
