"""Dependency Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Ecosystem(str, Enum):
    """Package-management platforms a dependency can come from."""

    NPM = "npm"
    PIP = "pip"
    GO = "go"
    MAVEN = "maven"
    CARGO = "cargo"
    NUGET = "nuget"
    GEM = "gem"
    COMPOSER = "composer"


class Dependency(BaseModel):
    """A resolved package produced by upstream manifest resolution.

    Records are mutable: license enrichment fills in ``license`` when it is
    still ``None``. Extra keys carried by upstream records (purl, scope,
    parent, ...) are ignored.
    """

    model_config = {"extra": "ignore"}

    name: str = Field(description="Registry package identifier")
    version: str = Field(description="Exact resolved version")
    ecosystem: Ecosystem = Field(description="Package ecosystem")
    license: Optional[str] = Field(
        default=None, description="Raw license label, None until known"
    )

    @property
    def display_name(self) -> str:
        """Return ``name@version`` for reporting."""
        return f"{self.name}@{self.version}"
