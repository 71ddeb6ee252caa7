# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models — pure data structures, NO FastAPI dependency.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class Person(BaseModel):
    """A person record. ``id`` stays ``None`` until the store assigns one."""
    id: Optional[int] = Field(default=None, description="Store-assigned identifier")
    name: Optional[str] = Field(default=None, description="Free-text name")
    email: Optional[str] = Field(default=None, description="Free-text email")


class HealthReport(BaseModel):
    """Result of a health probe: UP or DOWN plus diagnostic details."""
    status: str = Field(..., pattern="^(UP|DOWN)$")
    details: dict[str, Any] = Field(default_factory=dict)

    @property
    def is_up(self) -> bool:
        return self.status == "UP"
