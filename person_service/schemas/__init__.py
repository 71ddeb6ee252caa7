# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Pydantic request/response schemas."""
from typing import Any, Dict, Optional
from pydantic import BaseModel


class PersonIn(BaseModel):
    """Create/update payload. A client-supplied ``id`` is accepted but never applied."""
    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None


class PersonOut(BaseModel):
    id: int
    name: Optional[str]
    email: Optional[str]


class HealthOut(BaseModel):
    status: str
    details: Dict[str, Any]


class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None
    request_id: Optional[str] = None
