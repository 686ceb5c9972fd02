"""
schemas/common.py

- Shared error response shape (Pydantic v2)
- returned by the global handler in middlewares/error_handler.py
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict


class ErrorDetail(BaseModel):
    """Error code and message"""
    code: str = Field(..., description="error identifier (e.g. INTERNAL_ERROR)")
    message: str = Field(..., description="human readable message")


class ErrorResponse(BaseModel):
    """Standard error body of the global exception handler"""
    error: ErrorDetail
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="response time (UTC)"
    )
    trace_id: Optional[str] = Field(
        default=None, description="copied from the X-Request-Id header when present"
    )

    model_config = ConfigDict(extra="ignore")
