"""
Shared response schemas - errors, health
"""

from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Body of every error response."""

    msg: str = Field(description="Short human-readable error message")
    fields: Optional[List[str]] = Field(
        default=None, description="Request fields that failed validation"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"msg": "Please provide title and content", "fields": ["title", "content"]}
        }
    )


class MessageResponse(BaseModel):
    message: str


class HealthCheckResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(description="Overall health status")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    version: str = Field(description="Application version")
    checks: dict[str, dict[str, Any]] = Field(description="Individual component health checks")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "healthy",
                "timestamp": "2025-09-13T10:30:00Z",
                "version": "1.0.0",
                "checks": {
                    "database": {
                        "connected": True,
                        "status": "healthy",
                        "response_time_ms": 1.2,
                    }
                },
            }
        }
    )
