"""
Error response models.

Standardized error responses for the API.
"""

from typing import Any, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    message: str
    error: Optional[str] = None
    details: dict[str, Any] = {}
