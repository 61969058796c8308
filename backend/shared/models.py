"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    Resolved from a bearer token on every protected request and made
    available to route handlers via dependency injection. The password
    hash is never part of this model.
    """

    id: str = Field(..., description="User ID")
    name: str = Field(..., description="Unique display name")
    email: str = Field(..., description="User's email address")
    country: str = Field(default="", description="Country given at registration")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }


class MessageResponse(BaseModel):
    """Plain acknowledgment body: {"message": "..."}."""

    message: str
