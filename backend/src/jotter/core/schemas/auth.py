"""
Authentication schemas.

Request bodies for register/login, the token response, and the identity
the access guard hands to protected routes.
"""

import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RegisterRequest(BaseModel):
    """User registration request schema."""

    name: str = Field(min_length=1, description="Display name")
    email: str = Field(min_length=1, description="Login email, stored as given")
    password: str = Field(min_length=1, description="Plaintext password")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name cannot be empty")
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Test User",
                "email": "test@example.com",
                "password": "password123",
            }
        }
    )


class LoginRequest(BaseModel):
    """User login request schema."""

    email: str = Field(min_length=1, description="Login email")
    password: str = Field(min_length=1, description="Plaintext password")

    model_config = ConfigDict(
        json_schema_extra={"example": {"email": "test@example.com", "password": "password123"}}
    )


class TokenResponse(BaseModel):
    """Session token issued by register and login."""

    token: str = Field(description="Signed bearer token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(description="Seconds until the token expires")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "bearer",
                "expires_in": 3600,
            }
        }
    )


class Identity(BaseModel):
    """The authenticated caller, as resolved from a verified token."""

    id: uuid.UUID
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True, frozen=True)
