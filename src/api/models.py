"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
JSON keys keep the public wire names (correo, telefono, password).
Absent keys and null values become "" so the domain reports them as missing fields.
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator


def _null_as_empty(value: object) -> object:
    # null decodes to the zero value, like an absent key
    return "" if value is None else value


class RegisterRequest(BaseModel):
    """Request model for user registration."""

    correo: str = Field(default="", description="Email address")
    telefono: str = Field(default="", description="10-digit phone number")
    password: str = Field(
        default="",
        description="6-12 bytes with upper, lower, digit and one of @$&",
    )

    @field_validator("correo", "telefono", "password", mode="before")
    @classmethod
    def null_as_empty(cls, value: object) -> object:
        return _null_as_empty(value)


class RegisterResponse(BaseModel):
    """Response model for successful registration."""

    mensaje: str


class LoginRequest(BaseModel):
    """Request model for login."""

    correo: str = Field(default="", description="Registered email address")
    password: str = Field(default="", description="Password given at registration")

    @field_validator("correo", "password", mode="before")
    @classmethod
    def null_as_empty(cls, value: object) -> object:
        return _null_as_empty(value)


class LoginResponse(BaseModel):
    """Response model for successful login."""

    token: str
    fecha_inicio: datetime


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str
