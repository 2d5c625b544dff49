"""
User request/response schemas.

Request fields are optional at the schema level: presence and format are
checked by `user_service.validation` so every failing field is reported
together.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from user_service.core import messages


class EmailCheckRequest(BaseModel):
    """Email existence check body. No format validation is applied."""
    model_config = ConfigDict(extra="ignore")

    email: Optional[str] = Field(None, description="Email address to look up")


class EmailCheckResponse(BaseModel):
    emailExists: bool = Field(..., description="Whether a user already has this email")


class RegisterRequest(BaseModel):
    """Registration request body."""
    model_config = ConfigDict(extra="ignore")

    nome: Optional[str] = Field(None, description="User name (required)")
    email: Optional[str] = Field(None, description="Valid email address (must be unique)")
    senha: Optional[str] = Field(None, description="Password (min 6 characters)")


class RegisterResponse(BaseModel):
    message: str = Field(default=messages.USER_REGISTERED, description="Success message")


class LoginRequest(BaseModel):
    """Login request body."""
    model_config = ConfigDict(extra="ignore")

    email: Optional[str] = Field(None, description="User email address")
    senha: Optional[str] = Field(None, description="User password")


class LoginResponse(BaseModel):
    message: str = Field(default=messages.USER_AUTHENTICATED, description="Success message")


class FieldViolation(BaseModel):
    """A single field-level validation failure."""
    type: str = Field(default="field", description="Violation kind")
    value: Any = Field(None, description="Offending value as received")
    msg: str = Field(..., description="Human-readable message")
    path: str = Field(..., description="Field name")
    location: str = Field(default="body", description="Where the field was read from")


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Error message")


class ValidationErrorResponse(BaseModel):
    errors: list[FieldViolation] = Field(..., description="All validation failures")
