"""
Request and response schemas for API endpoints.
"""
from user_service.schemas.user import (
    EmailCheckRequest,
    EmailCheckResponse,
    ErrorResponse,
    FieldViolation,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    ValidationErrorResponse,
)

__all__ = [
    "EmailCheckRequest",
    "EmailCheckResponse",
    "RegisterRequest",
    "RegisterResponse",
    "LoginRequest",
    "LoginResponse",
    "FieldViolation",
    "ErrorResponse",
    "ValidationErrorResponse",
]
