"""
Core module - error taxonomy and user-facing messages.
"""
from user_service.core.errors import (
    EmailAlreadyInUseError,
    InvalidCredentialsError,
    RegistrationValidationError,
    StoreError,
    UserServiceError,
)

__all__ = [
    "UserServiceError",
    "RegistrationValidationError",
    "EmailAlreadyInUseError",
    "InvalidCredentialsError",
    "StoreError",
]
