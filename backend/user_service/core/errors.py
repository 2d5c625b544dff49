"""
Service errors.

Each error knows the HTTP status and JSON body it maps to; the application
installs a single handler that renders them.
"""
from typing import Any

from fastapi import status

from user_service.core import messages


class UserServiceError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def to_payload(self) -> dict[str, Any]:
        return {"error": str(self)}


class RegistrationValidationError(UserServiceError):
    """One or more registration fields failed validation."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, violations: list):
        super().__init__(f"{len(violations)} invalid field(s)")
        self.violations = violations

    def to_payload(self) -> dict[str, Any]:
        return {"errors": [violation.model_dump() for violation in self.violations]}


class EmailAlreadyInUseError(UserServiceError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self):
        super().__init__(messages.EMAIL_IN_USE)


class InvalidCredentialsError(UserServiceError):
    """No record matches the email/password pair. Never says which part failed."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self):
        super().__init__(messages.INVALID_CREDENTIALS)


class StoreError(UserServiceError):
    """The record store was unreachable or a query failed."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, cause: Exception):
        super().__init__(str(cause) or cause.__class__.__name__)
        self.cause = cause
