"""
Registration input validation.

Every rule runs independently; callers get all violations at once.
"""
from typing import Any

from email_validator import EmailNotValidError, validate_email

from user_service.core import messages
from user_service.schemas.user import FieldViolation

MIN_PASSWORD_LENGTH = 6


def is_valid_email(value: Any) -> bool:
    """
    Syntax-only check; no DNS lookup.

    Special-use domains such as `.local` or `.test` are accepted, but the
    domain must contain a dot, so `user@localhost` is rejected.
    """
    if not isinstance(value, str) or not value:
        return False
    try:
        result = validate_email(
            value,
            check_deliverability=False,
            globally_deliverable=False,
        )
    except EmailNotValidError:
        return False
    return "." in result.ascii_domain.strip(".")


def validate_registration(nome: Any, email: Any, senha: Any) -> list[FieldViolation]:
    """
    Check a candidate registration.

    Args:
        nome: User name, must be present and non-empty
        email: Must be a syntactically valid address
        senha: Must be at least 6 characters

    Returns:
        Violations in field order; empty when the input is acceptable
    """
    violations: list[FieldViolation] = []

    if nome is None or nome == "":
        violations.append(FieldViolation(path="nome", value=nome, msg=messages.NAME_REQUIRED))

    if not is_valid_email(email):
        violations.append(FieldViolation(path="email", value=email, msg=messages.EMAIL_INVALID))

    if senha is None or len(senha) < MIN_PASSWORD_LENGTH:
        violations.append(FieldViolation(path="senha", value=senha, msg=messages.PASSWORD_TOO_SHORT))

    return violations
