"""
Tests for registration input validation.

These tests verify:
- Each rule reports its own field and message
- Rules are independent: all failures are reported together
- Boundary values for the password length
"""

import pytest

from user_service.core import messages
from user_service.validation import is_valid_email, validate_registration


class TestValidateRegistration:
    """Tests for validate_registration."""

    def test_valid_input_has_no_violations(self):
        assert validate_registration("Ana", "ana@x.com", "abcdef") == []

    @pytest.mark.parametrize("nome", ["", None])
    def test_missing_name_is_reported(self, nome):
        violations = validate_registration(nome, "ana@x.com", "abcdef")

        assert len(violations) == 1
        assert violations[0].path == "nome"
        assert violations[0].msg == messages.NAME_REQUIRED

    def test_whitespace_name_is_not_empty(self):
        """Only the empty string counts as empty; no trimming."""
        assert validate_registration("  ", "ana@x.com", "abcdef") == []

    @pytest.mark.parametrize(
        "email",
        ["ana", "ana@", "@x.com", "ana x@x.com", "ana@@x.com", "", None],
    )
    def test_invalid_email_is_reported(self, email):
        violations = validate_registration("Ana", email, "abcdef")

        assert [v.path for v in violations] == ["email"]
        assert violations[0].msg == messages.EMAIL_INVALID
        assert violations[0].value == email

    @pytest.mark.parametrize("senha", ["", "a", "abcde", None])
    def test_short_password_is_reported(self, senha):
        violations = validate_registration("Ana", "ana@x.com", senha)

        assert [v.path for v in violations] == ["senha"]
        assert violations[0].msg == messages.PASSWORD_TOO_SHORT

    def test_password_of_exactly_six_characters_is_accepted(self):
        assert validate_registration("Ana", "ana@x.com", "123456") == []

    def test_all_failures_reported_in_field_order(self):
        violations = validate_registration("", "not-an-email", "123")

        assert [v.path for v in violations] == ["nome", "email", "senha"]

    def test_violation_serializes_with_location(self):
        violation = validate_registration("", "ana@x.com", "abcdef")[0]

        assert violation.model_dump() == {
            "type": "field",
            "value": "",
            "msg": messages.NAME_REQUIRED,
            "path": "nome",
            "location": "body",
        }


class TestIsValidEmail:
    """Tests for the email syntax check."""

    @pytest.mark.parametrize(
        "email",
        ["ana@x.com", "bruno.silva@exemplo.com.br", "c+tag@mail.org"],
    )
    def test_accepts_well_formed_addresses(self, email):
        assert is_valid_email(email) is True

    @pytest.mark.parametrize(
        "email",
        ["ana@host.local", "ana@site.test", "ana@x.invalid", "ana@sub.example.com"],
    )
    def test_accepts_special_use_domains(self, email):
        assert is_valid_email(email) is True

    @pytest.mark.parametrize("email", ["ana@localhost", "ana@intranet", "ana@.com"])
    def test_rejects_domain_without_dot(self, email):
        assert is_valid_email(email) is False

    def test_registration_accepts_special_use_domain(self):
        assert validate_registration("Ana", "ana@site.test", "abcdef") == []

    def test_rejects_non_string(self):
        assert is_valid_email(12345) is False
