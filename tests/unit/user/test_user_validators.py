"""Tests for customer input validators."""

import pytest

from snackstore.core.modules.user.validators import (
    normalize_email,
    password_problems,
    sanitize_phone,
    sanitize_text,
    validate_name,
    validate_password,
)
from snackstore.errors import ValidationError


class TestNormalizeEmail:
    def test_trimmed_and_lowercased(self):
        assert normalize_email("  Priya.Sharma@Example.COM ") == "priya.sharma@example.com"

    @pytest.mark.parametrize("email", ["", "plainaddress", "a@b", "@example.com", "user@", "us er@example.com", "a@-x.com"])
    def test_invalid_rejected(self, email):
        with pytest.raises(ValidationError, match="Invalid email address"):
            normalize_email(email)


class TestValidateName:
    @pytest.mark.parametrize("name", ["Priya", "Mary-Jane", "O'Neil", "Anil Kumar"])
    def test_valid_names(self, name):
        assert validate_name(name) == name

    def test_whitespace_trimmed(self):
        assert validate_name("  Ravi  ") == "Ravi"

    def test_markup_stripped_before_checking(self):
        assert validate_name("<b>Ravi</b>") == "Ravi"

    @pytest.mark.parametrize("name", ["R", "x" * 51, "R2D2", "Ravi!", ""])
    def test_invalid_names(self, name):
        with pytest.raises(ValidationError, match="Invalid first name"):
            validate_name(name, "first name")


class TestPasswordStrength:
    def test_strong_password_accepted(self):
        validate_password("Masala#Chai9")

    def test_all_problems_reported(self):
        problems = password_problems("abc")
        assert "Password must be at least 8 characters long" in problems
        assert "Password must contain at least one uppercase letter" in problems
        assert "Password must contain at least one number" in problems
        assert "Password must contain at least one special character" in problems
        assert "Password must contain at least one lowercase letter" not in problems

    def test_error_message_joins_problems(self):
        with pytest.raises(ValidationError, match=r"at least 8 characters long\. Password must contain"):
            validate_password("ab")

    def test_too_long_password(self):
        assert "Password must be less than 128 characters" in password_problems("Aa1!" * 40)

    def test_password_over_bcrypt_limit(self):
        problems = password_problems("Aa1!" + "x" * 80)
        assert "Password must be at most 72 bytes long" in problems


class TestSanitizers:
    def test_phone_keeps_digits_and_dialling_characters(self):
        assert sanitize_phone(" +91 (98765) 43210 ext.") == "+91(98765)43210"

    def test_text_truncated(self):
        assert sanitize_text("  <i>Bhujia</i> namkeen  ", max_length=6) == "Bhujia"
