"""
Tests for contact form validation utilities
"""

import pytest
from config.app_config import ValidationConfig
from services.form_service.models import ContactFormData, ValidationResult
from services.form_service.validation import (
    required,
    is_valid_email,
    min_length,
    max_length,
    validate_name,
    validate_email,
    validate_message,
    validate_contact_form
)


class TestValidationResult:
    """Test valid/error consistency"""

    def test_ok_has_no_error(self):
        result = ValidationResult.ok()
        assert result.is_valid is True
        assert result.error is None

    def test_fail_carries_error(self):
        result = ValidationResult.fail("broken")
        assert result.is_valid is False
        assert result.error == "broken"

    def test_inconsistent_result_rejected(self):
        with pytest.raises(ValueError):
            ValidationResult(is_valid=True, error="should not be here")
        with pytest.raises(ValueError):
            ValidationResult(is_valid=False, error=None)


class TestPrimitiveValidators:
    """Test required / min_length / max_length"""

    def test_required_rejects_whitespace(self):
        result = required("   \t", "Name")
        assert result.error == "Name is required"

    def test_min_length_counts_trimmed_text(self):
        assert not min_length("  a  ", 2, "Name").is_valid
        assert min_length("  ab  ", 2, "Name").is_valid

    def test_min_length_message(self):
        assert min_length("a", 2, "Name").error == "Name must be at least 2 characters"

    def test_max_length_message(self):
        assert max_length("x" * 4, 3, "Message").error == "Message must be no more than 3 characters"


class TestValidateName:
    """Test name field rules"""

    def test_empty_name(self):
        assert validate_name("").error == "Name is required"
        assert validate_name("    ").error == "Name is required"

    @pytest.mark.parametrize("length", [2, 50, 100])
    def test_lengths_in_range_are_valid(self, length):
        result = validate_name("n" * length)
        assert result.is_valid
        assert result.error is None

    def test_boundary_lengths_are_invalid(self):
        assert validate_name("n").error == "Name must be at least 2 characters"
        assert validate_name("n" * 101).error == "Name must be no more than 100 characters"

    def test_surrounding_whitespace_ignored(self):
        assert validate_name("  Al  ").is_valid


class TestValidateEmail:
    """Test email field rules"""

    def test_empty_email(self):
        assert validate_email(" ").error == "Email is required"

    @pytest.mark.parametrize("value", [
        "a@b.com",
        "first.last@example.co.uk",
        "  padded@example.org  ",
        "user+tag@sub.domain.io",
    ])
    def test_valid_addresses(self, value):
        assert validate_email(value).is_valid

    @pytest.mark.parametrize("value", [
        "bad",
        "no-at-sign.com",
        "two@@example.com",
        "a@b@c.com",
        "missing@tld",
        "spaced name@example.com",
        "@example.com",
        "user@.",
    ])
    def test_invalid_addresses(self, value):
        assert validate_email(value).error == "Please enter a valid email address"

    def test_is_valid_email_alias(self):
        assert is_valid_email("a@b.com") == validate_email("a@b.com")


class TestValidateMessage:
    """Test message field rules"""

    def test_empty_message(self):
        assert validate_message("").error == "Message is required"

    def test_length_boundaries(self):
        assert not validate_message("m" * 9).is_valid
        assert validate_message("m" * 10).is_valid
        assert validate_message("m" * 1000).is_valid
        assert not validate_message("m" * 1001).is_valid

    def test_trimmed_length_is_used(self):
        assert not validate_message("   short    ").is_valid
        assert validate_message("   " + "m" * 10 + "   ").is_valid


class TestValidateContactForm:
    """Test whole-form validation"""

    def test_all_fields_valid(self):
        result = validate_contact_form({"name": "Al", "email": "a@b.com", "message": "1234567890"})

        assert result.is_valid is True
        assert result.errors.to_dict() == {"name": None, "email": None, "message": None}

    def test_all_fields_invalid(self):
        result = validate_contact_form({"name": "", "email": "bad", "message": "short"})

        assert result.is_valid is False
        assert result.errors.name == "Name is required"
        assert result.errors.email == "Please enter a valid email address"
        assert result.errors.message == "Message must be at least 10 characters"

    def test_fields_validated_independently(self):
        """A failing name must not hide the email or message outcome"""
        result = validate_contact_form(ContactFormData(name="", email="a@b.com", message="m" * 20))

        assert result.is_valid is False
        assert result.errors.name is not None
        assert result.errors.email is None
        assert result.errors.message is None

    def test_custom_rules(self):
        rules = ValidationConfig(name_min_length=5)
        result = validate_contact_form({"name": "Al", "email": "a@b.com", "message": "1234567890"}, rules)

        assert result.errors.name == "Name must be at least 5 characters"

    def test_missing_keys_treated_as_empty(self):
        result = validate_contact_form({})

        assert result.errors.name == "Name is required"
        assert result.errors.email == "Email is required"
        assert result.errors.message == "Message is required"
