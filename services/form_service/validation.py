"""
Form validation utilities for the contact form.

Each validator returns a ValidationResult with a specific error message rather than
raising, so the UI can show failures inline next to the field. All functions are
pure and safe to call from any thread.
"""

import re
from typing import Any, Mapping, Optional, Union

from config.app_config import ValidationConfig
from services.form_service.models import (
    ContactFormData,
    ContactFormErrors,
    ContactFormValidation,
    ValidationResult,
)

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
MESSAGE_MIN_LENGTH = 10
MESSAGE_MAX_LENGTH = 1000

# local@domain.tld with a single @ and no whitespace
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def required(value: str, field_name: str) -> ValidationResult:
    """Fail when the trimmed value is empty"""
    if not value.strip():
        return ValidationResult.fail(f"{field_name} is required")
    return ValidationResult.ok()


def is_valid_email(value: str) -> ValidationResult:
    """Check presence and local@domain.tld shape"""
    trimmed = value.strip()
    if not trimmed:
        return ValidationResult.fail("Email is required")
    if not EMAIL_PATTERN.match(trimmed):
        return ValidationResult.fail("Please enter a valid email address")
    return ValidationResult.ok()


def min_length(value: str, minimum: int, field_name: str) -> ValidationResult:
    if len(value.strip()) < minimum:
        return ValidationResult.fail(f"{field_name} must be at least {minimum} characters")
    return ValidationResult.ok()


def max_length(value: str, maximum: int, field_name: str) -> ValidationResult:
    if len(value.strip()) > maximum:
        return ValidationResult.fail(f"{field_name} must be no more than {maximum} characters")
    return ValidationResult.ok()


def _first_failure(*results: ValidationResult) -> ValidationResult:
    for result in results:
        if not result.is_valid:
            return result
    return ValidationResult.ok()


def _bounded_text(value: str, field_name: str, minimum: int, maximum: int) -> ValidationResult:
    presence = required(value, field_name)
    if not presence.is_valid:
        return presence
    return _first_failure(
        min_length(value, minimum, field_name),
        max_length(value, maximum, field_name),
    )


def validate_name(value: str,
                  minimum: int = NAME_MIN_LENGTH,
                  maximum: int = NAME_MAX_LENGTH) -> ValidationResult:
    """Name: required, 2-100 characters after trimming"""
    return _bounded_text(value, "Name", minimum, maximum)


def validate_email(value: str) -> ValidationResult:
    """Email: required, valid format"""
    return is_valid_email(value)


def validate_message(value: str,
                     minimum: int = MESSAGE_MIN_LENGTH,
                     maximum: int = MESSAGE_MAX_LENGTH) -> ValidationResult:
    """Message: required, 10-1000 characters after trimming"""
    return _bounded_text(value, "Message", minimum, maximum)


def validate_contact_form(data: Union[ContactFormData, Mapping[str, Any]],
                          rules: Optional[ValidationConfig] = None) -> ContactFormValidation:
    """
    Validate every contact form field independently.

    Args:
        data: Form values, as ContactFormData or a mapping with name/email/message
        rules: Length bounds; defaults to the standard 2-100 and 10-1000 limits

    Returns:
        ContactFormValidation whose errors hold each field's message or None
    """
    if not isinstance(data, ContactFormData):
        data = ContactFormData.from_mapping(data)
    rules = rules or ValidationConfig()

    name_result = validate_name(data.name, rules.name_min_length, rules.name_max_length)
    email_result = validate_email(data.email)
    message_result = validate_message(data.message, rules.message_min_length, rules.message_max_length)

    return ContactFormValidation(
        is_valid=name_result.is_valid and email_result.is_valid and message_result.is_valid,
        errors=ContactFormErrors(
            name=name_result.error,
            email=email_result.error,
            message=message_result.error,
        ),
    )
