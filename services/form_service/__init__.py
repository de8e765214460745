"""
Form service - contact form validation and submission.
"""

from .models import (
    ValidationResult,
    ContactFormData,
    ContactFormErrors,
    ContactFormValidation,
    ContactFormState,
    SubmissionStatus
)
from .validation import (
    required,
    is_valid_email,
    min_length,
    max_length,
    validate_name,
    validate_email,
    validate_message,
    validate_contact_form
)
from .contact_form import ContactFormController

__all__ = [
    'ValidationResult',
    'ContactFormData',
    'ContactFormErrors',
    'ContactFormValidation',
    'ContactFormState',
    'SubmissionStatus',
    'required',
    'is_valid_email',
    'min_length',
    'max_length',
    'validate_name',
    'validate_email',
    'validate_message',
    'validate_contact_form',
    'ContactFormController'
]
