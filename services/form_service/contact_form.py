"""
Contact form service - validates and submits contact messages.
"""

from typing import Any, Callable, Mapping, Optional, Union

from config.app_config import ValidationConfig
from services.form_service.models import (
    ContactFormData,
    ContactFormState,
    ContactFormValidation,
    SubmissionStatus,
)
from services.form_service.validation import validate_contact_form
from utils.logging_config import get_logger, log_contact_event

DEFAULT_SUBMIT_ERROR = "Failed to send message. Please try again."

SubmitHook = Callable[[ContactFormData], None]


def simulated_submit(data: ContactFormData) -> None:
    """Stand-in delivery used when no submit hook is configured"""
    log_contact_event(get_logger(__name__), "simulated", message_length=len(data.message))


class ContactFormController:
    """
    Drives the contact form through idle -> submitting -> success/error.

    The last submitted values are kept on failure so the visitor can correct and
    resend without retyping.
    """

    def __init__(self, submit_hook: Optional[SubmitHook] = None,
                 rules: Optional[ValidationConfig] = None):
        self.logger = get_logger(__name__)
        self.submit_hook = submit_hook or simulated_submit
        self.rules = rules or ValidationConfig()
        self.state = ContactFormState()
        self.values = ContactFormData()

    def submit(self, data: Union[ContactFormData, Mapping[str, Any]]) -> ContactFormValidation:
        """
        Validate then send the form.

        Returns the validation outcome. Delivery failures are recorded on
        ``state`` rather than raised.
        """
        if not isinstance(data, ContactFormData):
            data = ContactFormData.from_mapping(data)
        self.values = data

        validation = validate_contact_form(data, self.rules)
        if not validation.is_valid:
            invalid_fields = [name for name, error in validation.errors.to_dict().items() if error]
            log_contact_event(self.logger, "rejected", invalid_fields=invalid_fields)
            return validation

        self.state = ContactFormState(status=SubmissionStatus.SUBMITTING)
        try:
            self.submit_hook(data)
        except Exception as e:
            log_contact_event(self.logger, "failed", error_type=type(e).__name__)
            self.state = ContactFormState(
                status=SubmissionStatus.ERROR,
                error_message=str(e) or DEFAULT_SUBMIT_ERROR,
            )
            return validation

        self.state = ContactFormState(status=SubmissionStatus.SUCCESS)
        self.values = ContactFormData()
        log_contact_event(self.logger, "sent", message_length=len(data.message))
        return validation

    def reset(self):
        """Return to idle, e.g. for 'Send Another Message'"""
        self.state = ContactFormState()
