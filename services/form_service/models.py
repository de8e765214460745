"""
Form service data models for contact form input, validation results and submission state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one field; error is None iff valid"""
    is_valid: bool
    error: Optional[str] = None

    def __post_init__(self):
        if self.is_valid != (self.error is None):
            raise ValueError("A valid result carries no error and an invalid one must")

    @classmethod
    def ok(cls) -> 'ValidationResult':
        return cls(is_valid=True, error=None)

    @classmethod
    def fail(cls, error: str) -> 'ValidationResult':
        return cls(is_valid=False, error=error)


@dataclass
class ContactFormData:
    """Raw values typed into the contact form"""
    name: str = ""
    email: str = ""
    message: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'ContactFormData':
        return cls(
            name=str(data.get("name", "") or ""),
            email=str(data.get("email", "") or ""),
            message=str(data.get("message", "") or ""),
        )

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "email": self.email, "message": self.message}


@dataclass(frozen=True)
class ContactFormErrors:
    """Per-field error text, None where the field passed"""
    name: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {"name": self.name, "email": self.email, "message": self.message}


@dataclass(frozen=True)
class ContactFormValidation:
    """Result of validating the whole contact form"""
    is_valid: bool
    errors: ContactFormErrors = field(default_factory=ContactFormErrors)


class SubmissionStatus(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class ContactFormState:
    """Submission lifecycle of the contact form"""
    status: SubmissionStatus = SubmissionStatus.IDLE
    error_message: Optional[str] = None
