"""
Field checks for contact submissions.

Checks run in a fixed order so that a submission breaking several rules
always reports the same single error: required fields, email format,
name length, message length.
"""

import re

from formrelay.core.errors import ContactValidationError
from formrelay.models.contact import ContactSubmission

MAX_NAME_LENGTH = 100
MAX_MESSAGE_LENGTH = 5000

# One @, no whitespace, and a dot somewhere after the @
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def validate_submission(submission: ContactSubmission) -> None:
    """
    Raise ContactValidationError for the first rule the submission breaks.

    Args:
        submission: Parsed contact form payload (honeypot already checked)
    """
    if not submission.name or not submission.email or not submission.message:
        raise ContactValidationError(ContactValidationError.MISSING_FIELD)

    if not is_valid_email(submission.email):
        raise ContactValidationError(ContactValidationError.BAD_EMAIL_FORMAT)

    if len(submission.name) > MAX_NAME_LENGTH:
        raise ContactValidationError(ContactValidationError.NAME_TOO_LONG)

    if len(submission.message) > MAX_MESSAGE_LENGTH:
        raise ContactValidationError(ContactValidationError.MESSAGE_TOO_LONG)
