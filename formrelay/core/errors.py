"""
Error taxonomy for contact form processing.

Validation errors are reported to the caller with a specific message and a
400 status. Malformed bodies and anything unexpected collapse into the
generic 500 response. Email delivery failures never reach the caller.
"""

from typing import Optional


class ContactFormError(Exception):
    """Base class for errors raised while handling a submission"""

    status_code = 500
    public_message = "Internal server error"


class MethodNotAllowed(ContactFormError):
    status_code = 405
    public_message = "Method not allowed"


class MalformedBody(ContactFormError):
    """The request body could not be read as a contact submission"""


class ContactValidationError(ContactFormError):
    status_code = 400

    MISSING_FIELD = "missing-field"
    BAD_EMAIL_FORMAT = "bad-email-format"
    NAME_TOO_LONG = "name-too-long"
    MESSAGE_TOO_LONG = "message-too-long"

    MESSAGES = {
        MISSING_FIELD: "Missing required fields",
        BAD_EMAIL_FORMAT: "Invalid email format",
        NAME_TOO_LONG: "Name too long",
        MESSAGE_TOO_LONG: "Message too long",
    }

    def __init__(self, reason: str):
        self.reason = reason
        self.public_message = self.MESSAGES[reason]
        super().__init__(self.public_message)


class EmailDeliveryError(Exception):
    """Raised by an email sender when the provider did not accept the message"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)
