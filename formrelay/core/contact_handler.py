"""
Contact form submission handler.

Receives one request, validates the payload, logs it and forwards it as an
HTML email when an email API key is configured. The log record is the
durable record of a submission; email delivery is best-effort and never
fails the request.

Every request ends in exactly one of:
    405  method rejected
    200  honeypot accepted (silently discarded)
    400  validation failed
    200  processed
    500  internal error
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, NamedTuple, Optional
from zoneinfo import ZoneInfo

from pydantic import ValidationError

from formrelay.core.config import Settings
from formrelay.core.email_sender import EmailSender, ResendEmailSender
from formrelay.core.errors import (
    ContactFormError,
    ContactValidationError,
    EmailDeliveryError,
    MalformedBody,
    MethodNotAllowed,
)
from formrelay.core.escaping import escape_html
from formrelay.core.validation import validate_submission
from formrelay.models.contact import HONEYPOT_FIELD, ContactSubmission, EmailMessage

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Message received successfully"


class HandlerResponse(NamedTuple):
    status_code: int
    body: Dict[str, Any]


def error_response(error: ContactFormError) -> HandlerResponse:
    return HandlerResponse(error.status_code, {"error": error.public_message})


def decode_body(body: bytes) -> Dict[str, Any]:
    """Decode a JSON request body into a plain dict"""
    try:
        data = json.loads(body)
    except ValueError as e:
        raise MalformedBody(f"Body is not valid JSON: {str(e)}") from e

    if not isinstance(data, dict):
        raise MalformedBody(f"Expected a JSON object, got {type(data).__name__}")
    return data


def is_honeypot_hit(data: Dict[str, Any]) -> bool:
    # Checked on the raw payload so a non-string trap value still counts
    return bool(data.get(HONEYPOT_FIELD))


def parse_submission(data: Dict[str, Any]) -> ContactSubmission:
    """Validate a decoded body against the contact form fields"""
    try:
        return ContactSubmission.model_validate(data)
    except ValidationError as e:
        raise MalformedBody(f"Body does not match the contact form: {str(e)}") from e


def format_local_timestamp(moment: datetime, tz_name: str) -> str:
    return moment.astimezone(ZoneInfo(tz_name)).strftime("%B %d, %Y at %I:%M %p %Z")


def render_notification_html(
    submission: ContactSubmission, received_at: datetime, tz_name: str = "UTC"
) -> str:
    """
    Build the notification email body.

    All user-supplied text is escaped before it is embedded; message line
    breaks are turned into <br> tags after escaping.
    """
    name = escape_html(submission.name)
    email = escape_html(submission.email)
    service = escape_html(submission.service_label)
    message = escape_html(submission.message).replace("\r\n", "\n").replace("\n", "<br>")
    submitted_on = format_local_timestamp(received_at, tz_name)

    return f"""<!DOCTYPE html>
<html>
<body style="font-family: Arial, sans-serif; color: #1f2937;">
    <div style="max-width: 600px; margin: 0 auto; padding: 15px; border: 1px solid #eee; border-radius: 8px;">
        <h2 style="color: #4F46E5;">New Contact Form Submission</h2>
        <p><strong>Name:</strong> {name}</p>
        <p><strong>Email:</strong> {email}</p>
        <p><strong>Service:</strong> {service}</p>
        <p style="margin-top: 15px;"><strong>Message:</strong></p>
        <div style="border-left: 3px solid #ccc; padding-left: 10px; margin-top: 5px;">
            {message}
        </div>
        <p style="margin-top: 20px; font-size: 12px; color: #6b7280;">Submitted on {submitted_on}</p>
    </div>
</body>
</html>"""


class ContactSubmissionHandler:
    def __init__(self, settings: Settings, sender: Optional[EmailSender] = None):
        self.settings = settings
        if sender is None and settings.email_enabled:
            sender = ResendEmailSender.from_settings(settings)
        self.sender = sender

    async def handle(self, method: str, body: bytes) -> HandlerResponse:
        """
        Process one contact form request.

        Args:
            method: HTTP method of the request
            body: Raw request body

        Returns:
            HandlerResponse: Status code and JSON body to send back
        """
        try:
            if method.upper() != "POST":
                raise MethodNotAllowed()

            data = decode_body(body)

            if is_honeypot_hit(data):
                logger.info("🍯 Honeypot field filled - discarding submission")
                return HandlerResponse(200, {"success": True})

            submission = parse_submission(data)
            validate_submission(submission)

            received_at = datetime.now(timezone.utc)
            self.log_submission(submission, received_at)
            await self.notify(submission, received_at)

            return HandlerResponse(200, {"success": True, "message": SUCCESS_MESSAGE})

        except (MethodNotAllowed, ContactValidationError) as e:
            logger.info(f"Contact form rejected: {e.public_message}")
            return error_response(e)
        except Exception as e:
            logger.exception(f"Unexpected error handling contact form: {str(e)}")
            return error_response(ContactFormError())

    def log_submission(self, submission: ContactSubmission, received_at: datetime) -> None:
        logger.info("=" * 50)
        logger.info("📬 NEW CONTACT FORM SUBMISSION")
        logger.info(json.dumps(submission.log_record(received_at), ensure_ascii=False))
        logger.info("=" * 50)

    def build_email(self, submission: ContactSubmission, received_at: datetime) -> EmailMessage:
        return EmailMessage(
            from_=self.settings.email_from,
            to=[self.settings.effective_contact_email],
            subject=f"New contact form submission from {submission.name}",
            html=render_notification_html(
                submission, received_at, self.settings.display_timezone
            ),
            reply_to=submission.email,
        )

    async def notify(self, submission: ContactSubmission, received_at: datetime) -> bool:
        """
        Forward the submission by email when a provider key is configured.

        Returns:
            bool: True if the provider accepted the message
        """
        if not self.settings.email_enabled or self.sender is None:
            logger.warning("RESEND_API_KEY not configured - email notification skipped")
            return False

        message = self.build_email(submission, received_at)
        try:
            await self.sender.send(message)
        except EmailDeliveryError as e:
            logger.error(f"❌ Email notification failed for {submission.email}: {str(e)}")
            return False
        except Exception as e:
            logger.error(f"❌ Email notification exception for {submission.email}: {str(e)}")
            return False

        logger.info(f"✅ Email notification sent for {submission.email}")
        return True
