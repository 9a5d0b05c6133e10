"""
Outbound email delivery for contact form notifications.

The handler only talks to the EmailSender interface, so tests can swap in a
fake sender. ResendEmailSender is the production implementation and posts to
the Resend transactional email API.
"""

import httpx
import logging
from typing import Optional

from formrelay.core.config import Settings
from formrelay.core.errors import EmailDeliveryError
from formrelay.models.contact import EmailMessage

logger = logging.getLogger(__name__)


class EmailSender:
    """Delivers one email message; raises EmailDeliveryError on failure"""

    async def send(self, message: EmailMessage) -> None:
        raise NotImplementedError


class ResendEmailSender(EmailSender):
    def __init__(
        self,
        api_key: str,
        api_url: str = "https://api.resend.com",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "ResendEmailSender":
        return cls(
            api_key=settings.resend_api_key,
            api_url=settings.resend_api_url,
            timeout=settings.email_timeout,
        )

    async def send(self, message: EmailMessage) -> None:
        """
        Post a message to the Resend /emails endpoint.

        Args:
            message: Fully rendered email

        Raises:
            EmailDeliveryError: Transport failure or non-2xx response
        """
        url = f"{self.api_url}/emails"
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

        try:
            async with httpx.AsyncClient(transport=self.transport) as client_http:
                response = await client_http.post(
                    url,
                    json=message.to_payload(),
                    headers=headers,
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            raise EmailDeliveryError(f"Email API request failed: {str(e)}") from e

        if not response.is_success:
            raise EmailDeliveryError(
                f"Email API returned {response.status_code}: {response.text}",
                status_code=response.status_code,
            )

        logger.info(f"✅ Email accepted by provider for {', '.join(message.to)}")
