"""Test configuration module."""

from typing import Optional

import pytest
from fastapi.testclient import TestClient

from formrelay.core.config import Settings
from formrelay.core.contact_handler import ContactSubmissionHandler
from formrelay.core.email_sender import EmailSender
from formrelay.core.errors import EmailDeliveryError
from formrelay.api.endpoints.contact import get_contact_handler
from formrelay.main import app


class FakeEmailSender(EmailSender):
    """Records messages instead of calling the provider"""

    def __init__(self, fail_with_status: Optional[int] = None):
        self.fail_with_status = fail_with_status
        self.sent = []

    async def send(self, message):
        self.sent.append(message)
        if self.fail_with_status is not None:
            raise EmailDeliveryError(
                f"Email API returned {self.fail_with_status}",
                status_code=self.fail_with_status,
            )


def make_settings(**overrides) -> Settings:
    values = {"contact_email": None, "resend_api_key": None}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def valid_payload():
    return {"name": "Jane", "email": "jane@example.com", "message": "Hello"}


@pytest.fixture
def fake_sender():
    return FakeEmailSender()


@pytest.fixture
def configured_settings():
    return make_settings(resend_api_key="re_test_key", contact_email="owner@example.com")


@pytest.fixture
def unconfigured_settings():
    return make_settings()


@pytest.fixture
def make_client():
    """Build a TestClient whose contact endpoint uses the given handler"""

    def _make(handler: ContactSubmissionHandler) -> TestClient:
        app.dependency_overrides[get_contact_handler] = lambda: handler
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
