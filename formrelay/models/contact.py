from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

SERVICE_NOT_SPECIFIED = "Not specified"
HONEYPOT_FIELD = "website"


class ContactSubmission(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    service: Optional[str] = None
    message: Optional[str] = None
    website: Optional[str] = None  # Honeypot - real visitors never fill it in

    @property
    def service_label(self) -> str:
        return self.service or SERVICE_NOT_SPECIFIED

    def log_record(self, received_at: datetime) -> dict:
        """Fields written to the submission log"""
        return {
            "name": self.name,
            "email": self.email,
            "service": self.service_label,
            "message": self.message,
            "timestamp": received_at.isoformat(),
        }


class EmailMessage(BaseModel):
    """Payload accepted by the transactional email API"""
    from_: str = Field(..., alias="from")
    to: list[str]
    subject: str
    html: str
    reply_to: Optional[str] = None

    model_config = {"populate_by_name": True}

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
