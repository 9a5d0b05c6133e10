"""
Contact form endpoint.

POST is the only accepted method; every other method on the same path is
routed here too so the handler can answer with a JSON 405.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
import logging

from formrelay.core.config import get_settings
from formrelay.core.contact_handler import ContactSubmissionHandler

router = APIRouter()
logger = logging.getLogger(__name__)

CONTACT_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


def get_contact_handler() -> ContactSubmissionHandler:
    return ContactSubmissionHandler(get_settings())


@router.api_route("/contact", methods=CONTACT_METHODS)
async def submit_contact(
    request: Request,
    handler: ContactSubmissionHandler = Depends(get_contact_handler),
):
    body = await request.body()
    result = await handler.handle(request.method, body)
    return JSONResponse(status_code=result.status_code, content=result.body)
