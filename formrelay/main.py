#run it with uvicorn formrelay.main:app --reload
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from formrelay.api.api_router import api_router
from formrelay.core.config import get_settings
from formrelay.core.errors import MethodNotAllowed
from dotenv import load_dotenv
import logging

# Load environment variables from .env file
load_dotenv()

settings = get_settings()

# Set up logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

app = FastAPI(title="Contact Form Backend", version="1.0.0")

# CORS setup
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    """Answer router-level 405s with the same JSON body as the contact handler"""
    if exc.status_code == 405:
        return JSONResponse(status_code=405, content={"error": MethodNotAllowed.public_message})
    return await http_exception_handler(request, exc)


@app.get("/api/health")
def health_check():
    """
    Health check endpoint.

    Reports which integrations are configured without exposing their values.
    """
    current = get_settings()
    return {
        "status": "ok",
        "env_vars": {
            "contact_email": bool(current.contact_email),
            "resend_api_key": current.email_enabled,
        },
    }
