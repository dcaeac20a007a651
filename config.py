"""
Application settings loaded from the environment (.env supported)
"""
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

DEFAULT_SENDER_EMAIL = "noreply@codewhiz.co"
DEFAULT_SENDER_NAME = "CodeWhiz Contact Form"


class Settings(BaseModel):
    # Both are required to send mail, but checked on every request
    resend_api_key: Optional[str] = None
    contact_email: Optional[str] = None

    sender_email: str = DEFAULT_SENDER_EMAIL
    sender_name: str = DEFAULT_SENDER_NAME

    cors_origins: list[str] = ["http://localhost:3000"]
    host: str = "127.0.0.1"
    port: int = 8000


def _env(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def load_settings() -> Settings:
    """
    Build Settings from the current environment

    Blank values are treated as unset.
    """
    origins = _env("CORS_ORIGINS")
    return Settings(
        resend_api_key=_env("RESEND_API_KEY"),
        contact_email=_env("CONTACT_EMAIL"),
        sender_email=_env("CONTACT_FROM_EMAIL") or DEFAULT_SENDER_EMAIL,
        sender_name=_env("CONTACT_FROM_NAME") or DEFAULT_SENDER_NAME,
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()] if origins else ["http://localhost:3000"],
        host=_env("HOST") or "127.0.0.1",
        port=int(_env("PORT") or "8000"),
    )
