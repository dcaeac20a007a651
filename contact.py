"""
Contact form submission handling
Validates a submission and relays it through the mailer
"""
import asyncio
import json
import re
from dataclasses import dataclass

from pydantic import BaseModel

from config import Settings
from mailer import Mailer, build_contact_email

REQUIRED_FIELDS = ("name", "email", "subject", "message")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

SUCCESS_MESSAGE = "Email sent successfully"


class Submission(BaseModel):
    name: str
    email: str
    subject: str
    message: str


@dataclass
class SubmissionResult:
    status_code: int
    body: dict


# ==================== ERRORS ====================

class ContactError(Exception):
    status_code = 500


class ConfigurationError(ContactError):
    """Operator has to fix the deployment"""


class ValidationError(ContactError):
    """Submitter has to fix the form"""
    status_code = 400


class ProviderError(ContactError):
    """The email provider rejected or failed the send"""

    def __init__(self, detail: str, response_body: dict):
        self.detail = detail
        self.response_body = response_body
        super().__init__(f"Resend error: {detail}. Response: {json.dumps(response_body)}")


class UnexpectedError(ContactError):
    pass


# ==================== VALIDATION ====================

def check_configuration(settings: Settings) -> None:
    if not settings.resend_api_key:
        raise ConfigurationError(
            "Resend API key is not configured. Please set the RESEND_API_KEY environment variable."
        )
    if not settings.contact_email:
        raise ConfigurationError(
            "Contact email is not configured. Please set the CONTACT_EMAIL environment variable."
        )


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def parse_submission(raw_body) -> Submission:
    """
    Turn a request body into a Submission

    Args:
        raw_body: JSON text/bytes, or an already decoded dict

    Raises:
        ValidationError: body is not a JSON object, a field is missing or
        empty, a field is not text, or the email is malformed
    """
    if isinstance(raw_body, dict):
        data = raw_body
    else:
        # Unparseable bodies are validation errors (400), not server errors
        try:
            data = json.loads(raw_body)
        except (TypeError, ValueError):
            raise ValidationError("Request body must be valid JSON")
        if not isinstance(data, dict):
            raise ValidationError("Request body must be valid JSON")

    values = {f: data.get(f) for f in REQUIRED_FIELDS}
    if any(v is None or v == "" for v in values.values()):
        raise ValidationError("All fields are required")
    if not all(isinstance(v, str) for v in values.values()):
        raise ValidationError("All fields must be text")

    if not is_valid_email(values["email"]):
        raise ValidationError("Invalid email format")

    return Submission(**values)


# ==================== HANDLER ====================

async def handle_submission(raw_body, settings: Settings, mailer: Mailer) -> SubmissionResult:
    """
    📧 Validate a contact form submission and send it as an email

    Checks run in order: credential, destination, fields, email format.
    Every failure is returned as {"success": False, "error": ...} with
    400 for validation problems and 500 for everything else.
    """
    try:
        check_configuration(settings)
        submission = parse_submission(raw_body)

        message = build_contact_email(
            name=submission.name,
            email=submission.email,
            subject=submission.subject,
            message=submission.message,
            to_email=settings.contact_email,
            sender_email=settings.sender_email,
            sender_name=settings.sender_name,
        )

        result = await asyncio.to_thread(mailer.send, message)

        if not result.success:
            raise ProviderError(result.error or "Unknown error", result.error_body)

        print(f"✅ Contact email sent for {submission.email}. ID: {result.message_id}")
        return SubmissionResult(200, {"success": True, "message": SUCCESS_MESSAGE})

    except ValidationError as e:
        return _failure(e)
    except ConfigurationError as e:
        print(f"❌ Contact form configuration error: {e}")
        return _failure(e)
    except ProviderError as e:
        print(f"❌ Resend error: {e.detail} {e.response_body}")
        return _failure(e)
    except Exception as e:
        print(f"❌ Contact form error: {e}")
        return _failure(UnexpectedError(f"Server error: {e}"))


def _failure(error: ContactError) -> SubmissionResult:
    return SubmissionResult(error.status_code, {"success": False, "error": str(error)})
