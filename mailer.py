"""
Email Service using Resend API
Builds and delivers contact form notifications
"""
import html
from dataclasses import dataclass, field
from typing import Optional, Protocol

import resend
from resend.exceptions import ResendError

SUBJECT_PREFIX = "New Contact Form Submission: "


@dataclass
class OutboundEmail:
    to: str
    sender_email: str
    sender_name: str
    reply_to: str
    subject: str
    html: str

    def to_resend_params(self) -> dict:
        return {
            "from": f"{self.sender_name} <{self.sender_email}>",
            "to": [self.to],
            "reply_to": self.reply_to,
            "subject": self.subject,
            "html": self.html,
        }


@dataclass
class SendResult:
    success: bool
    message_id: Optional[str] = None
    error: Optional[str] = None
    error_body: dict = field(default_factory=dict)


class Mailer(Protocol):
    def send(self, message: OutboundEmail) -> SendResult: ...


def render_contact_html(name: str, email: str, subject: str, message: str) -> str:
    """
    Render the notification body for a contact form submission

    Every user-supplied value is HTML-escaped before interpolation.
    """
    name, email, subject, message = (html.escape(v) for v in (name, email, subject, message))
    return f"""
    <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
        <h2 style="color: #22c55e;">New Contact Form Submission</h2>
        <div style="margin: 20px 0; padding: 20px; background-color: #f8f9fa; border-radius: 8px;">
            <p><strong>Name:</strong> {name}</p>
            <p><strong>Email:</strong> {email}</p>
            <p><strong>Subject:</strong> {subject}</p>
            <p style="margin-top: 20px;"><strong>Message:</strong></p>
            <p style="white-space: pre-wrap;">{message}</p>
        </div>
    </div>
    """


def build_contact_email(
    *,
    name: str,
    email: str,
    subject: str,
    message: str,
    to_email: str,
    sender_email: str,
    sender_name: str,
) -> OutboundEmail:
    """
    Assemble the email relayed to the site owner

    Args:
        name, email, subject, message: Submitted form values
        to_email: Configured destination address
        sender_email, sender_name: Fixed sender identity

    Returns:
        OutboundEmail: replies go straight to the submitter
    """
    return OutboundEmail(
        to=to_email,
        sender_email=sender_email,
        sender_name=sender_name,
        reply_to=email,
        subject=SUBJECT_PREFIX + subject,
        html=render_contact_html(name, email, subject, message),
    )


class ResendMailer:
    """Delivers OutboundEmail through the Resend API"""

    def __init__(self, api_key: str):
        self.api_key = api_key

    def send(self, message: OutboundEmail) -> SendResult:
        """
        Send one email

        Returns:
            SendResult: failed (with the provider's error details) when
            Resend rejects the request. Any other exception propagates.
        """
        resend.api_key = self.api_key

        try:
            response = resend.Emails.send(message.to_resend_params())
        except ResendError as e:
            return SendResult(
                success=False,
                error=e.message or "Unknown error",
                error_body={
                    "code": e.code,
                    "error_type": e.error_type,
                    "message": e.message,
                    "suggested_action": e.suggested_action,
                },
            )

        return SendResult(success=True, message_id=response.get("id"))
