"""
Contact form presenter
Renders the form page and drives a submission against the contact endpoint
"""
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

import httpx
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

CONTACT_ENDPOINT = "/api/contact"
FORM_FIELDS = ("name", "email", "subject", "message")

FALLBACK_ERROR = "Failed to send message"
SUCCESS_TITLE = "Success!"
SUCCESS_TEXT = "Your message has been sent. We'll get back to you soon."


class FormState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"


@dataclass
class Notification:
    title: str
    description: str
    variant: str = "default"


def form_context(values: Optional[dict] = None, error: Optional[str] = None, busy: bool = False) -> dict:
    return {
        "endpoint": CONTACT_ENDPOINT,
        "values": values or dict.fromkeys(FORM_FIELDS, ""),
        "error": error,
        "busy": busy,
        "fallback_error": FALLBACK_ERROR,
        "success_text": SUCCESS_TEXT,
    }


class ContactFormPresenter:
    """
    Python side of the contact form

    Holds field values and the idle/submitting state. One submit() is one
    POST; there is no automatic retry.
    """

    def __init__(self, client: httpx.Client, endpoint: str = CONTACT_ENDPOINT):
        self.client = client
        self.endpoint = endpoint
        self.values = dict.fromkeys(FORM_FIELDS, "")
        self.state = FormState.IDLE
        self.error: Optional[str] = None
        self.notifications: list[Notification] = []

    @property
    def submit_enabled(self) -> bool:
        return self.state is FormState.IDLE

    def set_field(self, name: str, value: str) -> None:
        if name not in self.values:
            raise KeyError(f"Unknown contact form field: {name}")
        self.values[name] = value

    def fill(self, **values: str) -> None:
        for name, value in values.items():
            self.set_field(name, value)

    def reset(self) -> None:
        self.values = dict.fromkeys(FORM_FIELDS, "")

    def submit(self) -> bool:
        """
        Send the current values

        Returns:
            bool: True if the server accepted the message. On failure the
            server's error text is kept in self.error and in a destructive
            notification.
        """
        if not self.submit_enabled:
            return False

        self.state = FormState.SUBMITTING
        self.error = None

        try:
            response = self.client.post(self.endpoint, json=dict(self.values))
            data = _json_or_empty(response)
            if not data.get("success"):
                self._fail(data.get("error") or FALLBACK_ERROR)
                return False

            self.notifications.append(Notification(SUCCESS_TITLE, SUCCESS_TEXT))
            self.reset()
            return True

        except httpx.HTTPError as e:
            print(f"Contact form error: {e}")
            self._fail(str(e) or FALLBACK_ERROR)
            return False

        finally:
            self.state = FormState.IDLE

    def _fail(self, message: str) -> None:
        self.error = message
        self.notifications.append(Notification("Error", message, variant="destructive"))

    def render(self) -> str:
        return templates.get_template("contact_form.html").render(
            form_context(self.values, self.error, busy=self.state is FormState.SUBMITTING)
        )


def _json_or_empty(response: httpx.Response) -> dict:
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}
