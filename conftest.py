import pytest
from fastapi.testclient import TestClient

from config import Settings
from mailer import SendResult
from main import app, get_mailer, get_settings


class FakeMailer:
    """Records every message instead of calling Resend"""

    def __init__(self, result=None, error=None):
        self.result = result or SendResult(success=True, message_id="test-id")
        self.error = error
        self.sent = []

    def send(self, message):
        self.sent.append(message)
        if self.error is not None:
            raise self.error
        return self.result


VALID_PAYLOAD = {
    "name": "A",
    "email": "a@b.co",
    "subject": "Hi",
    "message": "Hello",
}


@pytest.fixture
def settings():
    return Settings(resend_api_key="re_test_key", contact_email="owner@example.com")


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def client(settings, mailer):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_mailer] = lambda: mailer
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
