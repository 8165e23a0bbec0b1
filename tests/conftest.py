"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- In-memory database
- FastAPI test client built by the application factory
- Recording email provider
- Temporary upload directory
"""

import pytest
from fastapi.testclient import TestClient

from sitecms.application import create_app
from sitecms.core.config import Settings
from sitecms.core.database import Database
from sitecms.core.storage import LocalStorage
from sitecms.services.email_service import EmailDeliveryError, EmailProvider


class RecordingEmailProvider(EmailProvider):
    """Email provider that keeps messages in memory instead of sending them."""

    name = "recording"

    def __init__(self, fail_with: EmailDeliveryError = None):
        super().__init__("noreply@example.com", "Website")
        self.sent = []
        self.fail_with = fail_with

    def send(self, message):
        if self.fail_with:
            raise self.fail_with
        self.sent.append(message)
        return f"msg-{len(self.sent)}"


@pytest.fixture
def test_settings(tmp_path):
    """Settings isolated from the environment and .env file."""
    return Settings(
        _env_file=None,
        DATABASE_URL="sqlite:///:memory:",
        UPLOAD_DIR=str(tmp_path / "uploads"),
        ADMIN_EMAIL="owner@example.com",
        EMAIL_PROVIDER="",
        RESEND_API_KEY="",
        SMTP_HOST="",
        STORAGE_BACKEND="local",
        RESUME_RETENTION="discard",
    )


@pytest.fixture
def database(test_settings):
    db = Database(test_settings.SQLALCHEMY_DATABASE_URI)
    db.init_db()
    yield db
    db.dispose()


@pytest.fixture
def db_session(database):
    """Session on the same in-memory database the app uses."""
    session = database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def email_provider():
    return RecordingEmailProvider()


@pytest.fixture
def make_client(test_settings, database):
    """
    Build a TestClient; keyword arguments override create_app collaborators.

    By default: local storage in the temp dir, recording email provider.
    """
    clients = []

    def _make(raise_server_exceptions=True, **overrides):
        overrides.setdefault("app_settings", test_settings)
        overrides.setdefault("database", database)
        overrides.setdefault(
            "storage", LocalStorage(test_settings.UPLOAD_DIR, test_settings.UPLOAD_URL_PREFIX)
        )
        overrides.setdefault("email_provider", RecordingEmailProvider())
        app = create_app(**overrides)
        client = TestClient(app, raise_server_exceptions=raise_server_exceptions)
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client, email_provider):
    """Default test client with a recording email provider."""
    return make_client(email_provider=email_provider)


@pytest.fixture
def sample_job_data():
    """Sample job data for testing"""
    return {
        "title": "Editor",
        "location": "Remote",
        "description": "Lead our content team and keep every publication consistent.",
    }
