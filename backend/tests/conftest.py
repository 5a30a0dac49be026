import os
import smtplib

import pytest

os.environ.setdefault("CORS_ORIGINS", "http://localhost")
os.environ.setdefault("MAIL_LOCALE", "en")

from fastapi.testclient import TestClient

from app.core.mailer import TransportConfig
from app.dependencies import RelayOptions, get_relay_options, get_transport_config
from app.main import app


VALID_CONFIG = TransportConfig(
    host="smtp.example.com",
    port=587,
    secure=False,
    user="mailer",
    password="s3cret",
    from_email="site@example.com",
    to_email="owner@example.com",
    timeout=5.0,
)


class FakeSMTPServer:
    """Stands in for smtplib.SMTP / SMTP_SSL and records every connection."""

    def __init__(self):
        self.connections = []
        self.offers_starttls = True
        self.fail_on = None

    @property
    def sent(self):
        return [msg for conn in self.connections for msg in conn.sent]

    def factory(self, implicit_tls: bool):
        server = self

        class _Conn:
            def __init__(self, host, port, timeout=None, context=None):
                self.host = host
                self.port = port
                self.timeout = timeout
                self.implicit_tls = implicit_tls
                self.calls = []
                self.sent = []
                self.closed = False
                server.connections.append(self)
                if server.fail_on == "connect":
                    raise ConnectionRefusedError("connection refused")

            def __enter__(self):
                return self

            def __exit__(self, *exc):
                self.closed = True
                return False

            def ehlo(self):
                self.calls.append("ehlo")

            def has_extn(self, name):
                return name.lower() == "starttls" and server.offers_starttls

            def starttls(self, context=None):
                self.calls.append("starttls")

            def login(self, user, password):
                self.calls.append(("login", user, password))
                if server.fail_on == "login":
                    raise smtplib.SMTPAuthenticationError(535, b"bad credentials")

            def send_message(self, msg):
                self.calls.append("send_message")
                if server.fail_on == "send":
                    raise smtplib.SMTPDataError(554, b"rejected")
                self.sent.append(msg)

        return _Conn


@pytest.fixture
def smtp_server(monkeypatch):
    server = FakeSMTPServer()
    monkeypatch.setattr("app.core.mailer.smtplib.SMTP", server.factory(implicit_tls=False))
    monkeypatch.setattr("app.core.mailer.smtplib.SMTP_SSL", server.factory(implicit_tls=True))
    return server


@pytest.fixture
def client():
    """TestClient with the transport config and relay options swapped per test."""
    state = {"config": VALID_CONFIG, "options": RelayOptions(locale="en", strict=False)}
    app.dependency_overrides[get_transport_config] = lambda: state["config"]
    app.dependency_overrides[get_relay_options] = lambda: state["options"]
    test_client = TestClient(app)
    test_client.relay_state = state
    try:
        yield test_client
    finally:
        app.dependency_overrides.clear()
