from unittest.mock import MagicMock

from fastapi import status

from conftest import create_document
from inkwell.clients import EmailClient
from inkwell.config import Settings
from inkwell.core.events import (
    DocumentUpdatedEvent,
    EventBus,
    PasswordResetRequestedEvent,
)
from inkwell.core.events.handlers import register_event_handlers


def email_settings(**overrides):
    values = dict(
        _env_file=None,
        jwt_secret_key="test-secret-key",
        smtp_host="smtp.example.com",
        smtp_port=2525,
        smtp_username="mailer",
        smtp_password="hunter2",
        email_from="noreply@example.com",
        frontend_url="https://docs.example.com/",
    )
    values.update(overrides)
    return Settings(**values)


def reset_event(token="abc"):
    return PasswordResetRequestedEvent(user_id="u1", email="a@example.com", first_name="Alice", token=token)


def test_publish_reaches_subscribers_in_order():
    bus = EventBus()
    calls = []
    bus.subscribe(PasswordResetRequestedEvent, lambda event: calls.append(("first", event.user_id)))
    bus.subscribe(PasswordResetRequestedEvent, lambda event: calls.append(("second", event.user_id)))

    bus.publish(reset_event())
    assert calls == [("first", "u1"), ("second", "u1")]


def test_failing_handler_does_not_reach_publisher():
    bus = EventBus()
    after = []

    def explode(event):
        raise RuntimeError("boom")

    bus.subscribe(PasswordResetRequestedEvent, explode)
    bus.subscribe(PasswordResetRequestedEvent, after.append)

    bus.publish(reset_event())
    assert len(after) == 1


def test_publish_without_subscribers():
    EventBus().publish(DocumentUpdatedEvent("d1", "u1", 2, {}, False))


def test_reset_event_repr_hides_token():
    assert "s3cret-token" not in repr(reset_event(token="s3cret-token"))


def test_email_client_disabled_without_smtp():
    client = EmailClient(Settings(_env_file=None, jwt_secret_key="test-secret-key"))
    assert client.enabled is False
    assert client.send_password_reset("a@example.com", "Alice", "abc") is False


def test_build_reset_url():
    client = EmailClient(email_settings())
    assert client.build_reset_url("a.b+c") == "https://docs.example.com/reset-password?token=a.b%2Bc"


def test_send_password_reset(monkeypatch):
    smtp = MagicMock()
    smtp_class = MagicMock()
    smtp_class.return_value.__enter__.return_value = smtp
    monkeypatch.setattr("inkwell.clients.email_client.smtplib.SMTP", smtp_class)

    client = EmailClient(email_settings())
    assert client.send_password_reset("a@example.com", "Alice", "abc") is True

    smtp_class.assert_called_once_with("smtp.example.com", 2525, timeout=10)
    smtp.starttls.assert_called_once()
    smtp.login.assert_called_once_with("mailer", "hunter2")
    message = smtp.send_message.call_args[0][0]
    assert message["To"] == "a@example.com"
    assert message["From"] == "noreply@example.com"
    assert "https://docs.example.com/reset-password?token=abc" in message.get_content()


def test_send_without_tls_or_login(monkeypatch):
    smtp = MagicMock()
    smtp_class = MagicMock()
    smtp_class.return_value.__enter__.return_value = smtp
    monkeypatch.setattr("inkwell.clients.email_client.smtplib.SMTP", smtp_class)

    client = EmailClient(email_settings(smtp_use_tls=False, smtp_username=None))
    client.send_password_reset("a@example.com", "Alice", "abc")

    smtp.starttls.assert_not_called()
    smtp.login.assert_not_called()
    smtp.send_message.assert_called_once()


def test_registered_handlers_send_reset_email():
    bus = EventBus()
    email_client = MagicMock()
    register_event_handlers(bus, email_client)

    bus.publish(reset_event(token="tok"))
    email_client.send_password_reset.assert_called_once_with("a@example.com", "Alice", "tok")


def test_email_failure_does_not_fail_forgot_password(client, alice, monkeypatch):
    def refuse(*args, **kwargs):
        raise ConnectionRefusedError("smtp down")

    monkeypatch.setattr("inkwell.clients.email_client.smtplib.SMTP", refuse)
    client.app.state.settings.smtp_host = "smtp.example.com"
    client.app.state.settings.email_from = "noreply@example.com"

    response = client.post("/api/auth/forgot-password", json={"email": alice.email})
    assert response.status_code == status.HTTP_200_OK


def test_document_events_are_published(client, app, alice):
    updates = []
    app.state.event_bus.subscribe(DocumentUpdatedEvent, updates.append)

    document = create_document(client, alice, content="one")
    client.put(f"/api/documents/{document['id']}", json={"content": "two"}, headers=alice.headers)
    client.put(f"/api/documents/{document['id']}", json={"title": "Renamed"}, headers=alice.headers)

    assert [(event.version, event.snapshot_created) for event in updates] == [(2, True), (3, False)]
    assert updates[1].changes == {"title": "Renamed"}
