from __future__ import annotations

import json
import logging

import httpx
import pytest

from dumpsizer.adapters.http_resilience import ResilientClient
from dumpsizer.adapters.notifications import FanOutNotifier, LoggingNotifier, WebhookNotifier
from dumpsizer.config import ResilienceConfig, build_webhook_config
from dumpsizer.domain.decisions import DecisionKind
from dumpsizer.domain.dispatch import Notification
from dumpsizer.errors import NotificationError
from tests.helpers.fakes import RecordingNotifier

NOTIFICATION = Notification(
    kind=DecisionKind.CAPACITY_BLOCKED,
    device_name="lg_dumplv",
    summary="Volume group rootvg needs 1 more free physical partitions",
)


def _notifier(handler: httpx.MockTransport, *, token: str | None = None) -> WebhookNotifier:
    def factory(config: ResilienceConfig) -> ResilientClient:
        return ResilientClient(config, transport=handler)

    return WebhookNotifier(
        config=build_webhook_config("https://hooks.example.test/dump", token=token),
        client_factory=factory,
        host="aixhost01",
    )


def test_webhook_posts_json_payload() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(204)

    _notifier(httpx.MockTransport(handler), token="s3cret").notify(NOTIFICATION)

    (request,) = seen
    assert request.method == "POST"
    assert str(request.url) == "https://hooks.example.test/dump"
    assert request.headers["Authorization"] == "Bearer s3cret"
    assert json.loads(request.content) == {
        "summary": NOTIFICATION.summary,
        "device": "lg_dumplv",
        "kind": "capacity_blocked",
        "host": "aixhost01",
    }


def test_webhook_without_token_sends_no_authorization() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200)

    _notifier(httpx.MockTransport(handler)).notify(NOTIFICATION)

    assert "Authorization" not in seen[0].headers


def test_webhook_error_status_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"error": "bad payload"})

    with pytest.raises(NotificationError) as excinfo:
        _notifier(httpx.MockTransport(handler)).notify(NOTIFICATION)

    assert excinfo.value.status_code == 400


def test_webhook_transport_error_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.UnsupportedProtocol("no route", request=request)

    with pytest.raises(NotificationError, match="delivery failed"):
        _notifier(httpx.MockTransport(handler)).notify(NOTIFICATION)


def test_logging_notifier_emits_warning(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="dumpsizer.notify")

    LoggingNotifier().notify(NOTIFICATION)

    (record,) = caplog.records
    assert record.levelno == logging.WARNING
    assert record.getMessage() == NOTIFICATION.summary


def test_fan_out_delivers_to_every_notifier() -> None:
    first = RecordingNotifier()
    second = RecordingNotifier()

    FanOutNotifier((first, second)).notify(NOTIFICATION)

    assert first.notifications == [NOTIFICATION]
    assert second.notifications == [NOTIFICATION]
