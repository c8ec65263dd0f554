"""Notification sinks for diagnostic decisions."""

from __future__ import annotations

import asyncio
import socket
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from dumpsizer.errors import NotificationError

from .http_resilience import ResilientClient

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from dumpsizer.config.http_resilience import ResilienceConfig
    from dumpsizer.config.webhook import WebhookConfig
    from dumpsizer.domain.dispatch import Notification
    from dumpsizer.domain.ports import Notifier

log = getLogger(__name__)


@dataclass(slots=True)
class LoggingNotifier:
    """Emit notifications as WARNING records."""

    logger_name: str = "dumpsizer.notify"

    def notify(self, notification: Notification) -> None:
        getLogger(self.logger_name).warning("%s", notification.summary)


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


@dataclass(slots=True)
class WebhookNotifier:
    """POST notifications as JSON to a configured URL."""

    config: WebhookConfig
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )
    host: str = field(default_factory=socket.gethostname)

    def notify(self, notification: Notification) -> None:
        asyncio.run(self._post(notification))

    def payload(self, notification: Notification) -> dict[str, str]:
        return {
            "summary": notification.summary,
            "device": notification.device_name,
            "kind": str(notification.kind),
            "host": self.host,
        }

    async def _post(self, notification: Notification) -> None:
        async with self.client_factory(self.config.resilience) as client:
            try:
                response = await client.post(self.config.url, json=self.payload(notification))
            except httpx.HTTPError as exc:
                raise NotificationError(f"Webhook delivery failed: {exc}") from exc

        if response.is_error:
            raise NotificationError(
                f"Webhook rejected notification with HTTP {response.status_code}",
                status_code=response.status_code,
            )
        log.debug("Delivered %s notification for %s", notification.kind, notification.device_name)


@dataclass(slots=True)
class FanOutNotifier:
    """Deliver each notification to every wrapped notifier, in order."""

    notifiers: Sequence[Notifier]

    def notify(self, notification: Notification) -> None:
        for notifier in self.notifiers:
            notifier.notify(notification)
