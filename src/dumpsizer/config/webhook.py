"""Webhook notification configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, require_env_vars
from .http_resilience import RateLimit, ResilienceConfig

WEBHOOK_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class WebhookConfig:
    """Where diagnostic notifications are posted."""

    url: str
    resilience: ResilienceConfig
    token: str | None = None


def _default_resilience(token: str | None) -> ResilienceConfig:
    headers = {"Authorization": f"Bearer {token}"} if token else None
    return ResilienceConfig(
        name="webhook",
        timeout_seconds=WEBHOOK_TIMEOUT_SECONDS,
        ratelimit=RateLimit(max_calls=1, per_seconds=1.0),
        default_headers=headers,
    )


def build_webhook_config(
    url: str,
    *,
    token: str | None = None,
    resilience: ResilienceConfig | None = None,
) -> WebhookConfig:
    return WebhookConfig(
        url=url,
        token=token,
        resilience=resilience or _default_resilience(token),
    )


def get_webhook_config(*, resilience: ResilienceConfig | None = None) -> WebhookConfig:
    values = require_env_vars(("DUMPSIZER_WEBHOOK_URL",))
    return build_webhook_config(
        values["DUMPSIZER_WEBHOOK_URL"],
        token=optional_env_var("DUMPSIZER_WEBHOOK_TOKEN"),
        resilience=resilience,
    )
