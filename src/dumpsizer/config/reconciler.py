"""Run-level settings for the reconcile command."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import env_flag, optional_env_var
from .webhook import WebhookConfig, get_webhook_config

DEFAULT_EXTENDLV: Final[str] = "/usr/sbin/extendlv"


@dataclass(frozen=True, slots=True)
class ReconcilerConfig:
    facts_file: Path | None = None
    dry_run: bool = False
    extendlv_path: str = DEFAULT_EXTENDLV
    webhook: WebhookConfig | None = None


def get_reconciler_config() -> ReconcilerConfig:
    facts_file = optional_env_var("DUMPSIZER_FACTS_FILE")
    webhook = get_webhook_config() if optional_env_var("DUMPSIZER_WEBHOOK_URL") else None
    return ReconcilerConfig(
        facts_file=Path(facts_file).expanduser() if facts_file else None,
        dry_run=env_flag("DUMPSIZER_DRY_RUN"),
        extendlv_path=optional_env_var("DUMPSIZER_EXTENDLV") or DEFAULT_EXTENDLV,
        webhook=webhook,
    )
