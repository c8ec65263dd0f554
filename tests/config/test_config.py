from __future__ import annotations

from dataclasses import fields
from pathlib import Path

import pytest

from dumpsizer.config import (
    DEFAULT_EXTENDLV,
    ConfigurationError,
    MissingConfigurationError,
    ResilienceConfig,
    env_flag,
    get_reconciler_config,
    get_webhook_config,
    require_env_vars,
)


def test_require_env_vars_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "value")

    assert require_env_vars(["EXAMPLE_VAR"]) == {"EXAMPLE_VAR": "value"}


def test_require_env_vars_raises_for_missing_and_blank(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MISSING_VAR", raising=False)
    monkeypatch.setenv("BLANK_VAR", "   ")

    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["MISSING_VAR", "BLANK_VAR"])

    assert "BLANK_VAR, MISSING_VAR" in str(exc.value)


@pytest.mark.parametrize(("raw", "expected"), [("1", True), ("YES", True), ("off", False)])
def test_env_flag_parses_booleans(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool
) -> None:
    monkeypatch.setenv("DUMPSIZER_DRY_RUN", raw)

    assert env_flag("DUMPSIZER_DRY_RUN") is expected


def test_env_flag_rejects_garbage(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DUMPSIZER_DRY_RUN", "maybe")

    with pytest.raises(ConfigurationError, match="DUMPSIZER_DRY_RUN"):
        env_flag("DUMPSIZER_DRY_RUN")


def test_reconciler_config_defaults() -> None:
    config = get_reconciler_config()

    assert config.facts_file is None
    assert config.dry_run is False
    assert config.extendlv_path == DEFAULT_EXTENDLV
    assert config.webhook is None


def test_reconciler_config_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DUMPSIZER_FACTS_FILE", "/etc/dumpsizer/facts.json")
    monkeypatch.setenv("DUMPSIZER_DRY_RUN", "true")
    monkeypatch.setenv("DUMPSIZER_EXTENDLV", "/opt/bin/extendlv")
    monkeypatch.setenv("DUMPSIZER_WEBHOOK_URL", "https://hooks.example.test/dump")
    monkeypatch.setenv("DUMPSIZER_WEBHOOK_TOKEN", "s3cret")

    config = get_reconciler_config()

    assert config.facts_file == Path("/etc/dumpsizer/facts.json")
    assert config.dry_run is True
    assert config.extendlv_path == "/opt/bin/extendlv"
    assert config.webhook is not None
    assert config.webhook.url == "https://hooks.example.test/dump"
    assert config.webhook.resilience.default_headers == {"Authorization": "Bearer s3cret"}


def test_webhook_config_requires_url() -> None:
    with pytest.raises(MissingConfigurationError, match="DUMPSIZER_WEBHOOK_URL"):
        get_webhook_config()


def test_webhook_config_reads_url_and_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DUMPSIZER_WEBHOOK_URL", "https://hooks.example.test/dump")
    monkeypatch.setenv("DUMPSIZER_WEBHOOK_TOKEN", "s3cret")

    assert get_reconciler_config().webhook == get_webhook_config()


def test_webhook_resilience_carries_only_posting_settings() -> None:
    names = {item.name for item in fields(ResilienceConfig)}

    assert names == {"name", "timeout_seconds", "retry", "ratelimit", "default_headers"}
