"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from dumpsizer.adapters.aix import AixCommandFactSource, ExtendLvCommand
from dumpsizer.adapters.facts import JsonFactSource
from dumpsizer.adapters.notifications import FanOutNotifier, LoggingNotifier, WebhookNotifier
from dumpsizer.config import ReconcilerConfig, get_reconciler_config
from dumpsizer.domain.dispatch import DecisionDispatcher, DispatchOutcome
from dumpsizer.domain.reconciler import evaluate_snapshot

if TYPE_CHECKING:
    from dumpsizer.domain.decisions import Decision
    from dumpsizer.domain.ports import FactSource, Notifier


log = getLogger(__name__)


@dataclass(slots=True)
class ReconcileResult:
    """Outcome of one evaluate-and-dispatch run."""

    decision: Decision
    outcome: DispatchOutcome


def build_fact_source(config: ReconcilerConfig) -> FactSource:
    if config.facts_file is not None:
        return JsonFactSource(config.facts_file)
    return AixCommandFactSource()


def build_dispatcher(config: ReconcilerConfig) -> DecisionDispatcher:
    notifier: Notifier = LoggingNotifier()
    if config.webhook is not None:
        notifier = FanOutNotifier((notifier, WebhookNotifier(config.webhook)))
    return DecisionDispatcher(
        extender=ExtendLvCommand(executable=config.extendlv_path, dry_run=config.dry_run),
        notifier=notifier,
    )


def evaluate_dump_device(
    *,
    source: FactSource | None = None,
    config: ReconcilerConfig | None = None,
) -> Decision:
    """Collect one fact snapshot and return the reconciler's decision."""

    effective_source = source or build_fact_source(config or get_reconciler_config())
    snapshot = effective_source()
    decision = evaluate_snapshot(snapshot)
    log.info(
        "Dump device %s: decision=%s",
        snapshot.dump_device.device_path or "<none>",
        decision.kind,
    )
    return decision


def reconcile_dump_device(
    *,
    source: FactSource | None = None,
    dispatcher: DecisionDispatcher | None = None,
    config: ReconcilerConfig | None = None,
) -> ReconcileResult:
    """Evaluate the dump device and hand the decision to its sink."""

    effective_config = config or get_reconciler_config()
    decision = evaluate_dump_device(source=source, config=effective_config)
    effective_dispatcher = dispatcher or build_dispatcher(effective_config)
    outcome = effective_dispatcher.dispatch(decision)
    log.info(f"Finished dump device reconciliation: decision={decision.kind}, outcome={outcome}")
    return ReconcileResult(decision=decision, outcome=outcome)
