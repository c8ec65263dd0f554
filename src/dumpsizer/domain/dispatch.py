"""Interpret reconciler decisions against action sinks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from .decisions import CapacityBlocked, CeilingBlocked, DecisionKind, ExtendRequested

if TYPE_CHECKING:
    from .decisions import Decision
    from .ports import Notifier, VolumeExtender


log = getLogger(__name__)


class DispatchOutcome(StrEnum):
    SKIPPED = "skipped"
    EXTENDED = "extended"
    NOTIFIED = "notified"


@dataclass(frozen=True, slots=True, kw_only=True)
class Notification:
    """Human-readable diagnostic for an operator."""

    kind: DecisionKind
    device_name: str
    summary: str


def render_notification(decision: CeilingBlocked | CapacityBlocked) -> Notification:
    if isinstance(decision, CeilingBlocked):
        required = (
            f" but {decision.required_units} are required to hold a dump"
            if decision.required_units is not None
            else ""
        )
        summary = (
            f"Dump device {decision.device_name} cannot be extended: its maximum of "
            f"{decision.max_units} logical partitions is too small to satisfy the "
            f"required size{required}. Raise the maximum with chlv -x."
        )
    else:
        group = decision.volume_group or "the owning volume group"
        summary = (
            f"Volume group {group} needs {decision.shortfall_units} more free physical "
            f"partitions before dump device {decision.device_name} can be extended."
        )
    return Notification(kind=decision.kind, device_name=decision.device_name, summary=summary)


@dataclass(slots=True)
class DecisionDispatcher:
    """Send each decision to at most one sink."""

    extender: VolumeExtender
    notifier: Notifier

    def dispatch(self, decision: Decision) -> DispatchOutcome:
        if isinstance(decision, ExtendRequested):
            log.info(
                "Extending %s by %s logical partitions",
                decision.device_name,
                decision.delta_units,
            )
            self.extender.extend(decision.device_name, decision.delta_units)
            return DispatchOutcome.EXTENDED

        if isinstance(decision, CeilingBlocked | CapacityBlocked):
            self.notifier.notify(render_notification(decision))
            return DispatchOutcome.NOTIFIED

        log.debug("Nothing to dispatch (%s)", decision.reason)
        return DispatchOutcome.SKIPPED
