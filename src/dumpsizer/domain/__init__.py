"""Decision core for sizing the AIX primary dump device."""

from __future__ import annotations

from .decisions import (
    CapacityBlocked,
    CeilingBlocked,
    Decision,
    DecisionKind,
    ExtendRequested,
    NoActionNeeded,
    NoActionReason,
)
from .dispatch import DecisionDispatcher, DispatchOutcome, Notification, render_notification
from .facts import (
    AIX_FAMILY,
    BYTES_PER_MEGABYTE,
    DumpDeviceFact,
    FactSnapshot,
    LogicalVolumeFact,
    VolumeGroupFact,
    device_short_name,
    is_aix_family,
)
from .ports import FactSource, Notifier, VolumeExtender
from .reconciler import evaluate, evaluate_snapshot, units_needed

__all__ = [
    "AIX_FAMILY",
    "BYTES_PER_MEGABYTE",
    "CapacityBlocked",
    "CeilingBlocked",
    "Decision",
    "DecisionDispatcher",
    "DecisionKind",
    "DispatchOutcome",
    "DumpDeviceFact",
    "ExtendRequested",
    "FactSnapshot",
    "FactSource",
    "LogicalVolumeFact",
    "NoActionNeeded",
    "NoActionReason",
    "Notification",
    "Notifier",
    "VolumeExtender",
    "VolumeGroupFact",
    "device_short_name",
    "evaluate",
    "evaluate_snapshot",
    "is_aix_family",
    "render_notification",
    "units_needed",
]
