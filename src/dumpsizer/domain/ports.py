"""Ports for collecting facts and executing decisions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .dispatch import Notification
    from .facts import FactSnapshot


@runtime_checkable
class FactSource(Protocol):
    """Callable port returning a fresh fact snapshot for one run."""

    def __call__(self) -> FactSnapshot: ...


@runtime_checkable
class VolumeExtender(Protocol):
    """Grow a logical volume by a number of allocation units."""

    def extend(self, device_name: str, delta_units: int) -> None: ...


@runtime_checkable
class Notifier(Protocol):
    """Deliver a human-readable diagnostic."""

    def notify(self, notification: Notification) -> None: ...


__all__ = ["FactSource", "Notifier", "VolumeExtender"]
