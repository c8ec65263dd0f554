from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from dumpsizer.adapters.aix.commands import CommandResult
from dumpsizer.domain.facts import BYTES_PER_MEGABYTE

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from dumpsizer.domain.dispatch import Notification

UNIT_128MB = 128 * BYTES_PER_MEGABYTE


@dataclass
class FakeCommandRunner:
    """Answer commands from a table keyed by the space-joined argument list."""

    responses: Mapping[str, CommandResult | str]
    calls: list[tuple[str, ...]] = field(default_factory=list)

    def __call__(self, args: Sequence[str]) -> CommandResult:
        self.calls.append(tuple(args))
        key = " ".join(args)
        response = self.responses.get(key)
        if response is None:
            return CommandResult(args=tuple(args), returncode=1, stderr=f"{key}: not found")
        if isinstance(response, str):
            return CommandResult(args=tuple(args), returncode=0, stdout=response)
        return response


@dataclass
class RecordingExtender:
    calls: list[tuple[str, int]] = field(default_factory=list)

    def extend(self, device_name: str, delta_units: int) -> None:
        self.calls.append((device_name, delta_units))


@dataclass
class RecordingNotifier:
    notifications: list[Notification] = field(default_factory=list)

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)
