"""Point-in-time host facts consumed by the reconciler.

Facts are collected fresh for every run and never mutated afterwards. Counts are
expressed in allocation units (AIX logical/physical partitions) unless the name
says bytes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from posixpath import basename
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Mapping

BYTES_PER_MEGABYTE: Final[int] = 1_048_576
AIX_FAMILY: Final[str] = "AIX"


def device_short_name(device_path: str) -> str:
    """Strip leading directory components from a device path."""

    return basename(device_path.rstrip("/")) or device_path


def is_aix_family(os_family: str) -> bool:
    return os_family.strip().upper() == AIX_FAMILY


def _require_non_negative(owner: str, **values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{owner}.{name} must be non-negative, got {value}")


@dataclass(frozen=True, slots=True, kw_only=True)
class DumpDeviceFact:
    """Primary dump device and the OS estimate of a dump's size."""

    device_path: str
    estimated_bytes: int

    def __post_init__(self) -> None:
        _require_non_negative("DumpDeviceFact", estimated_bytes=self.estimated_bytes)

    @property
    def device_name(self) -> str:
        return device_short_name(self.device_path)


@dataclass(frozen=True, slots=True, kw_only=True)
class LogicalVolumeFact:
    """Geometry of the logical volume backing a device path."""

    device_path: str
    volume_group: str
    current_units: int
    physical_units: int
    max_units: int
    unit_size_bytes: int

    def __post_init__(self) -> None:
        _require_non_negative(
            "LogicalVolumeFact",
            current_units=self.current_units,
            physical_units=self.physical_units,
            max_units=self.max_units,
            unit_size_bytes=self.unit_size_bytes,
        )

    @classmethod
    def from_megabytes(
        cls,
        *,
        device_path: str,
        volume_group: str,
        current_units: int,
        physical_units: int,
        max_units: int,
        unit_size_mb: int,
    ) -> LogicalVolumeFact:
        return cls(
            device_path=device_path,
            volume_group=volume_group,
            current_units=current_units,
            physical_units=physical_units,
            max_units=max_units,
            unit_size_bytes=unit_size_mb * BYTES_PER_MEGABYTE,
        )

    @property
    def device_name(self) -> str:
        return device_short_name(self.device_path)

    @property
    def current_size_bytes(self) -> int:
        return self.current_units * self.unit_size_bytes

    @property
    def has_single_copy(self) -> bool:
        """True when exactly one physical unit backs each logical unit."""

        return self.current_units == self.physical_units


@dataclass(frozen=True, slots=True, kw_only=True)
class VolumeGroupFact:
    name: str
    free_units: int

    def __post_init__(self) -> None:
        _require_non_negative("VolumeGroupFact", free_units=self.free_units)


@dataclass(frozen=True, slots=True, kw_only=True)
class FactSnapshot:
    """Everything a single evaluation needs, gathered in one pass."""

    os_family: str
    dump_device: DumpDeviceFact
    logical_volumes: Mapping[str, LogicalVolumeFact] = field(default_factory=dict)
    volume_groups: Mapping[str, VolumeGroupFact] = field(default_factory=dict)

    def logical_volume_for(self, dump_device: DumpDeviceFact) -> LogicalVolumeFact | None:
        lv = self.logical_volumes.get(dump_device.device_path)
        if lv is not None:
            return lv
        return self.logical_volumes.get(dump_device.device_name)

    def volume_group_for(self, lv: LogicalVolumeFact | None) -> VolumeGroupFact | None:
        if lv is None:
            return None
        return self.volume_groups.get(lv.volume_group)
