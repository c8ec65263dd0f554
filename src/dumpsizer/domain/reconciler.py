"""Dump-device capacity reconciliation.

Decides whether the primary dump logical volume must grow to hold the OS dump
estimate, and whether growing it is safe. The evaluation is a linear walk of
guards; each either returns a terminal decision or falls through:

1) platform is AIX
2) the dump device resolves to a logical volume
3) one physical unit backs each logical unit
4) the estimate exceeds the current size
5) the LV maximum can reach the required units
6) the volume group has enough free units for the delta

Nothing here performs I/O or keeps state between calls.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .decisions import (
    CapacityBlocked,
    CeilingBlocked,
    ExtendRequested,
    NoActionNeeded,
    NoActionReason,
)
from .facts import AIX_FAMILY, is_aix_family

if TYPE_CHECKING:
    from .decisions import Decision
    from .facts import DumpDeviceFact, FactSnapshot, LogicalVolumeFact, VolumeGroupFact


log = getLogger(__name__)


def units_needed(estimated_bytes: int, unit_size_bytes: int) -> int:
    """Return the allocation units required to hold ``estimated_bytes``.

    Always one unit more than the whole units the estimate fills, so an estimate
    that is an exact multiple of the unit size still gets an extra unit.
    """

    return estimated_bytes // unit_size_bytes + 1


def evaluate(
    dump_device: DumpDeviceFact,
    lv: LogicalVolumeFact | None,
    vg: VolumeGroupFact | None,
    *,
    os_family: str = AIX_FAMILY,
) -> Decision:
    """Map one fact snapshot to exactly one decision."""

    if not is_aix_family(os_family):
        return NoActionNeeded(reason=NoActionReason.UNSUPPORTED_PLATFORM)

    if lv is None:
        log.debug("Dump device %s is not a known logical volume", dump_device.device_path)
        return NoActionNeeded(reason=NoActionReason.NO_LOGICAL_VOLUME)

    if not lv.has_single_copy:
        log.debug(
            "Skipping %s: %s LPs backed by %s PPs",
            lv.device_name,
            lv.current_units,
            lv.physical_units,
        )
        return NoActionNeeded(reason=NoActionReason.ALLOCATION_RATIO_MISMATCH)

    if dump_device.estimated_bytes <= lv.current_size_bytes:
        return NoActionNeeded(reason=NoActionReason.SUFFICIENT_SIZE)

    if lv.unit_size_bytes == 0:
        return NoActionNeeded(reason=NoActionReason.INVALID_UNIT_SIZE)

    required = units_needed(dump_device.estimated_bytes, lv.unit_size_bytes)
    delta = required - lv.current_units
    device_name = dump_device.device_name

    if lv.max_units < required:
        return CeilingBlocked(
            device_name=device_name,
            max_units=lv.max_units,
            required_units=required,
        )

    if vg is None:
        log.debug("Volume group %s of %s is unknown", lv.volume_group, device_name)
        return NoActionNeeded(reason=NoActionReason.NO_VOLUME_GROUP)

    if vg.free_units >= delta:
        return ExtendRequested(device_name=device_name, delta_units=delta)

    return CapacityBlocked(
        device_name=device_name,
        shortfall_units=delta - vg.free_units,
        volume_group=vg.name,
        delta_units=delta,
    )


def evaluate_snapshot(snapshot: FactSnapshot) -> Decision:
    """Resolve the dump device's LV and VG from ``snapshot`` and evaluate."""

    lv = snapshot.logical_volume_for(snapshot.dump_device)
    return evaluate(
        snapshot.dump_device,
        lv,
        snapshot.volume_group_for(lv),
        os_family=snapshot.os_family,
    )
