"""Translate a validated facts document into domain facts."""

from __future__ import annotations

from dumpsizer.domain.facts import (
    DumpDeviceFact,
    FactSnapshot,
    LogicalVolumeFact,
    VolumeGroupFact,
    device_short_name,
)

from .schema import FactsDocument, LogicalVolumePayload


def _lv_device_path(key: str) -> str:
    key = key.strip()
    return key if "/" in key else f"/dev/{key}"


def _to_logical_volume(key: str, payload: LogicalVolumePayload) -> LogicalVolumeFact:
    return LogicalVolumeFact.from_megabytes(
        device_path=_lv_device_path(key),
        volume_group=payload.volume_group,
        current_units=payload.lps,
        physical_units=payload.pps,
        max_units=payload.max_lps,
        unit_size_mb=payload.pp_size_mb,
    )


def to_snapshot(document: FactsDocument) -> FactSnapshot:
    """Build a snapshot whose LVs are reachable by full path and short name."""

    logical_volumes: dict[str, LogicalVolumeFact] = {}
    for key, payload in document.logical_volumes.items():
        lv = _to_logical_volume(key, payload)
        logical_volumes[lv.device_path] = lv
        logical_volumes.setdefault(device_short_name(lv.device_path), lv)

    volume_groups = {
        name: VolumeGroupFact(name=name, free_units=payload.free_pps)
        for name, payload in document.volume_groups.items()
    }

    return FactSnapshot(
        os_family=document.os.family,
        dump_device=DumpDeviceFact(
            device_path=document.dump_device.primary,
            estimated_bytes=document.dump_device.estimated_bytes,
        ),
        logical_volumes=logical_volumes,
        volume_groups=volume_groups,
    )
