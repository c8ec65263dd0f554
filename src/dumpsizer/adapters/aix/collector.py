"""Collect dump-device facts from a live AIX host."""

from __future__ import annotations

import platform
import re
import subprocess
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from dumpsizer.domain.facts import (
    DumpDeviceFact,
    FactSnapshot,
    LogicalVolumeFact,
    VolumeGroupFact,
    device_short_name,
    is_aix_family,
)
from dumpsizer.errors import FactSourceError

from .commands import CommandResult, CommandRunner, SubprocessRunner
from .parsing import (
    parse_dump_estimate,
    parse_lslv,
    parse_lsvg_free_units,
    parse_primary_dump_device,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

log = getLogger(__name__)

# 0516-306 lslv: Unable to find <name> in the Device Configuration Database.
_LSLV_NOT_FOUND = re.compile(r"\b0516-306\b|unable to find", re.IGNORECASE)


@dataclass(slots=True)
class AixCommandFactSource:
    """Build a snapshot from ``sysdumpdev``, ``lslv`` and ``lsvg``."""

    runner: CommandRunner = field(default_factory=SubprocessRunner)
    os_family: Callable[[], str] = field(default=platform.system)

    def __call__(self) -> FactSnapshot:
        family = self.os_family()
        if not is_aix_family(family):
            log.info("Host OS family %s is not AIX; skipping fact collection", family)
            return FactSnapshot(
                os_family=family,
                dump_device=DumpDeviceFact(device_path="", estimated_bytes=0),
            )

        dump_device = DumpDeviceFact(
            device_path=parse_primary_dump_device(self._run_checked(["sysdumpdev", "-l"])),
            estimated_bytes=parse_dump_estimate(self._run_checked(["sysdumpdev", "-e"])),
        )

        lv = self._logical_volume(dump_device.device_path)
        if lv is None:
            return FactSnapshot(os_family=family, dump_device=dump_device)

        free_units = parse_lsvg_free_units(self._run_checked(["lsvg", lv.volume_group]))
        return FactSnapshot(
            os_family=family,
            dump_device=dump_device,
            logical_volumes={lv.device_path: lv},
            volume_groups={
                lv.volume_group: VolumeGroupFact(name=lv.volume_group, free_units=free_units)
            },
        )

    def _logical_volume(self, device_path: str) -> LogicalVolumeFact | None:
        name = device_short_name(device_path)
        result = self._run(["lslv", name])
        if not result.ok:
            message = f"{result.stderr}\n{result.stdout}".strip()
            if not _LSLV_NOT_FOUND.search(message):
                raise FactSourceError(f"lslv {name} exited with {result.returncode}: {message}")
            log.info("Dump device %s is not a logical volume: %s", device_path, message)
            return None
        attributes = parse_lslv(result.stdout)
        return LogicalVolumeFact.from_megabytes(
            device_path=device_path,
            volume_group=attributes.volume_group,
            current_units=attributes.lps,
            physical_units=attributes.pps,
            max_units=attributes.max_lps,
            unit_size_mb=attributes.pp_size_mb,
        )

    def _run(self, args: Sequence[str]) -> CommandResult:
        try:
            return self.runner(args)
        except (OSError, subprocess.SubprocessError) as exc:
            raise FactSourceError(f"Cannot run {args[0]}: {exc}") from exc

    def _run_checked(self, args: Sequence[str]) -> str:
        result = self._run(args)
        if not result.ok:
            raise FactSourceError(
                f"{' '.join(args)} exited with {result.returncode}: {result.stderr.strip()}"
            )
        return result.stdout
