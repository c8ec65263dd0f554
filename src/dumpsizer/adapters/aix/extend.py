"""Volume extension via ``extendlv``."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field
from logging import getLogger

from dumpsizer.config.reconciler import DEFAULT_EXTENDLV
from dumpsizer.errors import ExtensionError

from .commands import CommandRunner, SubprocessRunner

log = getLogger(__name__)


@dataclass(slots=True)
class ExtendLvCommand:
    """Grow a logical volume by a number of logical partitions."""

    runner: CommandRunner = field(default_factory=SubprocessRunner)
    executable: str = DEFAULT_EXTENDLV
    dry_run: bool = False

    def command(self, device_name: str, delta_units: int) -> list[str]:
        return [self.executable, device_name, str(delta_units)]

    def extend(self, device_name: str, delta_units: int) -> None:
        if delta_units < 1:
            raise ValueError("Extension delta must be positive")
        args = self.command(device_name, delta_units)
        if self.dry_run:
            log.info("Dry run, not executing: %s", " ".join(args))
            return

        try:
            result = self.runner(args)
        except (OSError, subprocess.SubprocessError) as exc:
            raise ExtensionError(f"Cannot run {self.executable}: {exc}") from exc

        if not result.ok:
            stderr = result.stderr.strip()
            raise ExtensionError(
                f"{' '.join(args)} exited with {result.returncode}: {stderr}",
                returncode=result.returncode,
                stderr=stderr,
            )
        log.info("Extended %s by %s logical partitions", device_name, delta_units)
