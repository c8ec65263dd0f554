"""Thin wrapper around the AIX command line tools."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

log = getLogger(__name__)

DEFAULT_COMMAND_TIMEOUT_SECONDS = 120.0


@dataclass(frozen=True, slots=True)
class CommandResult:
    args: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@runtime_checkable
class CommandRunner(Protocol):
    def __call__(self, args: Sequence[str]) -> CommandResult: ...


@dataclass(frozen=True, slots=True)
class SubprocessRunner:
    """Run commands without a shell and capture their output as text."""

    timeout_seconds: float = DEFAULT_COMMAND_TIMEOUT_SECONDS

    def __call__(self, args: Sequence[str]) -> CommandResult:
        log.debug("Running %s", " ".join(args))
        completed = subprocess.run(  # noqa: S603
            list(args),
            capture_output=True,
            text=True,
            check=False,
            timeout=self.timeout_seconds,
        )
        return CommandResult(
            args=tuple(args),
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )
