"""Adapters that talk to a live AIX host."""

from __future__ import annotations

from .collector import AixCommandFactSource
from .commands import CommandResult, CommandRunner, SubprocessRunner
from .extend import ExtendLvCommand

__all__ = [
    "AixCommandFactSource",
    "CommandResult",
    "CommandRunner",
    "ExtendLvCommand",
    "SubprocessRunner",
]
