"""Error hierarchy shared by fact sources and action sinks."""

from __future__ import annotations


class DumpSizerError(RuntimeError):
    """Base class for errors raised outside the pure decision core."""


class FactSourceError(DumpSizerError):
    """Raised when host facts cannot be collected or validated."""


class ExtensionError(DumpSizerError):
    """Raised when the volume-extension command fails."""

    def __init__(self, message: str, *, returncode: int | None = None, stderr: str = "") -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class NotificationError(DumpSizerError):
    """Raised when a diagnostic notification cannot be delivered."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
