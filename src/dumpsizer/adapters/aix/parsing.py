"""Parsers for ``sysdumpdev``, ``lslv`` and ``lsvg`` output."""

from __future__ import annotations

import re
from dataclasses import dataclass

from dumpsizer.errors import FactSourceError

_FIELD_SEPARATOR = re.compile(r"\s{2,}")
_ESTIMATE = re.compile(r"Estimated dump size in bytes:\s*(\d+)", re.IGNORECASE)
_LEADING_INT = re.compile(r"^\s*(\d+)")


def parse_attribute_table(output: str) -> dict[str, str]:
    """Parse the two-column ``KEY: value`` layout used by ``lslv`` and ``lsvg``.

    Columns are separated by two or more spaces. Keys keep their original case,
    e.g. ``LPs`` and ``MAX LPs``.
    """

    attributes: dict[str, str] = {}
    for line in output.splitlines():
        pending: str | None = None
        for token in _FIELD_SEPARATOR.split(line.strip()):
            if not token:
                continue
            if token.endswith(":"):
                if pending is not None:
                    attributes[pending] = ""
                pending = token[:-1].strip()
            elif pending is not None:
                attributes[pending] = token.strip()
                pending = None
            elif ":" in token:
                key, _, value = token.partition(":")
                attributes[key.strip()] = value.strip()
        if pending is not None:
            attributes[pending] = ""
    return attributes


def _require_int(attributes: dict[str, str], key: str, command: str) -> int:
    value = attributes.get(key)
    match = _LEADING_INT.match(value) if value is not None else None
    if match is None:
        raise FactSourceError(f"{command} output has no numeric {key!r} field")
    return int(match.group(1))


def parse_primary_dump_device(output: str) -> str:
    """Return the primary device from ``sysdumpdev -l``."""

    for line in output.splitlines():
        fields = line.split()
        if len(fields) >= 2 and fields[0].lower() == "primary":
            return fields[1]
    raise FactSourceError("sysdumpdev -l output lists no primary dump device")


def parse_dump_estimate(output: str) -> int:
    """Return the byte estimate from ``sysdumpdev -e``."""

    match = _ESTIMATE.search(output)
    if match is None:
        raise FactSourceError("sysdumpdev -e output has no dump size estimate")
    return int(match.group(1))


@dataclass(frozen=True, slots=True)
class LogicalVolumeAttributes:
    volume_group: str
    lps: int
    pps: int
    max_lps: int
    pp_size_mb: int


def parse_lslv(output: str) -> LogicalVolumeAttributes:
    attributes = parse_attribute_table(output)
    volume_group = attributes.get("VOLUME GROUP")
    if not volume_group:
        raise FactSourceError("lslv output has no 'VOLUME GROUP' field")
    return LogicalVolumeAttributes(
        volume_group=volume_group,
        lps=_require_int(attributes, "LPs", "lslv"),
        pps=_require_int(attributes, "PPs", "lslv"),
        max_lps=_require_int(attributes, "MAX LPs", "lslv"),
        pp_size_mb=_require_int(attributes, "PP SIZE", "lslv"),
    )


def parse_lsvg_free_units(output: str) -> int:
    return _require_int(parse_attribute_table(output), "FREE PPs", "lsvg")
