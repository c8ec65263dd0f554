"""Public interface for the JSON facts adapter."""

from __future__ import annotations

from .schema import FactsDocument, LogicalVolumePayload, VolumeGroupPayload
from .source import JsonFactSource, parse_facts
from .translator import to_snapshot

__all__ = [
    "FactsDocument",
    "JsonFactSource",
    "LogicalVolumePayload",
    "VolumeGroupPayload",
    "parse_facts",
    "to_snapshot",
]
