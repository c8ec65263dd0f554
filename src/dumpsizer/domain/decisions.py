"""Closed set of outcomes produced by the reconciler."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Literal


class DecisionKind(StrEnum):
    NOOP = "noop"
    EXTEND = "extend"
    CEILING_BLOCKED = "ceiling_blocked"
    CAPACITY_BLOCKED = "capacity_blocked"


class NoActionReason(StrEnum):
    """Which guard stopped the evaluation."""

    UNSUPPORTED_PLATFORM = "unsupported_platform"
    NO_LOGICAL_VOLUME = "no_logical_volume"
    ALLOCATION_RATIO_MISMATCH = "allocation_ratio_mismatch"
    INVALID_UNIT_SIZE = "invalid_unit_size"
    SUFFICIENT_SIZE = "sufficient_size"
    NO_VOLUME_GROUP = "no_volume_group"


@dataclass(frozen=True, slots=True, kw_only=True)
class NoActionNeeded:
    reason: NoActionReason
    kind: Literal[DecisionKind.NOOP] = DecisionKind.NOOP


@dataclass(frozen=True, slots=True, kw_only=True)
class ExtendRequested:
    """Grow ``device_name`` by exactly ``delta_units`` allocation units."""

    device_name: str
    delta_units: int
    kind: Literal[DecisionKind.EXTEND] = DecisionKind.EXTEND

    def __post_init__(self) -> None:
        if self.delta_units < 1:
            raise ValueError("Extension delta must be positive")


@dataclass(frozen=True, slots=True, kw_only=True)
class CeilingBlocked:
    """The LV maximum is below the units needed to hold a dump."""

    device_name: str
    max_units: int
    required_units: int | None = None
    kind: Literal[DecisionKind.CEILING_BLOCKED] = DecisionKind.CEILING_BLOCKED


@dataclass(frozen=True, slots=True, kw_only=True)
class CapacityBlocked:
    """The volume group lacks ``shortfall_units`` free units for the extension."""

    device_name: str
    shortfall_units: int
    volume_group: str | None = None
    delta_units: int | None = None
    kind: Literal[DecisionKind.CAPACITY_BLOCKED] = DecisionKind.CAPACITY_BLOCKED

    def __post_init__(self) -> None:
        if self.shortfall_units < 1:
            raise ValueError("Capacity shortfall must be positive")


type Decision = NoActionNeeded | ExtendRequested | CeilingBlocked | CapacityBlocked
