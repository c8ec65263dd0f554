"""Pydantic models describing the JSON facts document."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, field_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


def _reject_bool(value: object) -> object:
    if isinstance(value, bool):
        raise ValueError("expected an integer count, got a boolean")
    return value


class FactsBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class OsPayload(FactsBaseModel):
    family: str


class DumpDevicePayload(FactsBaseModel):
    primary: str
    estimated_bytes: NonNegativeInt

    _reject_bool_estimate = field_validator("estimated_bytes", mode="before")(_reject_bool)

    @field_validator("primary")
    @classmethod
    def _strip_primary(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("primary dump device must not be blank")
        return stripped


class LogicalVolumePayload(FactsBaseModel):
    lps: NonNegativeInt
    pps: NonNegativeInt
    max_lps: NonNegativeInt
    pp_size_mb: NonNegativeInt
    volume_group: str = Field(alias="vg")

    _reject_bool_counts = field_validator("lps", "pps", "max_lps", "pp_size_mb", mode="before")(
        _reject_bool
    )

    _normalize_volume_group = field_validator("volume_group", mode="before")(_blank_to_none)


class VolumeGroupPayload(FactsBaseModel):
    free_pps: NonNegativeInt

    _reject_bool_free = field_validator("free_pps", mode="before")(_reject_bool)


class FactsDocument(FactsBaseModel):
    os: OsPayload
    dump_device: DumpDevicePayload
    logical_volumes: dict[str, LogicalVolumePayload] = Field(default_factory=dict)
    volume_groups: dict[str, VolumeGroupPayload] = Field(default_factory=dict)
