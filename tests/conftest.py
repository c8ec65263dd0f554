from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from dumpsizer.domain.facts import (
    DumpDeviceFact,
    FactSnapshot,
    LogicalVolumeFact,
    VolumeGroupFact,
)
from tests.helpers.fakes import UNIT_128MB

if TYPE_CHECKING:
    from collections.abc import Callable

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture(autouse=True)
def _clean_dumpsizer_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "DUMPSIZER_FACTS_FILE",
        "DUMPSIZER_DRY_RUN",
        "DUMPSIZER_WEBHOOK_URL",
        "DUMPSIZER_WEBHOOK_TOKEN",
        "DUMPSIZER_EXTENDLV",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def facts_path() -> Path:
    return DATA_DIR / "facts_scenario_a.json"


@pytest.fixture
def facts_payload(facts_path: Path) -> dict[str, object]:
    return json.loads(facts_path.read_text())


@pytest.fixture
def make_lv() -> Callable[..., LogicalVolumeFact]:
    def factory(**overrides: object) -> LogicalVolumeFact:
        values: dict[str, object] = {
            "device_path": "/dev/lg_dumplv",
            "volume_group": "rootvg",
            "current_units": 4,
            "physical_units": 4,
            "max_units": 20,
            "unit_size_bytes": UNIT_128MB,
        }
        values.update(overrides)
        return LogicalVolumeFact(**values)  # type: ignore[arg-type]

    return factory


@pytest.fixture
def scenario_a(make_lv: Callable[..., LogicalVolumeFact]) -> FactSnapshot:
    lv = make_lv()
    return FactSnapshot(
        os_family="AIX",
        dump_device=DumpDeviceFact(device_path="/dev/lg_dumplv", estimated_bytes=600_000_000),
        logical_volumes={lv.device_path: lv},
        volume_groups={"rootvg": VolumeGroupFact(name="rootvg", free_units=10)},
    )
