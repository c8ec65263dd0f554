from __future__ import annotations

import pytest

from dumpsizer.adapters.aix.parsing import (
    parse_attribute_table,
    parse_dump_estimate,
    parse_lslv,
    parse_lsvg_free_units,
    parse_primary_dump_device,
)
from dumpsizer.errors import FactSourceError
from tests.helpers.aix_output import (
    LSLV_DUMPLV,
    LSVG_ROOTVG,
    SYSDUMPDEV_ESTIMATE,
    SYSDUMPDEV_LIST,
)


def test_primary_dump_device() -> None:
    assert parse_primary_dump_device(SYSDUMPDEV_LIST) == "/dev/lg_dumplv"


def test_missing_primary_raises() -> None:
    with pytest.raises(FactSourceError, match="no primary"):
        parse_primary_dump_device("secondary  /dev/sysdumpnull\n")


def test_dump_estimate() -> None:
    assert parse_dump_estimate(SYSDUMPDEV_ESTIMATE) == 600_000_000


def test_missing_estimate_raises() -> None:
    with pytest.raises(FactSourceError, match="estimate"):
        parse_dump_estimate("0453-136 Cannot estimate dump size\n")


def test_attribute_table_handles_both_columns_and_single_space_keys() -> None:
    attributes = parse_attribute_table(LSLV_DUMPLV)

    assert attributes["LOGICAL VOLUME"] == "lg_dumplv"
    assert attributes["VOLUME GROUP"] == "rootvg"
    assert attributes["PP SIZE"] == "128 megabyte(s)"
    assert attributes["MIRROR WRITE CONSISTENCY"] == "on/ACTIVE"
    assert attributes["EACH LP COPY ON A SEPARATE PV ?"] == "yes"
    assert attributes["DEVICE PERMISSIONS"] == "432"
    assert attributes["MOUNT POINT"] == "N/A"


def test_lslv_geometry() -> None:
    attributes = parse_lslv(LSLV_DUMPLV)

    assert attributes.volume_group == "rootvg"
    assert attributes.lps == 4
    assert attributes.pps == 4
    assert attributes.max_lps == 20
    assert attributes.pp_size_mb == 128


def test_lslv_without_volume_group_raises() -> None:
    with pytest.raises(FactSourceError, match="VOLUME GROUP"):
        parse_lslv("LPs:                4                      PPs:            4\n")


def test_lslv_with_non_numeric_field_raises() -> None:
    output = LSLV_DUMPLV.replace("MAX LPs:            20", "MAX LPs:            ??")

    with pytest.raises(FactSourceError, match="MAX LPs"):
        parse_lslv(output)


def test_lsvg_free_units() -> None:
    assert parse_lsvg_free_units(LSVG_ROOTVG) == 10
