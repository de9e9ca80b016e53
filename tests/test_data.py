from dataclasses import FrozenInstanceError

import pytest

from karat_checker.constants import MAX_DENSITY, MIN_DENSITY
from karat_checker.data import REFERENCE_TABLE, parse_karat_label, reference_frame, search_table


def test_table_shape():
    assert len(REFERENCE_TABLE) == 19
    assert REFERENCE_TABLE[0].karat_label == "24K"
    assert REFERENCE_TABLE[-1].karat_label == "6K"
    karats = [b.karat for b in REFERENCE_TABLE]
    assert karats == sorted(karats, reverse=True)


def test_bands_are_contiguous():
    for higher, lower in zip(REFERENCE_TABLE, REFERENCE_TABLE[1:]):
        assert lower.max_density == pytest.approx(higher.min_density)
        assert lower.min_density < lower.max_density


def test_density_bounds_follow_table():
    assert REFERENCE_TABLE[-1].min_density == MIN_DENSITY
    assert REFERENCE_TABLE[0].max_density == MAX_DENSITY


def test_bands_are_immutable():
    with pytest.raises(FrozenInstanceError):
        REFERENCE_TABLE[0].percent = 50.0
    assert isinstance(REFERENCE_TABLE, tuple)


@pytest.mark.parametrize("label, expected", [
    ("20K", 20.0), (" 18k ", 18.0), ("22.5K", 22.5), ("?", None), ("K", None), ("18", None),
])
def test_parse_karat_label(label, expected):
    assert parse_karat_label(label) == expected


def test_density_range_label():
    assert REFERENCE_TABLE[6].density_range_label == "15.20 - 15.60 g/cm³"


def test_search_table():
    assert len(search_table("")) == 19
    assert len(search_table(None)) == 19
    assert [b.karat_label for b in search_table("18k")] == ["18K"]
    assert [b.karat_label for b in search_table("99.9")] == ["24K"]
    assert [b.karat_label for b in search_table("15.2 15.6")] == ["18K"]
    assert search_table("nothing here") == []


def test_reference_frame():
    df = reference_frame()
    assert list(df.columns) == ["Karat", "Purity (%)", "Min density (g/cm³)", "Max density (g/cm³)"]
    assert len(df) == 19
    assert df.iloc[0]["Karat"] == "24K"
    assert reference_frame(search_table("6K"))["Karat"].tolist() == ["16K", "6K"]
