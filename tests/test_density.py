import math

import pytest

from karat_checker.density import compute_density, mass_grams, parse_temperature, water_density_for
from karat_checker.errors import InvalidInputError, InvalidVolumeError


@pytest.mark.parametrize("temp, expected", [
    (20, 1.0),
    (10, 1.0),
    (30, 1.0),
    (9.9, 0.9997),
    (-5, 0.9997),
    (30.1, 0.9957),
    ("35", 0.9957),
    (None, 1.0),
    ("warm", 1.0),
    ("", 1.0),
    (float("nan"), 1.0),
])
def test_water_density_buckets(temp, expected):
    assert water_density_for(temp) == expected


def test_parse_temperature():
    assert parse_temperature("21.5") == 21.5
    assert parse_temperature("abc") is None
    assert parse_temperature(None) is None


def test_density_basic():
    phys = compute_density(10.5, 9.8, 20)
    assert phys["volume_cm3"] == pytest.approx(0.70)
    assert phys["density_cm3"] == pytest.approx(15.0)
    assert phys["water_density"] == 1.0


def test_density_applies_temperature_correction():
    phys = compute_density(10.0, 9.0, 5)
    assert phys["volume_cm3"] == pytest.approx(1.0 / 0.9997)
    assert phys["density_cm3"] == pytest.approx(10.0 * 0.9997)


def test_string_weights_are_parsed():
    phys = compute_density("5", "4")
    assert phys["density_cm3"] == pytest.approx(5.0)


@pytest.mark.parametrize("air, water", [
    (1, 1),
    (4, 5),
    (0, 1),
    (5, -1),
    (5, 0),
    ("abc", 1),
    (5, None),
    (float("nan"), 1),
    (float("inf"), 1),
    (True, 0.5),
])
def test_invalid_inputs_rejected(air, water):
    with pytest.raises(InvalidInputError) as exc:
        compute_density(air, water)
    assert exc.value.code == "INVALID_INPUT"


def test_volume_guard(monkeypatch):
    # a non-positive water density cannot come from the buckets; force one
    monkeypatch.setattr("karat_checker.density.water_density_for", lambda t: -1.0)
    with pytest.raises(InvalidVolumeError) as exc:
        compute_density(2.0, 1.0)
    assert exc.value.to_dict()["error"] == "INVALID_VOLUME"


@pytest.mark.parametrize("air, water", [(10.5, 9.8), (1e-6, 5e-7), (1000, 1), (2, 1.999)])
def test_density_always_positive(air, water):
    phys = compute_density(air, water)
    assert phys["density_cm3"] > 0
    assert math.isfinite(phys["density_cm3"])


def test_mass_grams():
    assert mass_grams(5.0, "carat") == pytest.approx(1.0)
    assert mass_grams(5.0, "g") == 5.0
    with pytest.raises(ValueError):
        mass_grams(1.0, "ounce")
