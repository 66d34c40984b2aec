import pytest

from barbatch.services.unit_conversion import (
    CAN_SIZE_12OZ_ML,
    convert_ml_to_preferred_unit,
    format_ml_value,
    format_number,
    ml_per_unit,
)


def test_ml_per_unit_table():
    assert ml_per_unit("oz") == 29.5735
    assert ml_per_unit("OZ") == 29.5735
    assert ml_per_unit("tsp") == 4.9289
    assert ml_per_unit("dash") == 0.9
    assert ml_per_unit("top") == 0
    assert ml_per_unit("cup") == 0
    assert ml_per_unit("") == 0


def test_convert_volume_units():
    assert convert_ml_to_preferred_unit(1500, "liters") == pytest.approx(1.5)
    assert convert_ml_to_preferred_unit(946.353, "quarts") == pytest.approx(1.0)
    assert convert_ml_to_preferred_unit(3785.41, "Gallons") == pytest.approx(1.0)


def test_convert_each_uses_count():
    assert convert_ml_to_preferred_unit(0, "each", each_count=12) == 12
    assert convert_ml_to_preferred_unit(500, "each") is None


def test_convert_containers():
    # Just over two cans rounds up
    assert convert_ml_to_preferred_unit(2 * CAN_SIZE_12OZ_ML + 1, "12oz can") == 3
    assert convert_ml_to_preferred_unit(1000, "12oz cans", cans_12oz=2) == 2
    assert convert_ml_to_preferred_unit(100, "4oz bottle") == 1
    assert convert_ml_to_preferred_unit(100, "4oz bottle", bottles_4oz=5) == 5


def test_convert_not_applicable():
    assert convert_ml_to_preferred_unit(0, "liters") is None
    assert convert_ml_to_preferred_unit(500, None) is None
    assert convert_ml_to_preferred_unit(500, "cups") is None


def test_format_number():
    assert format_number(5.5) == "5.5"
    assert format_number(3.0) == "3"
    assert format_number(10) == "10"
    assert format_number(0.125, 3) == "0.125"
    assert format_number(float("nan")) == "N/A"
    assert format_number(float("inf")) == "N/A"


def test_format_ml_value_rounds_up():
    assert format_ml_value(100.2) == "101"
    assert format_ml_value(100.0) == "100"
    assert format_ml_value(0) == "0"
    assert format_ml_value(-5) == "0"
