from __future__ import annotations

import pytest

from load_calculator.units import LinearUnit, convert, from_meters, to_cubic_meters, to_meters


@pytest.mark.parametrize(
    "unit, value, meters",
    [
        (LinearUnit.MILLIMETER, 1000.0, 1.0),
        (LinearUnit.CENTIMETER, 250.0, 2.5),
        (LinearUnit.INCH, 10.0, 0.254),
        (LinearUnit.METER, 3.2, 3.2),
    ],
)
def test_to_meters_factors(unit, value, meters) -> None:
    """Each unit converts with its fixed factor."""
    assert to_meters(value, unit) == pytest.approx(meters)


@pytest.mark.parametrize("unit", list(LinearUnit))
@pytest.mark.parametrize("value", [0.001, 1.0, 37.5, 12345.678])
def test_round_trip_within_epsilon(unit, value) -> None:
    """from_meters(to_meters(x)) gives x back within 1e-9 relative error."""
    assert from_meters(to_meters(value, unit), unit) == pytest.approx(value, rel=1e-9)


def test_accepts_unit_text() -> None:
    """Unit may be passed as text, including common spellings."""
    assert to_meters(12, "inches") == pytest.approx(0.3048)
    assert to_meters(5, " CM ") == pytest.approx(0.05)
    assert from_meters(1.0, "millimeters") == pytest.approx(1000.0)


def test_parse_rejects_unknown_unit() -> None:
    with pytest.raises(ValueError, match="Unknown unit"):
        LinearUnit.parse("furlong")


def test_zero_and_negative_pass_through() -> None:
    """Conversion is total; validation is left to the caller."""
    assert to_meters(0, LinearUnit.CENTIMETER) == 0.0
    assert to_meters(-20, LinearUnit.CENTIMETER) == pytest.approx(-0.2)


def test_convert_between_units() -> None:
    assert convert(1.0, LinearUnit.INCH, LinearUnit.CENTIMETER) == pytest.approx(2.54)
    assert convert(30.0, "cm", "mm") == pytest.approx(300.0)


def test_to_cubic_meters() -> None:
    """50 x 40 x 30 cm is 0.06 CBM."""
    assert to_cubic_meters(50, 40, 30, "cm") == pytest.approx(0.06)
