"""符号関数と角丸半径（Absolute/Percent）の解決に関するテスト群。"""

from __future__ import annotations

import logging
import math

import pytest

from sectorpath.core.numeric import (
    Absolute,
    Percent,
    get_percent_value,
    math_sign,
    parse_corner_radius,
)


def test_math_sign_returns_zero_only_for_exact_zero() -> None:
    assert math_sign(0) == 0
    assert math_sign(0.0) == 0
    assert math_sign(-0.0) == 0
    assert math_sign(1e-300) == 1
    assert math_sign(-1e-300) == -1
    assert math_sign(42) == 1
    assert math_sign(-3.5) == -1


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (5, Absolute(5.0)),
        (2.5, Absolute(2.5)),
        ("12", Absolute(12.0)),
        ("25%", Percent(25.0)),
        (" 25 % ", Percent(25.0)),
        ("-10%", Percent(-10.0)),
        (None, Absolute(0.0)),
        (Percent(3.0), Percent(3.0)),
    ],
)
def test_parse_corner_radius(raw, expected) -> None:
    assert parse_corner_radius(raw) == expected


def test_parse_corner_radius_unparsable_string_falls_back_to_zero(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="sectorpath.core.numeric"):
        assert parse_corner_radius("round") == Absolute(0.0)
        assert parse_corner_radius("%") == Absolute(0.0)
    assert "corner_radius" in caplog.text


@pytest.mark.parametrize("raw", [True, [1.0], object()])
def test_parse_corner_radius_rejects_unsupported_types(raw) -> None:
    with pytest.raises(TypeError):
        parse_corner_radius(raw)


def test_get_percent_value_resolves_percent_against_total() -> None:
    assert get_percent_value(Percent(50.0), 80.0) == pytest.approx(40.0)
    assert get_percent_value(Absolute(7.0), 80.0) == 7.0


def test_get_percent_value_validate_clamps_to_total() -> None:
    assert get_percent_value(Absolute(120.0), 100.0, validate=True) == 100.0
    assert get_percent_value(Percent(150.0), 100.0, validate=True) == 100.0
    assert get_percent_value(Absolute(120.0), 100.0) == 120.0


def test_get_percent_value_nan_uses_default() -> None:
    assert get_percent_value(Absolute(math.nan), 10.0, default=3.0) == 3.0
    assert get_percent_value(parse_corner_radius("nan%"), 10.0) == 0.0
