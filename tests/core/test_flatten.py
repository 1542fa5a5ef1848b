"""path コマンド列の折れ線化（RealizedPath）と面積計算のテスト群。"""

from __future__ import annotations

import math

import numpy as np
import pytest

from sectorpath.core.commands import ArcTo, ClosePath, LineTo, MoveTo, RelativeArcTo
from sectorpath.core.flatten import flatten_commands, polygon_area, realize_sector
from sectorpath.core.polar import Point
from sectorpath.core.realized_path import RealizedPath
from sectorpath.core.sector import SectorSpec


def test_quarter_pie_flattens_to_closed_polyline_on_circle() -> None:
    realized = realize_sector(SectorSpec(outer_radius=100.0, end_angle=90.0), segments_per_turn=64)

    # 始点 + 円弧 16 分割 + 中心 + 閉じ点
    assert realized.coords.shape == (19, 2)
    assert realized.offsets.tolist() == [0, 19]
    np.testing.assert_array_equal(realized.coords[0], realized.coords[-1])

    arc = realized.coords[:17]
    np.testing.assert_allclose(np.hypot(arc[:, 0], arc[:, 1]), 100.0, rtol=0.0, atol=1e-9)
    # 画面上の反時計回り（y 負側）を通る
    assert np.all(arc[:, 1] <= 1e-9)
    np.testing.assert_allclose(realized.coords[17], [0.0, 0.0], atol=1e-12)


def test_sector_area_matches_analytic_value() -> None:
    spec = SectorSpec(inner_radius=30.0, outer_radius=90.0, start_angle=-20.0, end_angle=250.0)
    realized = realize_sector(spec, segments_per_turn=4096)

    expected = math.pi * (90.0**2 - 30.0**2) * 270.0 / 360.0
    assert polygon_area(realized.coords) == pytest.approx(expected, rel=1e-5)


def test_full_circle_fallback_flattens_to_circle() -> None:
    spec = SectorSpec(
        outer_radius=100.0, end_angle=2.0, corner_radius=50.0, force_corner_radius=True
    )
    realized = realize_sector(spec, segments_per_turn=256)

    coords = realized.coords
    center = coords[0] + np.array([50.0, 0.0])
    np.testing.assert_allclose(
        np.hypot(coords[:, 0] - center[0], coords[:, 1] - center[1]), 50.0, atol=1e-9
    )
    assert polygon_area(coords) == pytest.approx(math.pi * 50.0**2, rel=1e-3)


def test_no_geometry_realizes_to_empty_path() -> None:
    realized = realize_sector(SectorSpec(outer_radius=100.0))
    assert realized.coords.shape == (0, 2)
    assert realized.offsets.tolist() == [0]
    assert realized.n_polylines == 0


def test_large_arc_and_sweep_select_the_four_arcs() -> None:
    start = Point(100.0, 0.0)
    end = Point(0.0, -100.0)
    spans = {}
    for large in (False, True):
        for sweep in (False, True):
            realized = flatten_commands(
                (MoveTo(start), ArcTo(100.0, large, sweep, end)), segments_per_turn=360
            )
            spans[(large, sweep)] = realized.coords.shape[0] - 1

    assert spans[(False, False)] == 90
    assert spans[(False, True)] == 90
    assert spans[(True, False)] == 270
    assert spans[(True, True)] == 270


def test_radius_too_small_is_scaled_up() -> None:
    realized = flatten_commands(
        (MoveTo(Point(0.0, 0.0)), ArcTo(1.0, False, True, Point(10.0, 0.0))),
        segments_per_turn=64,
    )
    center = np.array([5.0, 0.0])
    np.testing.assert_allclose(
        np.linalg.norm(realized.coords - center, axis=1), 5.0, atol=1e-9
    )


def test_relative_arc_and_multiple_subpaths() -> None:
    commands = (
        MoveTo(Point(0.0, 0.0)),
        LineTo(Point(1.0, 0.0)),
        ClosePath(),
        MoveTo(Point(10.0, 10.0)),
        RelativeArcTo(5.0, False, True, 10.0, 0.0),
        ClosePath(),
    )
    realized = flatten_commands(commands, segments_per_turn=8)

    assert realized.n_polylines == 2
    first, second = realized.polylines()
    np.testing.assert_array_equal(first, [[0.0, 0.0], [1.0, 0.0], [0.0, 0.0]])
    np.testing.assert_allclose(second[-2], [20.0, 10.0], atol=1e-12)
    np.testing.assert_array_equal(second[-1], [10.0, 10.0])


def test_flatten_rejects_commands_before_move() -> None:
    with pytest.raises(ValueError):
        flatten_commands((LineTo(Point(1.0, 1.0)),), segments_per_turn=8)
    with pytest.raises(ValueError):
        flatten_commands((MoveTo(Point(0.0, 0.0)),), segments_per_turn=0)


def test_realized_path_is_read_only_and_validated() -> None:
    realized = RealizedPath(coords=[[0.0, 0.0], [1.0, 1.0]], offsets=[0, 2])
    assert realized.coords.dtype == np.float64
    assert realized.offsets.dtype == np.int32
    with pytest.raises(ValueError):
        realized.coords[0, 0] = 5.0

    with pytest.raises(ValueError):
        RealizedPath(coords=[[0.0, 0.0, 0.0]], offsets=[0, 1])
    with pytest.raises(ValueError):
        RealizedPath(coords=[[0.0, 0.0]], offsets=[1, 1])
    with pytest.raises(ValueError):
        RealizedPath(coords=[[0.0, 0.0]], offsets=[0, 2])


def test_polygon_area_ignores_orientation() -> None:
    square = np.array([[0.0, 0.0], [2.0, 0.0], [2.0, 2.0], [0.0, 2.0], [0.0, 0.0]])
    assert polygon_area(square) == pytest.approx(4.0)
    assert polygon_area(square[::-1]) == pytest.approx(4.0)
    assert polygon_area(square[:2]) == 0.0
