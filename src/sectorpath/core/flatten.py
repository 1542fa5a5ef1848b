"""
どこで: `src/sectorpath/core/flatten.py`。
何を: path コマンド列を円弧サンプリングで折れ線（RealizedPath）へ変換し、面積を求める。
なぜ: プロッタ向け出力や面積・包含の数値検証を、SVG レンダラなしで行えるようにするため。
"""

from __future__ import annotations

import math
from collections.abc import Iterable

import numpy as np

from sectorpath.core.commands import ArcTo, ClosePath, LineTo, MoveTo, PathCommand, RelativeArcTo
from sectorpath.core.realized_path import RealizedPath
from sectorpath.core.runtime_config import runtime_config
from sectorpath.core.sector import SectorSpec, sector_commands

_TWO_PI = 2.0 * math.pi
_SEGMENT_EPS = 1e-9


def _arc_points(
    start: np.ndarray,
    end: np.ndarray,
    radius: float,
    large_arc: bool,
    sweep: bool,
    segments_per_turn: int,
) -> np.ndarray:
    """円弧を折れ線化した点列（start を含まず end を含む）を返す。

    Notes
    -----
    SVG の endpoint → center 変換（x 軸回転 0、rx == ry）に従う。
    半径が端点間距離の半分に満たない場合は SVG と同様に半径を拡大する。
    """
    if np.array_equal(start, end):
        return end.reshape(1, 2)

    r = abs(float(radius))
    if r == 0.0:
        return end.reshape(1, 2)

    half = (start - end) * 0.5
    d2 = float(half @ half)
    if d2 > r * r:
        r = math.sqrt(d2)

    coef = math.sqrt(max(r * r / d2 - 1.0, 0.0))
    if large_arc == sweep:
        coef = -coef
    center = (start + end) * 0.5 + coef * np.array([half[1], -half[0]])

    v1 = start - center
    v2 = end - center
    theta1 = math.atan2(v1[1], v1[0])
    theta2 = math.atan2(v2[1], v2[0])
    d_theta = theta2 - theta1
    if sweep and d_theta < 0:
        d_theta += _TWO_PI
    elif not sweep and d_theta > 0:
        d_theta -= _TWO_PI

    # atan2 の誤差で分割数が 1 つ増えないよう、わずかに差し引いてから切り上げる。
    n = max(1, int(math.ceil(abs(d_theta) / _TWO_PI * segments_per_turn - _SEGMENT_EPS)))
    t = theta1 + d_theta * np.arange(1, n + 1, dtype=np.float64) / n
    pts = np.stack([center[0] + r * np.cos(t), center[1] + r * np.sin(t)], axis=1)
    # 終点は誤差なしで一致させる。
    pts[-1] = end
    return pts


def flatten_commands(
    commands: Iterable[PathCommand],
    *,
    segments_per_turn: int | None = None,
) -> RealizedPath:
    """path コマンド列を折れ線化して返す。

    Parameters
    ----------
    commands : Iterable[PathCommand]
        MoveTo で始まるコマンド列。
    segments_per_turn : int or None, optional
        1 周あたりの分割数。None なら runtime config の `flatten.segments_per_turn`。

    Returns
    -------
    RealizedPath
        サブパスごとのポリライン。ClosePath したサブパスは先頭点を終端に重ねる。

    Raises
    ------
    ValueError
        MoveTo より前に描画コマンドがある場合、または segments_per_turn が 1 未満の場合。
    """
    if segments_per_turn is None:
        segments_per_turn = runtime_config().segments_per_turn
    segments_per_turn = int(segments_per_turn)
    if segments_per_turn < 1:
        raise ValueError("segments_per_turn は 1 以上である必要がある")

    polylines: list[np.ndarray] = []
    current: list[np.ndarray] = []
    subpath_start: np.ndarray | None = None

    def _flush() -> None:
        if len(current) >= 2:
            polylines.append(np.concatenate(current, axis=0))
        current.clear()

    for command in commands:
        if isinstance(command, MoveTo):
            _flush()
            subpath_start = np.array([command.point.x, command.point.y], dtype=np.float64)
            current.append(subpath_start.reshape(1, 2))
            continue

        if subpath_start is None:
            raise ValueError("path は MoveTo で始まる必要がある")
        last = current[-1][-1] if current else subpath_start

        if isinstance(command, LineTo):
            p = np.array([command.point.x, command.point.y], dtype=np.float64)
            if not current:
                current.append(last.reshape(1, 2))
            current.append(p.reshape(1, 2))
        elif isinstance(command, (ArcTo, RelativeArcTo)):
            if isinstance(command, ArcTo):
                end = np.array([command.point.x, command.point.y], dtype=np.float64)
            else:
                end = last + np.array([command.dx, command.dy], dtype=np.float64)
            if not current:
                current.append(last.reshape(1, 2))
            current.append(
                _arc_points(
                    last,
                    end,
                    command.radius,
                    command.large_arc,
                    command.sweep,
                    segments_per_turn,
                )
            )
        elif isinstance(command, ClosePath):
            if current and not np.array_equal(current[-1][-1], subpath_start):
                current.append(subpath_start.reshape(1, 2))
            _flush()
        else:
            raise TypeError(f"未対応の path コマンド: {type(command)!r}")

    _flush()

    if not polylines:
        return RealizedPath.empty()
    offsets = np.cumsum([0] + [p.shape[0] for p in polylines]).astype(np.int32)
    return RealizedPath(coords=np.concatenate(polylines, axis=0), offsets=offsets)


def realize_sector(
    spec: SectorSpec,
    *,
    segments_per_turn: int | None = None,
) -> RealizedPath:
    """sector を折れ線化して返す。描画なしの場合は空の RealizedPath。"""
    commands = sector_commands(spec)
    if commands is None:
        return RealizedPath.empty()
    return flatten_commands(commands, segments_per_turn=segments_per_turn)


def polygon_area(coords: np.ndarray) -> float:
    """閉じた折れ線（shape (N,2)）の面積を shoelace 公式で返す。向きは問わない。"""
    xy = np.asarray(coords, dtype=np.float64)
    if xy.shape[0] < 3:
        return 0.0
    x = xy[:, 0]
    y = xy[:, 1]
    return float(abs(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y)) * 0.5)


__all__ = ["flatten_commands", "polygon_area", "realize_sector"]
