"""
どこで: `src/sectorpath/core/rounded.py`。
何を: 外周/内周の 4 隅を角丸にした sector の輪郭コマンド列を構築する。
なぜ: 放射状バーや円グラフの角丸表現を、接円の接点を結ぶ円弧だけで描くため。

角丸が弧長に収まらない場合は次の順に縮退する。

- 外周に収まらない: force_corner_radius なら半径 corner_radius の円、そうでなければ角丸なし。
- 内周に収まらない: 内周を描かず中心へ直線で閉じる。
"""

from __future__ import annotations

import logging

from sectorpath.core.commands import (
    ArcTo,
    ClosePath,
    LineTo,
    MoveTo,
    PathCommand,
    PathCommands,
    RelativeArcTo,
)
from sectorpath.core.numeric import math_sign
from sectorpath.core.polar import Point
from sectorpath.core.sharp import sharp_sector_commands
from sectorpath.core.tangent import get_tangent_circle

_logger = logging.getLogger(__name__)


def _circle_commands(start: Point, corner_radius: float) -> PathCommands:
    """start を左端とする半径 corner_radius の円（半円弧 2 本）を返す。"""
    diameter = corner_radius * 2
    return (
        MoveTo(start),
        RelativeArcTo(corner_radius, False, True, diameter, 0.0),
        RelativeArcTo(corner_radius, False, True, -diameter, 0.0),
        ClosePath(),
    )


def rounded_sector_commands(
    cx: float,
    cy: float,
    inner_radius: float,
    outer_radius: float,
    start_angle: float,
    end_angle: float,
    corner_radius: float,
    force_corner_radius: bool = False,
) -> PathCommands:
    """角丸 sector の閉じた輪郭を返す。

    Parameters
    ----------
    cx, cy : float
        中心。
    inner_radius, outer_radius : float
        内径と外径。
    start_angle, end_angle : float
        開始角と終了角 [deg]。差の絶対値は 360 未満を想定する。
    corner_radius : float
        クランプ済みの正の角丸半径（環の厚みの半分以下）。
    force_corner_radius : bool, optional
        外周に角丸が収まらない場合、角丸なしではなく円へ縮退させる。

    Returns
    -------
    PathCommands
        ClosePath で終わるコマンド列。
    """
    sign = math_sign(end_angle - start_angle)
    span = abs(start_angle - end_angle)
    sweep = sign < 0

    outer_start = get_tangent_circle(
        cx, cy, outer_radius, start_angle, sign, corner_radius
    )
    outer_end = get_tangent_circle(
        cx, cy, outer_radius, end_angle, -sign, corner_radius
    )
    outer_arc_angle = span - outer_start.theta - outer_end.theta

    if outer_arc_angle < 0:
        if force_corner_radius:
            _logger.debug(
                "外周に角丸が収まらないため円で描く: span=%s, corner_radius=%s",
                span,
                corner_radius,
            )
            return _circle_commands(outer_start.line_tangency, corner_radius)
        _logger.debug(
            "外周に角丸が収まらないため角丸なしで描く: span=%s, corner_radius=%s",
            span,
            corner_radius,
        )
        return sharp_sector_commands(
            cx, cy, inner_radius, outer_radius, start_angle, end_angle
        )

    commands: list[PathCommand] = [
        MoveTo(outer_start.line_tangency),
        ArcTo(corner_radius, False, sweep, outer_start.circle_tangency),
        ArcTo(outer_radius, outer_arc_angle > 180, sweep, outer_end.circle_tangency),
        ArcTo(corner_radius, False, sweep, outer_end.line_tangency),
    ]

    if inner_radius > 0:
        inner_start = get_tangent_circle(
            cx, cy, inner_radius, start_angle, sign, corner_radius, is_external=True
        )
        inner_end = get_tangent_circle(
            cx, cy, inner_radius, end_angle, -sign, corner_radius, is_external=True
        )
        inner_arc_angle = span - inner_start.theta - inner_end.theta

        if inner_arc_angle < 0:
            _logger.debug(
                "内周に角丸が収まらないため中心へ閉じる: span=%s, inner_radius=%s",
                span,
                inner_radius,
            )
            commands.append(LineTo(Point(cx, cy)))
            commands.append(ClosePath())
            return tuple(commands)

        # 内周は end→start の逆向きに辿るので、主円弧だけ sweep が外周と逆になる。
        commands.extend(
            [
                LineTo(inner_end.line_tangency),
                ArcTo(corner_radius, False, sweep, inner_end.circle_tangency),
                ArcTo(
                    inner_radius,
                    inner_arc_angle > 180,
                    sign > 0,
                    inner_start.circle_tangency,
                ),
                ArcTo(corner_radius, False, sweep, inner_start.line_tangency),
                ClosePath(),
            ]
        )
        return tuple(commands)

    commands.append(LineTo(Point(cx, cy)))
    commands.append(ClosePath())
    return tuple(commands)


__all__ = ["rounded_sector_commands"]
