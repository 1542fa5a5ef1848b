"""
どこで: `src/sectorpath/core/tangent.py`。
何を: 角丸用の小円が主円弧と半径線の両方に接する 2 接点を求める。
なぜ: 角丸 sector の外周/内周の各角を、接点から接点への円弧で描くため。
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from sectorpath.core.errors import SectorDomainError
from sectorpath.core.polar import RADIAN, Point, polar_to_cartesian


@dataclass(frozen=True, slots=True)
class TangentCircle:
    """1 つの角に対する接円の解。

    Attributes
    ----------
    center : Point
        角丸円の中心。
    circle_tangency : Point
        主円（半径 radius）との接点。
    line_tangency : Point
        angle 方向の半径線との接点。
    theta : float
        角丸が消費する角度 [deg]（sector 中心から見た角丸円中心のずれ）。
    """

    center: Point
    circle_tangency: Point
    line_tangency: Point
    theta: float


def get_tangent_circle(
    cx: float,
    cy: float,
    radius: float,
    angle: float,
    sign: int,
    corner_radius: float,
    *,
    is_external: bool = False,
) -> TangentCircle:
    """半径 radius の主円と角度 angle の半径線に接する角丸円を解く。

    Parameters
    ----------
    cx, cy : float
        sector の中心。
    radius : float
        主円の半径。
    angle : float
        半径線の角度 [deg]。
    sign : int
        角丸円を置く回転方向（±1）。
    corner_radius : float
        角丸円の半径。
    is_external : bool, optional
        True なら角丸円を主円の外側に置く（内周の角）。

    Returns
    -------
    TangentCircle
        接点と消費角。

    Raises
    ------
    SectorDomainError
        corner_radius / center_radius が [-1, 1] の外にある場合。
    """
    center_radius = radius + corner_radius * (1 if is_external else -1)
    if center_radius == 0:
        raise SectorDomainError(
            f"接円の中心半径が 0 になる: radius={radius}, corner_radius={corner_radius}"
        )
    ratio = corner_radius / center_radius
    if not -1.0 <= ratio <= 1.0:
        raise SectorDomainError(
            f"corner_radius が大きすぎて接円を解けない: radius={radius}, "
            f"corner_radius={corner_radius}, is_external={is_external}"
        )

    theta_rad = math.asin(ratio)
    theta = theta_rad / RADIAN
    center_angle = angle + sign * theta

    return TangentCircle(
        center=polar_to_cartesian(cx, cy, center_radius, center_angle),
        circle_tangency=polar_to_cartesian(cx, cy, radius, center_angle),
        line_tangency=polar_to_cartesian(cx, cy, center_radius * math.cos(theta_rad), angle),
        theta=theta,
    )


__all__ = ["TangentCircle", "get_tangent_circle"]
