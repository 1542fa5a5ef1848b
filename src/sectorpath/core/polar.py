"""
どこで: `src/sectorpath/core/polar.py`。
何を: 極座標（中心・半径・角度[deg]）から直交座標への変換を提供する。
なぜ: sector の各頂点・接点を同じ規約で求めるため。
"""

from __future__ import annotations

import math
from dataclasses import dataclass

RADIAN = math.pi / 180.0
"""度からラジアンへの変換係数。"""


@dataclass(frozen=True, slots=True)
class Point:
    """SVG 座標系（y 軸下向き）上の点。"""

    x: float
    y: float


def polar_to_cartesian(cx: float, cy: float, radius: float, angle: float) -> Point:
    """極座標を直交座標へ変換して返す。

    Parameters
    ----------
    cx, cy : float
        中心座標。
    radius : float
        中心からの距離。
    angle : float
        角度 [deg]。0° で +X 方向、画面上で反時計回りに増加する。

    Returns
    -------
    Point
        変換後の点。
    """
    # SVG は y 軸が下向きなので角度を反転して画面上の反時計回りに揃える。
    rad = -RADIAN * angle
    return Point(x=cx + math.cos(rad) * radius, y=cy + math.sin(rad) * radius)


__all__ = ["RADIAN", "Point", "polar_to_cartesian"]
