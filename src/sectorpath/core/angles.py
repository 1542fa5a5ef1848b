# どこで: `src/sectorpath/core/angles.py`。
# 何を: 開始角と終了角から符号付きの差分角を求め、1 周未満に制限する。
# なぜ: 360° ちょうどの円弧は始点と終点が一致し、SVG の arc フラグで表現できないため。

from __future__ import annotations

from dataclasses import dataclass

from sectorpath.core.numeric import math_sign

MAX_DELTA_ANGLE = 359.999
"""差分角の絶対値の上限 [deg]。

360 にすると始点と終点が一致して円弧が消えるので、わずかに手前で止める。
"""


def get_delta_angle(start_angle: float, end_angle: float) -> float:
    """start→end の符号付き差分角 [deg] を返す（絶対値は MAX_DELTA_ANGLE 以下）。"""
    diff = end_angle - start_angle
    return math_sign(diff) * min(abs(diff), MAX_DELTA_ANGLE)


@dataclass(frozen=True, slots=True)
class NormalizedAngles:
    """正規化済みの角度情報。"""

    sign: int
    delta_angle: float
    temp_end_angle: float


def normalize_angles(start_angle: float, end_angle: float) -> NormalizedAngles:
    """差分角と、end_angle の代わりに使う終了角を返す。

    Parameters
    ----------
    start_angle : float
        開始角 [deg]。
    end_angle : float
        終了角 [deg]。範囲は問わない。

    Returns
    -------
    NormalizedAngles
        sign, delta_angle, temp_end_angle（= start_angle + delta_angle）。
    """
    delta = get_delta_angle(start_angle, end_angle)
    return NormalizedAngles(
        sign=math_sign(end_angle - start_angle),
        delta_angle=delta,
        temp_end_angle=start_angle + delta,
    )


__all__ = ["MAX_DELTA_ANGLE", "NormalizedAngles", "get_delta_angle", "normalize_angles"]
