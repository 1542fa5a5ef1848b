"""
どこで: `src/sectorpath/core/sector.py`。
何を: SectorSpec を検証し、角丸半径を解決して角丸/角丸なしの builder へ振り分ける。
なぜ: sector 幾何の唯一の入口として、「描画なし」と縮退の方針を 1 か所にまとめるため。
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields, replace
from numbers import Real
from typing import Any

from sectorpath.core.commands import PathCommands, format_path
from sectorpath.core.errors import SectorDomainError
from sectorpath.core.numeric import CornerRadius, get_percent_value, parse_corner_radius
from sectorpath.core.rounded import rounded_sector_commands
from sectorpath.core.runtime_config import runtime_config
from sectorpath.core.sharp import sharp_sector_commands

_FINITE_FIELDS = ("cx", "cy", "inner_radius", "outer_radius", "start_angle", "end_angle")
_RADIUS_FIELDS = ("inner_radius", "outer_radius")


@dataclass(frozen=True, slots=True)
class SectorSpec:
    """1 つの環状 sector の入力。

    Parameters
    ----------
    cx, cy : float
        中心。有限値。
    inner_radius, outer_radius : float
        内径と外径。0 以上の有限値。outer_radius < inner_radius は「描画なし」。
    start_angle, end_angle : float
        開始角と終了角 [deg]。等しい場合は「描画なし」。
    corner_radius : float | str | CornerRadius
        角丸半径。`"25%"` のように環の厚みに対する百分率でも指定できる。
    force_corner_radius : bool
        角丸が収まらない場合に、角丸なしではなく円へ縮退させる。
    """

    cx: float = 0.0
    cy: float = 0.0
    inner_radius: float = 0.0
    outer_radius: float = 0.0
    start_angle: float = 0.0
    end_angle: float = 0.0
    corner_radius: float | str | CornerRadius = 0.0
    force_corner_radius: bool = False


def _check_domain(spec: SectorSpec) -> None:
    for name in _FINITE_FIELDS:
        value = getattr(spec, name)
        if isinstance(value, bool) or not isinstance(value, Real):
            raise SectorDomainError(f"{name} は実数である必要がある: got={value!r}")
        if not math.isfinite(value):
            raise SectorDomainError(f"{name} は有限値である必要がある: got={value!r}")
    for name in _RADIUS_FIELDS:
        value = getattr(spec, name)
        if value < 0:
            raise SectorDomainError(f"{name} は 0 以上である必要がある: got={value!r}")


def resolve_corner_radius(spec: SectorSpec) -> float:
    """角丸半径を絶対長へ解決し、環の厚みの半分以下にクランプして返す。"""
    delta_radius = spec.outer_radius - spec.inner_radius
    cr = get_percent_value(
        parse_corner_radius(spec.corner_radius), delta_radius, 0.0, validate=True
    )
    return min(cr, delta_radius / 2)


def sector_commands(spec: SectorSpec) -> PathCommands | None:
    """sector の輪郭コマンド列を返す。描画すべきものがなければ None。

    Parameters
    ----------
    spec : SectorSpec
        sector の入力。

    Returns
    -------
    PathCommands or None
        ClosePath で終わるコマンド列。outer_radius < inner_radius または
        start_angle == end_angle の場合は None。

    Raises
    ------
    SectorDomainError
        中心・半径・角度が有限の実数でない場合、または半径が負の場合。
    """
    _check_domain(spec)

    if spec.outer_radius < spec.inner_radius or spec.start_angle == spec.end_angle:
        return None

    cr = resolve_corner_radius(spec)

    if cr > 0 and abs(spec.start_angle - spec.end_angle) < 360:
        return rounded_sector_commands(
            spec.cx,
            spec.cy,
            spec.inner_radius,
            spec.outer_radius,
            spec.start_angle,
            spec.end_angle,
            cr,
            bool(spec.force_corner_radius),
        )
    return sharp_sector_commands(
        spec.cx,
        spec.cy,
        spec.inner_radius,
        spec.outer_radius,
        spec.start_angle,
        spec.end_angle,
    )


def sector_path(
    spec: SectorSpec | None = None,
    *,
    decimals: int | None = None,
    **overrides: Any,
) -> str | None:
    """sector の SVG path `d` 文字列を返す。描画すべきものがなければ None。

    Parameters
    ----------
    spec : SectorSpec or None, optional
        sector の入力。None なら既定値の SectorSpec を使う。
    decimals : int or None, optional
        座標の小数桁数。None なら runtime config の `path.decimals`。
    **overrides
        SectorSpec のフィールドを個別に上書きする（例: `outer_radius=100`）。

    Returns
    -------
    str or None
        `d` 文字列。

    Examples
    --------
    >>> sector_path(outer_radius=100, end_angle=90)
    'M 100,0 A 100,100,0,0,0,0,-100 L 0,0 Z'
    """
    base = spec if spec is not None else SectorSpec()
    if overrides:
        known = {f.name for f in fields(SectorSpec)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise TypeError(f"SectorSpec に存在しないフィールド: {unknown}")
        base = replace(base, **overrides)

    commands = sector_commands(base)
    if commands is None:
        return None
    if decimals is None:
        decimals = runtime_config().decimals
    return format_path(commands, decimals=decimals)


__all__ = ["SectorSpec", "resolve_corner_radius", "sector_commands", "sector_path"]
