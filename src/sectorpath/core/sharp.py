# どこで: `src/sectorpath/core/sharp.py`。
# 何を: 角丸なし（角が尖った）sector の輪郭コマンド列を構築する。
# なぜ: 角丸が指定されない場合と、角丸が収まらない場合のフォールバックに使うため。

from __future__ import annotations

from sectorpath.core.angles import normalize_angles
from sectorpath.core.commands import ArcTo, ClosePath, LineTo, MoveTo, PathCommand, PathCommands
from sectorpath.core.polar import Point, polar_to_cartesian


def sharp_sector_commands(
    cx: float,
    cy: float,
    inner_radius: float,
    outer_radius: float,
    start_angle: float,
    end_angle: float,
) -> PathCommands:
    """角丸なし sector の閉じた輪郭を返す。

    外周を start→end へ描き、inner_radius > 0 なら内周を end→start へ戻る。
    inner_radius == 0 なら中心へ直線で戻る（扇形）。

    Parameters
    ----------
    cx, cy : float
        中心。
    inner_radius, outer_radius : float
        内径と外径。
    start_angle, end_angle : float
        開始角と終了角 [deg]。

    Returns
    -------
    PathCommands
        ClosePath で終わるコマンド列。
    """
    angles = normalize_angles(start_angle, end_angle)
    temp_end_angle = angles.temp_end_angle
    large_arc = abs(angles.delta_angle) > 180

    outer_start = polar_to_cartesian(cx, cy, outer_radius, start_angle)
    outer_end = polar_to_cartesian(cx, cy, outer_radius, temp_end_angle)

    commands: list[PathCommand] = [
        MoveTo(outer_start),
        ArcTo(outer_radius, large_arc, start_angle > temp_end_angle, outer_end),
    ]

    if inner_radius > 0:
        inner_start = polar_to_cartesian(cx, cy, inner_radius, start_angle)
        inner_end = polar_to_cartesian(cx, cy, inner_radius, temp_end_angle)
        # 内周は逆向きに辿るので sweep を反転する。
        commands.append(LineTo(inner_end))
        commands.append(
            ArcTo(inner_radius, large_arc, start_angle <= temp_end_angle, inner_start)
        )
    else:
        commands.append(LineTo(Point(cx, cy)))

    commands.append(ClosePath())
    return tuple(commands)


__all__ = ["sharp_sector_commands"]
