"""
どこで: `src/sectorpath/core/commands.py`。
何を: SVG path コマンド（M/L/A/a/Z）のモデルと、`d` 属性文字列への整形を提供する。
なぜ: arc フラグを名前付き bool として保持し、角度判定を文字列整形から切り離して検証できるようにするため。
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union

from sectorpath.core.polar import Point

DEFAULT_DECIMALS = 6


@dataclass(frozen=True, slots=True)
class MoveTo:
    """輪郭の開始点へ移動する（`M x,y`）。"""

    point: Point


@dataclass(frozen=True, slots=True)
class LineTo:
    """直線で point まで引く（`L x,y`）。"""

    point: Point


@dataclass(frozen=True, slots=True)
class ArcTo:
    """半径 radius の円弧で point まで引く（`A r,r,0,large,sweep,x,y`）。

    large_arc は 180° を超える側の円弧を選ぶかどうか、sweep は角度の正方向
    （SVG 座標で時計回り）に進むかどうかを表す。
    """

    radius: float
    large_arc: bool
    sweep: bool
    point: Point


@dataclass(frozen=True, slots=True)
class RelativeArcTo:
    """現在点からの相対移動量 (dx, dy) で円弧を引く（`a r,r,0,large,sweep,dx,dy`）。"""

    radius: float
    large_arc: bool
    sweep: bool
    dx: float
    dy: float


@dataclass(frozen=True, slots=True)
class ClosePath:
    """輪郭を閉じる（`Z`）。"""


PathCommand = Union[MoveTo, LineTo, ArcTo, RelativeArcTo, ClosePath]
PathCommands = tuple[PathCommand, ...]


def fmt_number(value: float, *, decimals: int = DEFAULT_DECIMALS) -> str:
    """float を決定的で短い文字列へ変換して返す。"""
    text = f"{float(value):.{int(decimals)}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def _flag(value: bool) -> str:
    return "1" if value else "0"


def format_command(command: PathCommand, *, decimals: int = DEFAULT_DECIMALS) -> str:
    """単一コマンドを SVG path の断片へ変換して返す。"""

    def f(v: float) -> str:
        return fmt_number(v, decimals=decimals)

    if isinstance(command, MoveTo):
        return f"M {f(command.point.x)},{f(command.point.y)}"
    if isinstance(command, LineTo):
        return f"L {f(command.point.x)},{f(command.point.y)}"
    if isinstance(command, ArcTo):
        r = f(command.radius)
        return (
            f"A {r},{r},0,{_flag(command.large_arc)},{_flag(command.sweep)},"
            f"{f(command.point.x)},{f(command.point.y)}"
        )
    if isinstance(command, RelativeArcTo):
        r = f(command.radius)
        return (
            f"a {r},{r},0,{_flag(command.large_arc)},{_flag(command.sweep)},"
            f"{f(command.dx)},{f(command.dy)}"
        )
    if isinstance(command, ClosePath):
        return "Z"
    raise TypeError(f"未対応の path コマンド: {type(command)!r}")


def format_path(commands: Iterable[PathCommand], *, decimals: int = DEFAULT_DECIMALS) -> str:
    """コマンド列を SVG path の `d` 属性文字列へ変換して返す。

    Parameters
    ----------
    commands : Iterable[PathCommand]
        整形対象のコマンド列。
    decimals : int, optional
        座標の小数桁数。末尾の 0 は削る。

    Returns
    -------
    str
        空白区切りの `d` 文字列。
    """
    if int(decimals) < 0:
        raise ValueError("decimals は 0 以上である必要がある")
    return " ".join(format_command(c, decimals=decimals) for c in commands)


__all__ = [
    "DEFAULT_DECIMALS",
    "ArcTo",
    "ClosePath",
    "LineTo",
    "MoveTo",
    "PathCommand",
    "PathCommands",
    "RelativeArcTo",
    "fmt_number",
    "format_command",
    "format_path",
]
