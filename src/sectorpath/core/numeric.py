"""
どこで: `src/sectorpath/core/numeric.py`。
何を: 符号関数と、絶対値/パーセント指定の角丸半径（tagged union）の解決を提供する。
なぜ: 角丸半径を facade 境界で 1 度だけ絶対長へ解決し、以降は float だけを扱うため。
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Union

_logger = logging.getLogger(__name__)


def math_sign(value: float) -> int:
    """値の符号を -1/0/1 で返す。0 を返すのは厳密に 0 の場合のみ。"""
    if value == 0:
        return 0
    if value > 0:
        return 1
    return -1


@dataclass(frozen=True, slots=True)
class Absolute:
    """絶対長で指定された角丸半径。"""

    value: float


@dataclass(frozen=True, slots=True)
class Percent:
    """基準長（環の厚み）に対する百分率で指定された角丸半径。"""

    value: float


CornerRadius = Union[Absolute, Percent]


def parse_corner_radius(value: object) -> CornerRadius:
    """数値・文字列・CornerRadius を CornerRadius に正規化して返す。

    Parameters
    ----------
    value : object
        `12`, `"12"`, `"25%"`, `Absolute(...)`, `Percent(...)` または None。

    Returns
    -------
    CornerRadius
        正規化済みの角丸半径。解釈できない文字列は `Absolute(0.0)` になる。

    Raises
    ------
    TypeError
        数値・文字列・CornerRadius 以外が渡された場合。
    """
    if isinstance(value, (Absolute, Percent)):
        return value
    if value is None:
        return Absolute(0.0)
    if isinstance(value, bool):
        raise TypeError(f"corner_radius に bool は使えない: {value!r}")
    if isinstance(value, (int, float)):
        return Absolute(float(value))
    if isinstance(value, str):
        text = value.strip()
        is_percent = text.endswith("%")
        if is_percent:
            text = text[:-1].strip()
        try:
            number = float(text)
        except ValueError:
            _logger.warning("corner_radius を数値として解釈できないため 0 とする: %r", value)
            return Absolute(0.0)
        return Percent(number) if is_percent else Absolute(number)
    raise TypeError(f"corner_radius は数値または文字列である必要がある: {type(value)!r}")


def get_percent_value(
    value: CornerRadius,
    total: float,
    default: float = 0.0,
    validate: bool = False,
) -> float:
    """CornerRadius を基準長 total に対する絶対長へ解決する。

    Parameters
    ----------
    value : CornerRadius
        解決対象。
    total : float
        Percent の基準長。validate 時は上限にもなる。
    default : float, optional
        NaN になった場合に使う値。
    validate : bool, optional
        True なら結果を total 以下にクランプする。

    Returns
    -------
    float
        絶対長。
    """
    if isinstance(value, Percent):
        resolved = total * value.value / 100.0
    else:
        resolved = float(value.value)

    if math.isnan(resolved):
        resolved = float(default)
    if validate and resolved > total:
        resolved = float(total)
    return resolved


__all__ = [
    "Absolute",
    "CornerRadius",
    "Percent",
    "get_percent_value",
    "math_sign",
    "parse_corner_radius",
]
