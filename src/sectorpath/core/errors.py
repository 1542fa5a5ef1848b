# どこで: `src/sectorpath/core/errors.py`。
# 何を: sector 計算の数値ドメイン違反を表す例外を定義する。
# なぜ: 非有限値や asin の定義域外を SVG 文字列へ流さず、呼び出し側で区別できるようにするため。

from __future__ import annotations


class SectorDomainError(ValueError):
    """sector 入力または接円計算が数値ドメイン外であることを表すエラー。"""


__all__ = ["SectorDomainError"]
