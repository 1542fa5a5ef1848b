# src/sectorpath/core/realized_path.py
# path コマンド列を折れ線化した結果である RealizedPath 配列のモデルと検証ロジック。

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True)
class RealizedPath:
    """path を折れ線化した結果の実体配列を表現する。

    Parameters
    ----------
    coords : np.ndarray
        float64 型 shape (N, 2) の頂点配列。
    offsets : np.ndarray
        int32 型 shape (M+1,) のポリライン開始インデックス配列。

    Notes
    -----
    不変性を契約とし、配列は writeable=False で返す。
    offsets と coords の整合性はコンストラクタ内で検証する。
    """

    coords: np.ndarray
    offsets: np.ndarray

    def __post_init__(self) -> None:
        """配列形状と整合性を検証し、不変条件を満たす形に固定する。"""
        coords = np.array(self.coords, dtype=np.float64)
        offsets = np.array(self.offsets, dtype=np.int32)

        if coords.ndim == 1 and coords.size == 0:
            coords = coords.reshape(0, 2)

        if coords.ndim != 2 or coords.shape[1] != 2:
            raise ValueError("coords は shape (N,2) の 2 次元配列である必要がある")

        if offsets.ndim != 1:
            raise ValueError("offsets は 1 次元配列である必要がある")

        if offsets.size == 0:
            raise ValueError("offsets は少なくとも 1 要素を含む必要がある")

        if offsets[0] != 0:
            raise ValueError("offsets[0] は 0 である必要がある")

        if offsets[-1] != coords.shape[0]:
            raise ValueError("offsets[-1] は coords 行数と一致する必要がある")

        if np.any(np.diff(offsets) < 0):
            raise ValueError("offsets は単調非減少である必要がある")

        # 不変性確保のため writeable=False に設定する。
        coords.setflags(write=False)
        offsets.setflags(write=False)

        object.__setattr__(self, "coords", coords)
        object.__setattr__(self, "offsets", offsets)

    @classmethod
    def empty(cls) -> "RealizedPath":
        """ポリラインを 1 本も持たない RealizedPath を返す。"""
        return cls(
            coords=np.zeros((0, 2), dtype=np.float64),
            offsets=np.zeros((1,), dtype=np.int32),
        )

    @property
    def n_polylines(self) -> int:
        """ポリライン本数。"""
        return int(self.offsets.size - 1)

    def polylines(self) -> list[np.ndarray]:
        """各ポリライン（shape (K,2) のビュー）をリストで返す。"""
        return [
            self.coords[int(start) : int(end)]
            for start, end in zip(self.offsets[:-1], self.offsets[1:])
        ]


__all__ = ["RealizedPath"]
