"""
どこで: `src/sectorpath/export/svg.py`。
何を: sector 列を塗りつぶし path として SVG ファイルへ保存する関数を提供する。
なぜ: 幾何エンジンの出力をそのままブラウザ等で確認・再利用できるようにするため。
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from html import escape
from pathlib import Path

from sectorpath.core.commands import fmt_number, format_path
from sectorpath.core.runtime_config import runtime_config
from sectorpath.core.sector import SectorSpec, sector_commands

_SVG_NS = "http://www.w3.org/2000/svg"

Paint = str | tuple[float, float, float]

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SectorLayer:
    """SectorSpec と塗り・線スタイルを束ねる出力要素。

    fill / stroke は SVG の色文字列か 0..1 float の RGB タプルで指定する。
    None のスタイルは runtime config の `export.svg.*` で埋める。
    """

    spec: SectorSpec
    fill: Paint | None = None
    stroke: Paint | None = None
    stroke_width: float | None = None


def rgb01_to_hex(rgb01: tuple[float, float, float]) -> str:
    """0..1 float RGB を #RRGGBB に変換して返す。"""

    out: list[int] = []
    for v in rgb01:
        fv = float(v)
        fv = 0.0 if fv < 0.0 else 1.0 if fv > 1.0 else fv
        out.append(int(round(fv * 255.0)))
    r, g, b = out
    return f"#{r:02X}{g:02X}{b:02X}"


def _paint_to_svg(paint: Paint) -> str:
    if isinstance(paint, str):
        return escape(paint)
    return rgb01_to_hex(paint)


def export_svg(
    sectors: Sequence[SectorLayer],
    path: str | Path,
    *,
    canvas_size: tuple[int, int] | None = None,
) -> Path:
    """sector 列を SVG として保存する。

    Parameters
    ----------
    sectors : Sequence[SectorLayer]
        出力する sector 列。描画なしの sector は出力しない。
    path : str or Path
        出力先パス。親ディレクトリは必要に応じて作成する。
    canvas_size : tuple[int, int] or None, optional
        キャンバス寸法。現在は None を許容しない。

    Returns
    -------
    Path
        保存先パス。

    Raises
    ------
    ValueError
        canvas_size が None または正の値でない場合。
    """
    _path = Path(path)
    if canvas_size is None:
        raise ValueError("canvas_size=None は未対応（現在は必須）")

    canvas_w, canvas_h = canvas_size
    if canvas_w <= 0 or canvas_h <= 0:
        raise ValueError("canvas_size は正の値である必要がある")

    cfg = runtime_config()

    lines: list[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append(
        (
            f'<svg xmlns="{_SVG_NS}" viewBox="0 0 {int(canvas_w)} {int(canvas_h)}" '
            f'width="{int(canvas_w)}" height="{int(canvas_h)}">'
        )
    )

    for i, layer in enumerate(sectors):
        commands = sector_commands(layer.spec)
        if commands is None:
            _logger.debug("描画なしの sector をスキップする: index=%d", i)
            continue

        d = format_path(commands, decimals=cfg.decimals)
        fill = layer.fill if layer.fill is not None else cfg.svg_fill
        stroke = layer.stroke if layer.stroke is not None else cfg.svg_stroke
        stroke_width = (
            layer.stroke_width if layer.stroke_width is not None else cfg.svg_stroke_width
        )
        if stroke_width < 0:
            raise ValueError("stroke_width は 0 以上である必要がある")

        lines.append(
            (
                f'  <path d="{d}" fill="{_paint_to_svg(fill)}" '
                f'stroke="{_paint_to_svg(stroke)}" '
                f'stroke-width="{fmt_number(stroke_width, decimals=3)}" />'
            )
        )

    lines.append("</svg>")

    _path.parent.mkdir(parents=True, exist_ok=True)
    with _path.open("w", encoding="utf-8", newline="\n") as f:
        f.write("\n".join(lines) + "\n")

    return _path


__all__ = ["SectorLayer", "export_svg", "rgb01_to_hex"]
