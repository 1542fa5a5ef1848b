# どこで: `src/sectorpath/__init__.py`。
# 何を: ルート `sectorpath` パッケージとして sector 幾何と export の公開 API を再エクスポートする。
# なぜ: ユーザーコードから `from sectorpath import sector_path` だけで使えるようにするため。

from __future__ import annotations

from sectorpath.core.commands import (
    ArcTo,
    ClosePath,
    LineTo,
    MoveTo,
    PathCommand,
    PathCommands,
    RelativeArcTo,
    format_path,
)
from sectorpath.core.errors import SectorDomainError
from sectorpath.core.flatten import flatten_commands, polygon_area, realize_sector
from sectorpath.core.numeric import Absolute, CornerRadius, Percent
from sectorpath.core.realized_path import RealizedPath
from sectorpath.core.runtime_config import set_config_path
from sectorpath.core.sector import SectorSpec, sector_commands, sector_path
from sectorpath.export.svg import SectorLayer, export_svg

__all__ = [
    "Absolute",
    "ArcTo",
    "ClosePath",
    "CornerRadius",
    "LineTo",
    "MoveTo",
    "PathCommand",
    "PathCommands",
    "Percent",
    "RealizedPath",
    "RelativeArcTo",
    "SectorDomainError",
    "SectorLayer",
    "SectorSpec",
    "export_svg",
    "flatten_commands",
    "format_path",
    "polygon_area",
    "realize_sector",
    "sector_commands",
    "sector_path",
    "set_config_path",
]
