"""SVG export（`sectorpath.export.svg.export_svg`）のテスト。"""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from sectorpath.core.runtime_config import set_config_path
from sectorpath.core.sector import SectorSpec, sector_path
from sectorpath.export.svg import SectorLayer, export_svg, rgb01_to_hex

_SVG_NS = "http://www.w3.org/2000/svg"
_NS = {"svg": _SVG_NS}


def _parse_svg(text: str) -> ET.Element:
    root = ET.fromstring(text)
    assert root.tag == f"{{{_SVG_NS}}}svg"
    return root


def test_export_svg_writes_valid_svg(tmp_path) -> None:
    spec = SectorSpec(cx=50.0, cy=50.0, outer_radius=40.0, end_angle=90.0)
    out_path = tmp_path / "nested" / "out.svg"

    returned = export_svg(
        [SectorLayer(spec, fill="#FF0000", stroke="#000000", stroke_width=0.5)],
        out_path,
        canvas_size=(100, 200),
    )
    assert returned == out_path
    assert out_path.exists()

    root = _parse_svg(out_path.read_text(encoding="utf-8"))
    assert root.attrib["viewBox"] == "0 0 100 200"
    assert root.attrib["width"] == "100"
    assert root.attrib["height"] == "200"

    paths = root.findall("svg:path", _NS)
    assert len(paths) == 1
    path = paths[0]
    assert path.attrib["fill"] == "#FF0000"
    assert path.attrib["stroke"] == "#000000"
    assert path.attrib["stroke-width"] == "0.5"
    assert path.attrib["d"] == "M 90,50 A 40,40,0,0,0,50,10 L 50,50 Z"
    assert path.attrib["d"] == sector_path(spec)


def test_export_svg_skips_sectors_without_geometry(tmp_path) -> None:
    sectors = [
        SectorLayer(SectorSpec(outer_radius=10.0, start_angle=5.0, end_angle=5.0)),
        SectorLayer(SectorSpec(inner_radius=20.0, outer_radius=10.0, end_angle=90.0)),
        SectorLayer(SectorSpec(inner_radius=5.0, outer_radius=10.0, end_angle=180.0)),
    ]
    out_path = tmp_path / "out.svg"
    export_svg(sectors, out_path, canvas_size=(10, 10))

    root = _parse_svg(out_path.read_text(encoding="utf-8"))
    assert len(root.findall("svg:path", _NS)) == 1


def test_export_svg_uses_configured_default_style(tmp_path) -> None:
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text(
        'export:\n  svg:\n    fill: "#336699"\n    stroke: "#FFFFFF"\n    stroke_width: 2\n',
        encoding="utf-8",
    )
    set_config_path(cfg)

    out_path = tmp_path / "out.svg"
    export_svg(
        [SectorLayer(SectorSpec(outer_radius=10.0, end_angle=45.0, corner_radius="10%"))],
        out_path,
        canvas_size=(10, 10),
    )

    path = _parse_svg(out_path.read_text(encoding="utf-8")).find("svg:path", _NS)
    assert path is not None
    assert path.attrib["fill"] == "#336699"
    assert path.attrib["stroke"] == "#FFFFFF"
    assert path.attrib["stroke-width"] == "2"


def test_export_svg_is_deterministic(tmp_path) -> None:
    sectors = [
        SectorLayer(
            SectorSpec(
                cx=50.0,
                cy=50.0,
                inner_radius=20.0,
                outer_radius=45.0,
                start_angle=30.0,
                end_angle=300.0,
                corner_radius=4.0,
            ),
            fill=(0.1, 0.2, 0.3),
        )
    ]

    a = tmp_path / "a.svg"
    b = tmp_path / "b.svg"
    export_svg(sectors, a, canvas_size=(100, 100))
    export_svg(sectors, b, canvas_size=(100, 100))

    assert a.read_bytes() == b.read_bytes()


def test_export_svg_rejects_bad_canvas_size(tmp_path) -> None:
    sectors = [SectorLayer(SectorSpec(outer_radius=1.0, end_angle=90.0))]
    with pytest.raises(ValueError):
        export_svg(sectors, tmp_path / "out.svg", canvas_size=None)
    with pytest.raises(ValueError):
        export_svg(sectors, tmp_path / "out.svg", canvas_size=(0, 10))


def test_rgb01_to_hex_clamps_and_rounds() -> None:
    assert rgb01_to_hex((1.0, 0.0, 0.0)) == "#FF0000"
    assert rgb01_to_hex((0.0, 0.2, 0.4)) == "#003366"
    assert rgb01_to_hex((-1.0, 2.0, 1.0)) == "#00FFFF"


def test_export_svg_accepts_rgb01_tuples_for_style(tmp_path) -> None:
    out_path = tmp_path / "out.svg"
    export_svg(
        [
            SectorLayer(
                SectorSpec(outer_radius=10.0, end_angle=90.0),
                fill=(0.0, 0.2, 0.4),
                stroke=(2.0, -1.0, 1.0),
                stroke_width=1.0,
            )
        ],
        out_path,
        canvas_size=(10, 10),
    )

    path = _parse_svg(out_path.read_text(encoding="utf-8")).find("svg:path", _NS)
    assert path is not None
    assert path.attrib["fill"] == "#003366"
    assert path.attrib["stroke"] == "#FF00FF"
