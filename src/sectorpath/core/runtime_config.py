# どこで: `src/sectorpath/core/runtime_config.py`。
# 何を: config.yaml による実行時設定（探索・ロード・キャッシュ）を提供する。
# なぜ: 出力桁数や円弧の分割数、SVG の既定スタイルをユーザーが指定できるようにするため。

from __future__ import annotations

import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """sectorpath の実行時設定。"""

    config_path: Path | None
    decimals: int
    segments_per_turn: int
    svg_fill: str
    svg_stroke: str
    svg_stroke_width: float


_EXPLICIT_CONFIG_PATH: Path | None = None
_CONFIG_CACHE: RuntimeConfig | None = None


def set_config_path(path: str | Path | None) -> None:
    """以降の設定探索で使う明示 config パスを設定する。

    Notes
    -----
    `path` を None にすると明示指定を解除し、既定の探索に戻る。
    """

    global _EXPLICIT_CONFIG_PATH, _CONFIG_CACHE
    if path is None:
        _EXPLICIT_CONFIG_PATH = None
        _CONFIG_CACHE = None
        return
    p = Path(os.path.expandvars(os.path.expanduser(str(path))))
    _EXPLICIT_CONFIG_PATH = p
    _CONFIG_CACHE = None


def _default_config_candidates() -> tuple[Path, ...]:
    cwd = Path.cwd()
    home = Path.home()
    return (
        cwd / ".sectorpath" / "config.yaml",
        home / ".config" / "sectorpath" / "config.yaml",
    )


def _as_mapping(value: Any, *, key: str) -> dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, dict):
        return dict(value)
    raise RuntimeError(f"{key} は mapping である必要があります: got={value!r}")


def _as_int(value: Any, *, key: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise RuntimeError(f"{key} は整数である必要があります: got={value!r}")
    try:
        return int(value)
    except Exception as exc:
        raise RuntimeError(f"{key} は整数である必要があります: got={value!r}") from exc


def _as_float(value: Any, *, key: str) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except Exception as exc:
        raise RuntimeError(f"{key} は数値である必要があります: got={value!r}") from exc


def _as_str(value: Any, *, key: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise RuntimeError(f"{key} は文字列である必要があります: got={value!r}")
    s = value.strip()
    return s or None


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """mapping を再帰的にマージする（override 側が後勝ち）。"""
    out = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], value)
        else:
            out[key] = value
    return out


def _load_yaml_text(text: str, *, source: str) -> dict[str, Any]:
    import yaml

    try:
        data = yaml.safe_load(text)
    except Exception as exc:
        raise RuntimeError(f"config.yaml の読み込みに失敗しました: source={source}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuntimeError(f"config.yaml は mapping である必要があります: source={source}")

    return dict(data)


def _load_yaml_config(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    return _load_yaml_text(text, source=str(path))


def _load_packaged_default_config() -> dict[str, Any]:
    """同梱デフォルト config をロードして dict を返す。"""

    try:
        blob = (
            resources.files("sectorpath")
            .joinpath("resource", "default_config.yaml")
            .read_text(encoding="utf-8")
        )
    except Exception as exc:  # pragma: no cover
        raise RuntimeError(
            "同梱 default_config.yaml の読み込みに失敗しました"
            "（パッケージ配布物の package-data を確認してください）"
        ) from exc

    return _load_yaml_text(blob, source="sectorpath/resource/default_config.yaml")


def _required(value: Any, *, key: str) -> Any:
    if value is None:
        raise RuntimeError(
            f"{key} が未設定です（同梱 default_config.yaml を確認してください）"
        )
    return value


def runtime_config() -> RuntimeConfig:
    """実行時設定をロードして返す（キャッシュ）。

    上書き順（後勝ち）:
    1) 同梱 default_config.yaml
    2) `./.sectorpath/config.yaml` / `~/.config/sectorpath/config.yaml`
    3) `set_config_path()` で指定したパス
    """

    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    explicit_path = _EXPLICIT_CONFIG_PATH
    if explicit_path is not None and not explicit_path.is_file():
        raise FileNotFoundError(f"config.yaml が見つかりません: {explicit_path}")

    discovered_path: Path | None = None
    for p in _default_config_candidates():
        if p.is_file():
            discovered_path = p
            break

    payload = _load_packaged_default_config()
    if discovered_path is not None:
        payload = _merge(payload, _load_yaml_config(discovered_path))
    if explicit_path is not None:
        payload = _merge(payload, _load_yaml_config(explicit_path))

    version = _as_int(_required(payload.get("version"), key="version"), key="version")
    if version != 1:
        raise RuntimeError(f"未対応の config.yaml version です: got={version}")

    path_cfg = _as_mapping(payload.get("path"), key="path")
    decimals = _required(_as_int(path_cfg.get("decimals"), key="path.decimals"), key="path.decimals")
    if decimals < 0:
        raise ValueError(f"path.decimals は 0 以上である必要があります: got={decimals}")

    flatten_cfg = _as_mapping(payload.get("flatten"), key="flatten")
    segments_per_turn = _required(
        _as_int(flatten_cfg.get("segments_per_turn"), key="flatten.segments_per_turn"),
        key="flatten.segments_per_turn",
    )
    if segments_per_turn < 4:
        raise ValueError(
            f"flatten.segments_per_turn は 4 以上である必要があります: got={segments_per_turn}"
        )

    export = _as_mapping(payload.get("export"), key="export")
    svg = _as_mapping(export.get("svg"), key="export.svg")
    svg_fill = _required(_as_str(svg.get("fill"), key="export.svg.fill"), key="export.svg.fill")
    svg_stroke = _required(
        _as_str(svg.get("stroke"), key="export.svg.stroke"), key="export.svg.stroke"
    )
    svg_stroke_width = _required(
        _as_float(svg.get("stroke_width"), key="export.svg.stroke_width"),
        key="export.svg.stroke_width",
    )
    if svg_stroke_width < 0:
        raise ValueError(
            f"export.svg.stroke_width は 0 以上である必要があります: got={svg_stroke_width}"
        )

    cfg = RuntimeConfig(
        config_path=explicit_path or discovered_path,
        decimals=int(decimals),
        segments_per_turn=int(segments_per_turn),
        svg_fill=str(svg_fill),
        svg_stroke=str(svg_stroke),
        svg_stroke_width=float(svg_stroke_width),
    )
    _CONFIG_CACHE = cfg
    return cfg


__all__ = ["RuntimeConfig", "runtime_config", "set_config_path"]
