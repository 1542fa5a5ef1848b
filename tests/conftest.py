from pathlib import Path

import pytest

from sectorpath.core.runtime_config import set_config_path


@pytest.fixture(autouse=True)
def _isolate_runtime_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    # ユーザー環境の config.yaml を拾わないようにする。
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    set_config_path(None)
    yield
    set_config_path(None)
