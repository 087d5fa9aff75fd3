"""测试公共 fixture。"""

import json
import os
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """隔离 HOME 和 CLAWDIS_ 环境变量，避免读到本机配置。"""
    for key in list(os.environ):
        if key.startswith("CLAWDIS_"):
            monkeypatch.delenv(key, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def write_config(tmp_path):
    """把字典写成临时 JSON 配置文件，返回文件路径。"""

    def _write(config, name: str = "clawdis.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(config, indent=2, ensure_ascii=False), encoding="utf-8")
        return path

    return _write
