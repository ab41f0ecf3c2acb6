from __future__ import annotations

from pathlib import Path

import pytest

from dotlink.config import AppConfig, config_file_path
from dotlink.mappings import MappingSet


@pytest.fixture
def fake_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.delenv("DOTFILES_ROOT", raising=False)
    return home


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    root = tmp_path / "dotfiles"
    root.mkdir()
    return root


@pytest.fixture
def write_config(repo: Path, fake_home: Path):
    def _write(*mappings: str) -> AppConfig:
        config = AppConfig(config_file_path(repo, fake_home), MappingSet.from_strings(mappings))
        config.save()
        return config

    return _write
