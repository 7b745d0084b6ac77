from datetime import datetime
from pathlib import Path

import pytest


@pytest.fixture
def home(tmp_path, monkeypatch):
    """Temp HOME with a config pointing daily files at the same dir."""
    config_dir = tmp_path / ".config" / "rapidadd"
    config_dir.mkdir(parents=True)
    (config_dir / "config.toml").write_text(
        f'daily_path = "{tmp_path.as_posix()}"\n'
        'file_extension = "md"\n'
        'date_format = "%Y-%m-%d"\n',
        encoding="utf-8",
    )
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def today_file(home) -> Path:
    return home / f"{datetime.now().strftime('%Y-%m-%d')}.md"
