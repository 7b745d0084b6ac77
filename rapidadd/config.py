from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from rapidadd._utils import load_toml, resolve_home


CONFIG_RELPATH = Path(".config") / "rapidadd" / "config.toml"

# Edit these to change behaviour without a config file
DEFAULTS: Dict[str, str] = {
    "daily_path": "./",
    "file_extension": "md",
    "date_format": "%Y-%m-%d_%a",
}


class ConfigError(RuntimeError):
    pass


@dataclass
class AppConfig:
    daily_path: str
    file_extension: str
    date_format: str


def config_path() -> Path:
    try:
        home = resolve_home()
    except RuntimeError as exc:
        raise ConfigError(str(exc)) from exc
    return home / CONFIG_RELPATH


def _read_file(path: Path) -> Dict[str, Any]:
    try:
        return load_toml(path, {})
    except (OSError, ValueError) as exc:
        # tomllib.TOMLDecodeError is a ValueError
        raise ConfigError(f"{path}: {exc}") from exc


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Build the config from DEFAULTS with the user's TOML file layered on top.

    A missing file is fine; unknown keys are ignored.
    """
    path = path or config_path()
    raw = _read_file(path)

    values = dict(DEFAULTS)
    for key in DEFAULTS:
        if key not in raw:
            continue
        value = raw[key]
        if not isinstance(value, str):
            raise ConfigError(f"{path}: '{key}' must be a string, got {type(value).__name__}")
        if not value:
            raise ConfigError(f"{path}: '{key}' must not be empty")
        values[key] = value

    return AppConfig(**values)
