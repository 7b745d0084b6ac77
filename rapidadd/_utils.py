import tomllib
from datetime import datetime
from pathlib import Path
from typing import Any, Dict


def resolve_home() -> Path:
    try:
        return Path.home()
    except RuntimeError as exc:
        raise RuntimeError("Could not find the home directory") from exc


def load_toml(path: Path, default: Dict[str, Any]) -> Dict[str, Any]:
    if not path.exists():
        return default
    with path.open("rb") as f:
        return tomllib.load(f)


def local_now() -> datetime:
    return datetime.now()
