import os
from datetime import date, datetime
from pathlib import Path
from typing import Optional

from rapidadd._utils import local_now
from rapidadd.config import AppConfig


def daily_file_name(config: AppConfig, today: date) -> str:
    return f"{today.strftime(config.date_format)}.{config.file_extension}"


def daily_file_path(config: AppConfig, today: Optional[date] = None) -> Path:
    """Today's daily file under daily_path. Existence is not checked."""
    if today is None:
        today = local_now().date()
    return Path(config.daily_path) / daily_file_name(config, today)


def format_entry(text: str, now: Optional[datetime] = None) -> str:
    now = now or local_now()
    return f"- {now.strftime('%H:%M')} {text}"


def _needs_newline(f) -> bool:
    size = f.seek(0, os.SEEK_END)
    if size == 0:
        return False
    f.seek(-1, os.SEEK_END)
    return f.read(1) != b"\n"


def append_entry(path: Path, line: str) -> None:
    """Append line plus a newline to an existing file.

    The file is never created. If it does not end with a newline one is
    written first so the previous last line gets terminated.
    """
    fd = os.open(path, os.O_RDWR | os.O_APPEND | getattr(os, "O_BINARY", 0))
    with os.fdopen(fd, "rb+") as f:
        if _needs_newline(f):
            line = "\n" + line
        f.seek(0, os.SEEK_END)
        f.write(f"{line}\n".encode("utf-8"))


def read_daily(path: Path) -> str:
    return path.read_text(encoding="utf-8")
