from __future__ import annotations

import logging
import os
from typing import Iterable, Optional

_TRUE = {"1", "true", "yes", "y", "on"}
_FALSE = {"0", "false", "no", "n", "off"}


def env_str(name: str, default: str) -> str:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def env_optional_str(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip() or default


def env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    raw = raw.strip().lower()
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    return default


def env_choice(name: str, choices: Iterable[str], default: str) -> str:
    """Return the env value if it is one of ``choices`` (case-insensitive)."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    wanted = raw.strip().lower()
    for choice in choices:
        if choice.lower() == wanted:
            return choice
    return default


def env_log_level(name: str, default: int = logging.INFO) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    raw = raw.strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else default
