from __future__ import annotations

import logging
import os


def get_seed() -> int | None:
    """Seed for the process-wide store; unset means a fresh OS-entropy seed."""

    raw = os.environ.get("MONTYHALL_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"MONTYHALL_SEED must be an integer, got {raw!r}") from e


def get_log_level() -> int:
    name = os.environ.get("MONTYHALL_LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown MONTYHALL_LOG_LEVEL: {name}")
    return level
