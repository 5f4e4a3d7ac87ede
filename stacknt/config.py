from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional

log = logging.getLogger(__name__)

# Defaults
DEFAULT_MAX_DEPTH = 10000
_DEFAULT_HISTORY_NAME = '.stacknt_history'


def int_from_env(var: str, default: int) -> int:
    """Positive integer from the environment, or `default` if unset or invalid."""
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        log.debug("Ignoring %s=%r: not an integer", var, raw)
        return default
    return value if value > 0 else default


def get_max_depth() -> int:
    return int_from_env('STACKNT_MAX_DEPTH', DEFAULT_MAX_DEPTH)


def get_history_file() -> Optional[Path]:
    # unset -> default file; set but empty -> history disabled
    raw = os.environ.get('STACKNT_HISTORY')
    if raw is None:
        return Path.home() / _DEFAULT_HISTORY_NAME
    raw = raw.strip()
    return Path(raw).expanduser() if raw else None
