from __future__ import annotations
import logging
import os
from typing import Optional


LOG_LEVEL_VAR = 'JISP_LOG_LEVEL'
RECURSION_LIMIT_VAR = 'JISP_RECURSION_LIMIT'


def get_log_level() -> Optional[int]:
    """Numeric logging level named by JISP_LOG_LEVEL, or None when unset."""
    raw = os.environ.get(LOG_LEVEL_VAR, '').strip()
    if not raw:
        return None
    level = logging.getLevelName(raw.upper())
    if not isinstance(level, int):
        raise ValueError(f"{LOG_LEVEL_VAR}={raw!r} is not a logging level")
    return level


def get_recursion_limit() -> Optional[int]:
    """Minimum Python recursion limit requested by JISP_RECURSION_LIMIT, or None."""
    raw = os.environ.get(RECURSION_LIMIT_VAR, '').strip()
    if not raw:
        return None
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"{RECURSION_LIMIT_VAR}={raw!r} is not an integer") from None
    if limit <= 0:
        raise ValueError(f"{RECURSION_LIMIT_VAR} must be positive, got {limit}")
    return limit
