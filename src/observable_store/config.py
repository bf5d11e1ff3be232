"""Environment-driven defaults for observable_store."""

from __future__ import annotations

import os

LOG_ENV_VAR = "OBSERVABLE_STORE_LOG"


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def default_log() -> bool:
    """Initial log flag for the default store, from OBSERVABLE_STORE_LOG."""
    return _env_bool(os.environ.get(LOG_ENV_VAR), False)
