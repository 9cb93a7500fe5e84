from __future__ import annotations

import os


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


# Worker processes used by the estimator when the caller does not say.
DEFAULT_PROCESSES = max(1, _env_int("EXTENSOR_CODING_PROCESSES", 1))
