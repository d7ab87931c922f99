"""Environment-derived settings for musclememory runs.

Read at call time so tests (and shells) can change them between runs.
"""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_BACKEND_URL = "http://localhost:3001"
DEFAULT_TIMEOUT_MS = 10_000


def backend_url() -> str:
    """Base URL of the backend under test (BMM_BACKEND_URL)."""
    return os.environ.get("BMM_BACKEND_URL", DEFAULT_BACKEND_URL)


def timeout_ms() -> int:
    """Per-request deadline in milliseconds (BMM_TIMEOUT_MS)."""
    raw = os.environ.get("BMM_TIMEOUT_MS", "")
    try:
        value = int(raw)
    except ValueError:
        return DEFAULT_TIMEOUT_MS
    return value if value > 0 else DEFAULT_TIMEOUT_MS


def results_root() -> Path:
    """Directory holding stored runs (BMM_RESULTS_DIR)."""
    override = os.environ.get("BMM_RESULTS_DIR")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".musclememory" / "results"
