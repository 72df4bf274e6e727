"""Paths, constants, and settings resolution."""

import json
import os
from pathlib import Path

# ─────────────────────────────────────────────────────
# Home directory — config and logs live here
# ─────────────────────────────────────────────────────
HOME_DIR = Path(os.environ.get("TOPFORTUNES_HOME", Path.home() / ".topfortunes"))
LOGS_DIR = HOME_DIR / "logs"
CONFIG_FILE = HOME_DIR / "config.json"

# ─────────────────────────────────────────────────────
# Selection + output constants
# ─────────────────────────────────────────────────────
DEFAULT_K = 10000
DEFAULT_STRATEGY = "heap"
WRAP_WIDTH = 78
DELIMITER = "%"
ATTRIBUTION_DASH = "―"  # horizontal bar, as used by fortune(6) attributions

ENV_PREFIX = "TOPFORTUNES_"


# ─────────────────────────────────────────────────────
# Settings resolution — env → config.json → default
# ─────────────────────────────────────────────────────
def load_config() -> dict:
    """Load config.json, or {} when missing or unreadable."""
    if CONFIG_FILE.exists():
        try:
            cfg = json.loads(CONFIG_FILE.read_text())
        except (OSError, ValueError):
            return {}
        if isinstance(cfg, dict):
            return cfg
    return {}


def get_setting(name: str, default=None):
    """Resolve a setting: TOPFORTUNES_<NAME> env var first, then config.json."""
    val = os.environ.get(ENV_PREFIX + name.upper())
    if val:
        return val
    val = load_config().get(name.lower())
    if val is not None and val != "":
        return val
    return default


def default_k() -> int:
    """Configured capacity, falling back to DEFAULT_K on bad values."""
    try:
        k = int(get_setting("k", DEFAULT_K))
    except (TypeError, ValueError):
        return DEFAULT_K
    return k if k >= 1 else DEFAULT_K


def default_strategy() -> str:
    return str(get_setting("strategy", DEFAULT_STRATEGY))
