# src/avalanche_mancala/io/settings.py
import logging
import os
from typing import Dict, Optional

from avalanche_mancala.engine.board import DEFAULT_MAX_LAPS
from avalanche_mancala.engine.errors import ConfigurationError

# ---------------------------------------------------------------------
# Config (environment)
# ---------------------------------------------------------------------
ENV_CHAIN_FREE_TURNS = "MANCALA_CHAIN_FREE_TURNS"
ENV_MAX_CLONE_DEPTH  = "MANCALA_MAX_CLONE_DEPTH"
ENV_MAX_LAPS         = "MANCALA_MAX_LAPS"
ENV_LOG_LEVEL        = "MANCALA_LOG_LEVEL"

_TRUE  = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}

# ---------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------
def _flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    raw = raw.strip().lower()
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")

def _optional_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip().lower() in ("", "none"):
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ConfigurationError(f"{name} must be non-negative, got {value}")
    return value

# ---------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------
def board_options() -> Dict:
    """Keyword arguments for Board() taken from the environment."""
    return {
        "chain_free_turns": _flag(ENV_CHAIN_FREE_TURNS, False),
        "max_clone_depth":  _optional_int(ENV_MAX_CLONE_DEPTH, None),
        "max_laps":         _optional_int(ENV_MAX_LAPS, DEFAULT_MAX_LAPS),
    }

def configure_logging(level: Optional[str] = None) -> None:
    level = (level or os.getenv(ENV_LOG_LEVEL, "WARNING")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
