"""Central configuration for the CLI adventure.

Every tunable value has a sensible default and can be overridden through an
environment variable. Getters read the environment on each call so that a
changed variable takes effect without reimporting the module.
"""
from __future__ import annotations
import os
from pathlib import Path


def _get_bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    val = raw.strip().lower()
    return val in {"1", "true", "yes", "on"}


def _get_str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


# ---------------- World data ----------------
DEFAULT_WORLD_FILE: Path = Path(__file__).resolve().parent / "assets" / "world" / "game.json"
ENV_WORLD_FILE = "ADV_WORLD_FILE"


def get_world_file() -> Path:
    """Path of the world JSON. Var: ADV_WORLD_FILE (default: bundled asset)."""
    return Path(_get_str_env(ENV_WORLD_FILE, str(DEFAULT_WORLD_FILE)))


def get_strict_world() -> bool:
    """Treat dangling exits as a fatal load error. Var: ADV_STRICT_WORLD (default False)."""
    return _get_bool_env("ADV_STRICT_WORLD", False)


# ---------------- Game rules ----------------
DEFAULT_WINNING_ROOM = "freedom"
DEFAULT_GUARDED_DIRECTION = "north"


def get_winning_room_id() -> str:
    """Room id that ends the game with an escape. Var: ADV_WINNING_ROOM."""
    return _get_str_env("ADV_WINNING_ROOM", DEFAULT_WINNING_ROOM)


def get_guarded_direction() -> str:
    """Direction blocked by a locked door or an enemy. Var: ADV_GUARDED_DIRECTION."""
    return _get_str_env("ADV_GUARDED_DIRECTION", DEFAULT_GUARDED_DIRECTION).lower()


# ---------------- CLI ----------------
PROMPT = "> "


def get_log_level() -> str:
    """Logging level name for the CLI. Var: ADV_LOG_LEVEL (default WARNING)."""
    level = _get_str_env("ADV_LOG_LEVEL", "WARNING").upper()
    if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        return "WARNING"
    return level


__all__ = [
    "DEFAULT_WORLD_FILE", "ENV_WORLD_FILE", "get_world_file", "get_strict_world",
    "DEFAULT_WINNING_ROOM", "DEFAULT_GUARDED_DIRECTION",
    "get_winning_room_id", "get_guarded_direction",
    "PROMPT", "get_log_level",
]
