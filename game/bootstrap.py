"""Bootstrap utilities: load world JSON and create initial GameState + registry."""
from __future__ import annotations
from pathlib import Path
from adventure.core.world import load_world_file
from adventure.core.registry import ContentRegistry
from adventure.core.state import GameState
from config import get_world_file, get_strict_world

def load_world_and_state(world_file: str | Path | None = None) -> tuple[ContentRegistry, GameState]:
    """Raises LoadError when the world cannot be loaded."""
    path = Path(world_file) if world_file is not None else get_world_file()
    world = load_world_file(path, strict=get_strict_world())
    registry = ContentRegistry(world)
    state = GameState(current_room_id=world.starting_room_id)
    return registry, state
