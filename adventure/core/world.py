"""Facade for world model & loader.

Re-exports dataclasses and utility build/validate functions from the
internal modules to provide a stable import surface.
"""
from .model.base import (
    World,
    Room,
)
from .loader.world_loader import (
    LoadError,
    build_world_from_dict,
    validate_world,
    load_world_file,
)

__all__ = [
    "World",
    "Room",
    "LoadError",
    "build_world_from_dict",
    "validate_world",
    "load_world_file",
]
