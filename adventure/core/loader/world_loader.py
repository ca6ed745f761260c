"""World loading and validation utilities.

Separates construction logic from raw JSON (dict) into model dataclasses.
``load_world_file`` is the only function here that touches the disk; every
problem that prevents a playable world is reported as ``LoadError``.
"""
from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Dict, Any, List
import jsonschema
from ..model.base import Room, World
from .schema import WORLD_SCHEMA

__all__ = ["LoadError", "build_world_from_dict", "validate_world", "load_world_file"]

class LoadError(Exception):
    """The world data source is missing or malformed."""

def build_world_from_dict(data: Dict[str, Any]) -> World:
    try:
        jsonschema.validate(data, WORLD_SCHEMA)
    except jsonschema.ValidationError as e:
        where = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise LoadError(f"Invalid world data at {where}: {e.message}") from e
    rooms: Dict[str, Room] = {}
    for r in data["rooms"]:
        room = Room(
            id=r["id"],
            description=r["description"],
            items=tuple(r["items"]),
            exits=dict(r["exits"]),
            locked=r["locked"],
            key_id=r.get("keyId"),
            is_dark=r["isDark"],
            enemy=r.get("enemy"),
        )
        if room.id in rooms:
            raise LoadError(f"Duplicate room id '{room.id}'")
        rooms[room.id] = room
    start = data["startingRoomId"]
    if start not in rooms:
        raise LoadError(f"Starting room '{start}' is not defined")
    return World(rooms=rooms, starting_room_id=start)

def validate_world(world: World) -> List[str]:
    issues: List[str] = []
    for room in world.rooms.values():
        for direction, target in room.exits.items():
            if not direction.strip():
                issues.append(f"Room '{room.id}' has exit with empty direction")
            if target not in world.rooms:
                issues.append(
                    f"Exit '{direction}' from '{room.id}' points to missing room '{target}'"
                )
    return issues

def load_world_file(path: str | Path, strict: bool = False) -> World:
    """Read, decode and build the world stored at ``path``.

    Referential issues found by ``validate_world`` are logged as warnings; with
    ``strict`` they abort the load instead.
    """
    path = Path(path)
    if not path.is_file():
        raise LoadError(f"{path.name} not found.")
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise LoadError(f"Error parsing JSON: {e}") from e
    except OSError as e:
        raise LoadError(f"Cannot read {path}: {e}") from e
    world = build_world_from_dict(data)
    issues = validate_world(world)
    for issue in issues:
        logging.warning(f"[WORLD WARNING] {issue}")
    if issues and strict:
        raise LoadError(f"World has {len(issues)} integrity issue(s): {issues[0]}")
    logging.info(f"Loaded {len(world.rooms)} rooms from {path}")
    return world
