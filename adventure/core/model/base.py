"""Data model definitions for the adventure world.

This module only contains pure dataclasses without loading or validation logic.
Rooms are value records: mutable fields (description, items, locked, enemy) are
changed by building a new ``Room`` with ``dataclasses.replace`` and writing it
back into the registry under the same id.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

__all__ = [
    "Room",
    "World",
]

@dataclass(frozen=True)
class Room:
    id: str
    description: str
    items: Tuple[str, ...] = ()
    exits: Dict[str, str] = field(default_factory=dict)
    locked: bool = False
    key_id: Optional[str] = None
    is_dark: bool = False
    enemy: Optional[str] = None

    def exit_names(self) -> List[str]:
        return list(self.exits.keys())

    def is_visible(self, torch_lit: bool) -> bool:
        return not self.is_dark or torch_lit

@dataclass(frozen=True)
class World:
    rooms: Dict[str, Room]
    starting_room_id: str

    def find_room(self, room_id: str) -> Room:
        return self.rooms[room_id]

    def all_rooms(self) -> List[Room]:
        return list(self.rooms.values())
