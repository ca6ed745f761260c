"""Runtime registry for loaded content.

Holds the room-id -> Room mapping for the whole session. The loaded ``World``
stays untouched; the registry keeps its own copy of the mapping and is the only
place where a room value gets replaced.
"""
from __future__ import annotations
from typing import Dict, Optional
from .world import World, Room

class ContentRegistry:
    def __init__(self, world: World):
        self.world = world
        self.rooms: Dict[str, Room] = world.rooms.copy()

    def get_room(self, room_id: str) -> Optional[Room]:
        return self.rooms.get(room_id)

    def save_room(self, room: Room) -> None:
        # The set of rooms is fixed at load time
        if room.id not in self.rooms:
            raise KeyError(f"Unknown room: {room.id}")
        self.rooms[room.id] = room
