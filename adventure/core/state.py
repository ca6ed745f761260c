"""Game state container for runtime mutable data.

Separated from static world definition. Created once per session and discarded
at exit; there is no save/reload.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

@dataclass
class GameState:
    current_room_id: str
    inventory: List[str] = field(default_factory=list)  # acquisition order
    # Global light source: affects darkness checks in every room once set
    torch_lit: bool = False
    playing: bool = True

    def has_item(self, item_id: str) -> bool:
        return item_id in self.inventory
