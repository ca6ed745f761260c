import pytest
from adventure.core.loader.world_loader import build_world_from_dict
from adventure.core.registry import ContentRegistry
from adventure.core.state import GameState

# Mini world builder for isolated logic tests

def build_mini_world():
    data = {
        "startingRoomId": "cell",
        "rooms": [
            {
                "id": "cell",
                "description": "A locked cell.",
                "items": ["rusty_key", "sword"],
                "exits": {"north": "hallway", "east": "cellar", "west": "nowhere"},
                "locked": True,
                "keyId": "rusty_key",
                "isDark": False,
                "enemy": None,
            },
            {
                "id": "hallway",
                "description": "A bare hallway.",
                "items": ["torch", "coin", "coin"],
                "exits": {"south": "cell", "north": "gate"},
                "locked": False,
                "isDark": False,
            },
            {
                "id": "cellar",
                "description": "A damp cellar.",
                "items": ["bone"],
                "exits": {"west": "cell"},
                "locked": False,
                "isDark": True,
                "enemy": "rat",
            },
            {
                "id": "gate",
                "description": "The main gate.",
                "items": [],
                "exits": {"south": "hallway", "north": "freedom", "east": "yard"},
                "locked": False,
                "isDark": False,
                "enemy": "goblin",
            },
            {
                "id": "yard",
                "description": "An empty yard.",
                "items": [],
                "exits": {"west": "gate"},
                "locked": False,
                "isDark": False,
            },
            {
                "id": "freedom",
                "description": "Open fields.",
                "items": [],
                "exits": {},
                "locked": False,
                "isDark": False,
            },
        ],
    }
    world = build_world_from_dict(data)
    registry = ContentRegistry(world)
    state = GameState(current_room_id=world.starting_room_id)
    return registry, state

@pytest.fixture()
def mini():
    return build_mini_world()
