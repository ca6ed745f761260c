"""JSON schema definition for world data files.

Mirrors the on-disk format: camelCase keys, one record per room plus the id of
the room the player starts in.
"""

ROOM_SCHEMA = {
    "type": "object",
    "required": ["id", "description", "items", "exits", "locked", "isDark"],
    "properties": {
        "id": {"type": "string", "minLength": 1},
        "description": {"type": "string"},
        "items": {"type": "array", "items": {"type": "string"}},
        "exits": {"type": "object", "additionalProperties": {"type": "string"}},
        "locked": {"type": "boolean"},
        "keyId": {"type": ["string", "null"]},
        "isDark": {"type": "boolean"},
        "enemy": {"type": ["string", "null"]},
    },
    "additionalProperties": False
}

WORLD_SCHEMA = {
    "type": "object",
    "required": ["rooms", "startingRoomId"],
    "properties": {
        "rooms": {"type": "array", "items": ROOM_SCHEMA},
        "startingRoomId": {"type": "string", "minLength": 1},
    },
    "additionalProperties": False
}
