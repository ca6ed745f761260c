"""Core player actions: status(), move(), take_item(), use_item(), quit_game().

Returns ActionResult dicts with keys:
- lines: List[str] narrative lines to display
- changes: dict summarizing state changes

A rejected action raises ActionError carrying the single line to show the
player; the caller reports it and the game state is left as it was.
"""
from __future__ import annotations
import logging
from dataclasses import replace
from typing import Any, Callable, Dict, List
from .state import GameState
from .registry import ContentRegistry
from .world import Room
from config import get_winning_room_id, get_guarded_direction

SEPARATOR = "-" * 48
HELP_LINE = "Commands: move [dir], take [item], use [item], quit"

UNLOCKED_CELL_DESCRIPTION = "You are in a cell. The door north is unlocked."
CLEARED_GATE_DESCRIPTION = "You are at the main gate. A dead goblin lies on the floor."

class ActionError(Exception):
    pass

def _result(lines: List[str] | None = None, **changes: Any) -> Dict[str, Any]:
    return {"lines": list(lines or []), "changes": changes}

def _current_room(state: GameState, registry: ContentRegistry) -> Room | None:
    room = registry.get_room(state.current_room_id)
    if room is None:
        logging.warning(f"Current room missing from registry: {state.current_room_id}")
    return room

def is_winning_room(room_id: str) -> bool:
    return room_id == get_winning_room_id()

def status(state: GameState, registry: ContentRegistry) -> Dict[str, Any]:
    room = _current_room(state, registry)
    if room is None:
        return _result()
    lines: List[str] = ["", SEPARATOR]
    # Darkness hides everything about the room except its exits
    if not room.is_visible(state.torch_lit):
        lines.append("It is pitch black! You can't see anything.")
    else:
        lines.append(room.description)
        if room.enemy is not None:
            lines.append(f"DANGER: A {room.enemy} is watching you!")
        if room.items:
            lines.append(f"You see: {', '.join(room.items)}")
    lines.append(SEPARATOR)
    lines.append(f"Exits: {', '.join(room.exit_names())}")
    lines.append(f"Inventory: {', '.join(state.inventory)}")
    lines.append(HELP_LINE)
    return _result(lines)

def move(state: GameState, registry: ContentRegistry, direction: str) -> Dict[str, Any]:
    direction = direction.lower().strip()
    current = _current_room(state, registry)
    if current is None:
        return _result()
    target_id = current.exits.get(direction)
    if target_id is None:
        raise ActionError("You can't go that way.")
    target = registry.get_room(target_id)
    if target is None:
        logging.warning(f"Exit '{direction}' from '{current.id}' points to missing room '{target_id}'")
        return _result()
    if direction == get_guarded_direction():
        # Lock is checked before the enemy
        if current.locked:
            raise ActionError("The door is locked. You need to use a key first.")
        if current.enemy is not None:
            raise ActionError(f"The {current.enemy} blocks your path! You cannot pass.")
    if not target.is_visible(state.torch_lit):
        raise ActionError("It is too dark to go in there! You need to use a light source.")
    state.current_room_id = target.id
    logging.debug(f"Moved {direction}: {current.id} -> {target.id}")
    lines: List[str] = []
    escaped = is_winning_room(target.id)
    if escaped:
        lines.extend(["", "*** YOU HAVE ESCAPED! ***"])
        state.playing = False
    return _result(lines, location=target.id, escaped=escaped)

def take_item(state: GameState, registry: ContentRegistry, item_name: str) -> Dict[str, Any]:
    room = _current_room(state, registry)
    if room is None:
        return _result()
    if not room.is_visible(state.torch_lit):
        raise ActionError("It's too dark to find anything!")
    if item_name not in room.items:
        raise ActionError(f"No {item_name} here.")
    items = list(room.items)
    items.remove(item_name)  # first occurrence only
    registry.save_room(replace(room, items=tuple(items)))
    state.inventory.append(item_name)
    logging.debug(f"Picked up {item_name} in {room.id}")
    return _result([f"Picked up {item_name}."], taken=item_name)

# --- Item use handlers (closed table, keyed by item id) ---

def _use_rusty_key(state: GameState, registry: ContentRegistry, room: Room) -> Dict[str, Any]:
    if not (room.locked and room.key_id == "rusty_key"):
        raise ActionError("You can't use that here.")
    registry.save_room(replace(room, locked=False, description=UNLOCKED_CELL_DESCRIPTION))
    return _result(
        ["You insert the rusty key into the lock... CLICK! The door opens."],
        unlocked=room.id,
    )

def _use_torch(state: GameState, registry: ContentRegistry, room: Room) -> Dict[str, Any]:
    if state.torch_lit:
        return _result(["The torch is already lit."])
    state.torch_lit = True
    return _result(
        ["You strike a flint. The torch flares to life! You can see now."],
        torch_lit=True,
    )

def _use_sword(state: GameState, registry: ContentRegistry, room: Room) -> Dict[str, Any]:
    enemy = room.enemy
    if enemy is None:
        return _result(["You swing your sword at the air. Whoosh!"])
    registry.save_room(replace(room, enemy=None, description=CLEARED_GATE_DESCRIPTION))
    return _result(
        [
            f"You swing the sword at the {enemy}...",
            f"It's a direct hit! The {enemy} falls to the ground, defeated.",
        ],
        defeated=enemy,
    )

ITEM_HANDLERS: Dict[str, Callable[[GameState, ContentRegistry, Room], Dict[str, Any]]] = {
    "rusty_key": _use_rusty_key,
    "torch": _use_torch,
    "sword": _use_sword,
}

def use_item(state: GameState, registry: ContentRegistry, item_name: str) -> Dict[str, Any]:
    """Use an item from the inventory. Items are never consumed."""
    if not state.has_item(item_name):
        raise ActionError(f"You don't have a {item_name}.")
    room = _current_room(state, registry)
    if room is None:
        return _result()
    handler = ITEM_HANDLERS.get(item_name)
    if handler is None:
        raise ActionError(f"You can't use the {item_name}.")
    res = handler(state, registry, room)
    logging.debug(f"Used {item_name} in {room.id}: {res['changes']}")
    return res

def quit_game(state: GameState, registry: ContentRegistry) -> Dict[str, Any]:
    state.playing = False
    return _result(quit=True)
