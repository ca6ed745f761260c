"""Command parsing and dispatch.

A command line is lower-cased and split on whitespace: the first token is the
verb, the remaining tokens joined by single spaces form the noun.
"""
from __future__ import annotations
from typing import Any, Callable, Dict, Tuple
from .state import GameState
from .registry import ContentRegistry
from .actions import ActionError, move, take_item, use_item, quit_game

Handler = Callable[[GameState, ContentRegistry, str], Dict[str, Any]]

VERBS: Dict[str, Handler] = {
    "move": move,
    "go": move,
    "take": take_item,
    "grab": take_item,
    "use": use_item,
    "quit": lambda state, registry, _noun: quit_game(state, registry),
    "exit": lambda state, registry, _noun: quit_game(state, registry),
}

def parse_command(text: str) -> Tuple[str, str]:
    parts = text.lower().split()
    if not parts:
        return "", ""
    return parts[0], " ".join(parts[1:])

def process_command(state: GameState, registry: ContentRegistry, text: str) -> Dict[str, Any]:
    verb, noun = parse_command(text)
    if not verb:
        return {"lines": [], "changes": {}}
    handler = VERBS.get(verb)
    if handler is None:
        return {"lines": ["I don't understand."], "changes": {}}
    try:
        return handler(state, registry, noun)
    except ActionError as e:
        return {"lines": [str(e)], "changes": {}}
