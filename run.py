"""Minimal CLI loop for the adventure.

Usage (example):
    python run.py [path/to/game.json]
Then type commands:
    take rusty_key
    use rusty_key
    go north
"""
from __future__ import annotations
import logging
import sys
from game.bootstrap import load_world_and_state
from adventure.core.actions import status
from adventure.core.commands import process_command
from adventure.core.world import LoadError
from config import PROMPT, get_log_level

def _print_lines(lines):
    for line in lines:
        print(line)

def game_loop(world_file: str | None = None) -> int:
    try:
        registry, state = load_world_and_state(world_file)
    except LoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print("--- Assets Loaded ---")
    print("Welcome to the CLI Adventure.")
    while state.playing:
        _print_lines(status(state, registry)["lines"])
        try:
            cmd = input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            # No more input: leave as if the player typed quit
            print()
            state.playing = False
            break
        res = process_command(state, registry, cmd)
        _print_lines(res["lines"])
    return 0

def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    return game_loop(argv[0] if argv else None)

if __name__ == "__main__":
    sys.exit(main())
