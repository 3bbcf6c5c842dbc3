"""Showdown engine.

This module provides:
- Player: A player id and hand
- parse_player / parse_players: Build players from input lines
- find_winners: Select every player tied for the best hand
- run_showdown: Raw input text to winners in one call
"""

from .players import (
    Player,
    MalformedLineError,
    parse_player,
    parse_players,
    split_input_lines,
)
from .showdown import (
    EmptyInputError,
    ShowdownResult,
    find_winners,
    winner_ids,
    format_winners,
    run_showdown,
)

__all__ = [
    "Player",
    "MalformedLineError",
    "parse_player",
    "parse_players",
    "split_input_lines",
    "EmptyInputError",
    "ShowdownResult",
    "find_winners",
    "winner_ids",
    "format_winners",
    "run_showdown",
]
