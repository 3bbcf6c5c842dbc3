"""Poker Showdown - pick the winning hands from a table of players.

Reads one player per line, scores each hand under a five-category scheme
and reports every player tied for the best hand.
"""

__version__ = "0.1.0"
__author__ = "Poker Showdown Team"

from poker_showdown.utils.seeding import make_rng, resolve_seed

__all__ = ["__version__", "make_rng", "resolve_seed"]
