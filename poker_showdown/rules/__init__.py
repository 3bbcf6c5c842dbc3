"""Poker rules implementations.

This module provides:
- Card and rank definitions, token codec (ranks.py)
- Hand classification and comparison (hands.py)
"""

from .ranks import (
    Rank,
    Suit,
    Card,
    RANK_TOKENS,
    SUIT_TOKENS,
    ShowdownError,
    UnknownTokenError,
    MalformedCardTokenError,
    rank_from_token,
    suit_from_token,
    rank_to_token,
    suit_to_token,
    card_from_token,
    get_rank_counts,
    create_standard_deck,
    sort_cards,
)

from .hands import (
    HandCategory,
    Hand,
    TieBreak,
    CATEGORY_NAMES,
    LOW_STRAIGHT_RANKS,
    compare_hands,
    hand_sort_key,
    describe_hand,
    make_hand,
    make_hand_from_string,
)

__all__ = [
    # Ranks
    "Rank",
    "Suit",
    "Card",
    "RANK_TOKENS",
    "SUIT_TOKENS",
    "ShowdownError",
    "UnknownTokenError",
    "MalformedCardTokenError",
    "rank_from_token",
    "suit_from_token",
    "rank_to_token",
    "suit_to_token",
    "card_from_token",
    "get_rank_counts",
    "create_standard_deck",
    "sort_cards",
    # Hands
    "HandCategory",
    "Hand",
    "TieBreak",
    "CATEGORY_NAMES",
    "LOW_STRAIGHT_RANKS",
    "compare_hands",
    "hand_sort_key",
    "describe_hand",
    "make_hand",
    "make_hand_from_string",
]
