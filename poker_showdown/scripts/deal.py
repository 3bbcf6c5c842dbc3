#!/usr/bin/env python3
"""Deal random hands in the showdown input format.

Shuffles a standard 52-card deck and prints one line per player:

    P1 Kd 7h 2c Ts 9s
    P2 3h Ah Qc 5d 8s

The output can be piped straight into the showdown script.

Usage:
    python -m poker_showdown.scripts.deal --players 4
    python -m poker_showdown.scripts.deal --players 6 --cards 5 --seed 42 | \\
        python -m poker_showdown.scripts.showdown --table
"""

import argparse
import logging
import sys
from typing import List, Optional

from poker_showdown.rules import Card, create_standard_deck
from poker_showdown.utils.seeding import make_rng, resolve_seed

logger = logging.getLogger(__name__)

DECK_SIZE = 52


def deal_hands(
    num_players: int,
    cards_per_player: int = 5,
    seed: Optional[int] = None,
) -> List[List[Card]]:
    """Deal hands from a freshly shuffled deck.

    Args:
        num_players: Number of hands to deal
        cards_per_player: Cards in each hand
        seed: Random seed for the shuffle

    Returns:
        One list of cards per player, no card dealt twice

    Raises:
        ValueError: If the deck cannot cover every hand
    """
    if num_players < 1 or cards_per_player < 1:
        raise ValueError("players and cards must be positive")
    if num_players * cards_per_player > DECK_SIZE:
        raise ValueError(
            f"Cannot deal {cards_per_player} cards to {num_players} players from {DECK_SIZE} cards"
        )

    deck = create_standard_deck()
    rng = make_rng(seed)
    order = rng.permutation(len(deck))

    hands = []
    for p in range(num_players):
        start = p * cards_per_player
        hands.append([deck[int(i)] for i in order[start : start + cards_per_player]])
    return hands


def format_deal(hands: List[List[Card]], prefix: str = "P") -> List[str]:
    """Render dealt hands as input lines, ids P1, P2, ..."""
    return [
        f"{prefix}{i} " + " ".join(str(card) for card in hand)
        for i, hand in enumerate(hands, start=1)
    ]


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Deal random showdown input lines")
    parser.add_argument(
        "--players",
        type=int,
        default=4,
        help="Number of players (default: 4)",
    )
    parser.add_argument(
        "--cards",
        type=int,
        default=5,
        help="Cards per player (default: 5)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (default: None for random)",
    )
    parser.add_argument(
        "--prefix",
        type=str,
        default="P",
        help="Player id prefix (default: P)",
    )
    args = parser.parse_args(argv)

    seed = resolve_seed(args.seed)
    logger.debug("Dealing with seed %d", seed)

    try:
        hands = deal_hands(args.players, args.cards, seed=seed)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for line in format_deal(hands, prefix=args.prefix):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
