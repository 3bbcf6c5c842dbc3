"""Hand classification and comparison.

Hand categories (score in parentheses), checked in this order:
- Straight flush (5): straight and flush
- Three of a kind (4): some rank appears exactly 3 times
- Straight (3): A, 2 and 3 all present, or every rank consecutive
- Flush (2): all cards share one suit
- Pair (1): some rank appears exactly 2 times
- High card (0): none of the above

The first category that matches decides the score. There is no two pair,
full house or four of a kind: four cards of one rank is neither a pair nor
three of a kind.

Comparison rules:
- Higher score wins
- Equal scores: walk both hands' ranks from highest to lowest, first
  difference decides (see TieBreak for the legacy behaviour)
"""

import functools
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable, Iterable, List, Tuple

from .ranks import (
    Card,
    Rank,
    get_rank_counts,
    sort_cards,
)


class HandCategory(IntEnum):
    """Scoring categories. The value is the hand's score."""

    HIGH_CARD = 0
    PAIR = 1
    FLUSH = 2
    STRAIGHT = 3
    THREE_OF_A_KIND = 4
    STRAIGHT_FLUSH = 5


CATEGORY_NAMES = {
    HandCategory.HIGH_CARD: "high card",
    HandCategory.PAIR: "pair",
    HandCategory.FLUSH: "flush",
    HandCategory.STRAIGHT: "straight",
    HandCategory.THREE_OF_A_KIND: "three of a kind",
    HandCategory.STRAIGHT_FLUSH: "straight flush",
}

# Ranks that make a straight on their own, whatever the other cards are
LOW_STRAIGHT_RANKS = (Rank.ACE, Rank.TWO, Rank.THREE)


class TieBreak(str, Enum):
    """How hands with equal scores are ordered.

    KICKER compares one hand's ranks (high to low) against the other's.
    LEGACY compares a hand's ranks against its own, so any two hands with
    equal scores are equal. It exists to reproduce old results.
    """

    KICKER = "kicker"
    LEGACY = "legacy"


@dataclass(frozen=True)
class Hand:
    """A player's cards in input order.

    All category flags and the score are derived on access; the hand is
    never mutated after construction.

    Attributes:
        cards: Tuple of cards, in the order they were dealt or read
    """

    cards: Tuple[Card, ...] = ()

    def __len__(self) -> int:
        return len(self.cards)

    def __str__(self) -> str:
        return " ".join(str(c) for c in self.cards)

    def has_rank(self, rank: Rank) -> bool:
        return any(card.rank == rank for card in self.cards)

    def matches_rank_count(self, count: int) -> bool:
        """True if some rank appears exactly `count` times."""
        return any(n == count for n in get_rank_counts(self.cards).values())

    @property
    def is_pair(self) -> bool:
        return self.matches_rank_count(2)

    @property
    def is_three_of_kind(self) -> bool:
        return self.matches_rank_count(3)

    @property
    def is_flush(self) -> bool:
        # Zero or one card counts as a flush
        return len({card.suit for card in self.cards}) <= 1

    @property
    def is_straight(self) -> bool:
        """Straight check.

        A hand holding an ace, a two and a three is always a straight, no
        matter what else it holds. Otherwise the ranks sorted ascending must
        step up by exactly one, which rules out duplicates and gaps.
        """
        if not self.cards:
            return False

        if all(self.has_rank(rank) for rank in LOW_STRAIGHT_RANKS):
            return True

        ranks = [card.rank for card in sort_cards(self.cards)]
        for i in range(1, len(ranks)):
            if int(ranks[i]) - int(ranks[i - 1]) != 1:
                return False
        return True

    @property
    def is_straight_flush(self) -> bool:
        return self.is_straight and self.is_flush

    @property
    def category(self) -> HandCategory:
        if self.is_straight_flush:
            return HandCategory.STRAIGHT_FLUSH
        elif self.is_three_of_kind:
            return HandCategory.THREE_OF_A_KIND
        elif self.is_straight:
            return HandCategory.STRAIGHT
        elif self.is_flush:
            return HandCategory.FLUSH
        elif self.is_pair:
            return HandCategory.PAIR
        return HandCategory.HIGH_CARD

    @property
    def score(self) -> int:
        """Score in 0..5; see HandCategory."""
        return int(self.category)

    def ranks_descending(self) -> List[Rank]:
        return [card.rank for card in sort_cards(self.cards, descending=True)]


def make_hand(cards: Iterable[Card]) -> Hand:
    return Hand(cards=tuple(cards))


def make_hand_from_string(s: str) -> Hand:
    """Build a hand from a string like "2h 3h 4h 5h 6h"."""
    return make_hand(Card.from_string(token) for token in s.split())


def describe_hand(hand: Hand) -> str:
    """Human-readable category name, e.g. "three of a kind"."""
    return CATEGORY_NAMES[hand.category]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def compare_hands(hand1: Hand, hand2: Hand, tie_break: TieBreak = TieBreak.KICKER) -> int:
    """Compare two hands.

    Args:
        hand1: First hand
        hand2: Second hand
        tie_break: How to order hands with equal scores

    Returns:
        1 if hand1 > hand2
        -1 if hand1 < hand2
        0 if equal

    Note:
        The rank walk stops at the end of the shorter hand. Running out of
        cards without a difference means the hands are equal.
    """
    score_diff = hand1.score - hand2.score
    if score_diff != 0:
        return _sign(score_diff)

    ranks = hand1.ranks_descending()
    if tie_break == TieBreak.LEGACY:
        other_ranks = hand1.ranks_descending()
    else:
        other_ranks = hand2.ranks_descending()

    for rank, other_rank in zip(ranks, other_ranks):
        if rank != other_rank:
            return _sign(int(rank) - int(other_rank))
    return 0


def hand_sort_key(tie_break: TieBreak = TieBreak.KICKER) -> Callable[[Hand], object]:
    """Key function for sorted()/max() over hands."""
    return functools.cmp_to_key(functools.partial(compare_hands, tie_break=tie_break))
