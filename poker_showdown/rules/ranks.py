"""Card rank definitions and the token codec.

Rank order (high to low): A > K > Q > J > T > 9 > 8 > 7 > 6 > 5 > 4 > 3 > 2

This module provides:
- Rank and suit enums with explicit integer weights
- Card representation
- Token <-> rank/suit tables (one character each, e.g. "T" and "h")
- Parsing errors shared by the rest of the package
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, List, Optional


class Rank(IntEnum):
    """Card ranks. The value is the rank weight, so ACE > KING > ... > TWO."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14  # Highest rank


class Suit(IntEnum):
    """Card suits. Only equality between suits is meaningful."""

    HEARTS = 0
    DIAMONDS = 1
    SPADES = 2
    CLOVERS = 3


# Token for each rank, as it appears in input lines
RANK_TOKENS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "T",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

# Token for each suit
SUIT_TOKENS = {
    Suit.HEARTS: "h",
    Suit.DIAMONDS: "d",
    Suit.SPADES: "s",
    Suit.CLOVERS: "c",
}

# Token to rank/suit mapping (for parsing)
TOKEN_TO_RANK = {v: k for k, v in RANK_TOKENS.items()}
TOKEN_TO_SUIT = {v: k for k, v in SUIT_TOKENS.items()}


class ShowdownError(Exception):
    """Base class for every error raised while reading or scoring hands."""

    pass


class UnknownTokenError(ShowdownError, ValueError):
    """Raised when a character matches no rank or suit.

    Attributes:
        char: The unrecognized character
        kind: "rank" or "suit"
        token: The full card token the character came from, if known
        line_number: 1-based input line number, if known
    """

    def __init__(
        self,
        char: str,
        kind: str,
        token: Optional[str] = None,
        line_number: Optional[int] = None,
    ):
        self.char = char
        self.kind = kind
        self.token = token
        self.line_number = line_number
        message = f"Unknown {kind} character {char!r}"
        if token is not None:
            message += f" in card {token!r}"
        if line_number is not None:
            message += f" on line {line_number}"
        super().__init__(message)


class MalformedCardTokenError(ShowdownError, ValueError):
    """Raised when a card token is not exactly two characters long."""

    def __init__(self, token: str, line_number: Optional[int] = None):
        self.token = token
        self.line_number = line_number
        message = f"Malformed card {token!r}: expected <rank><suit>, e.g. 'Th'"
        if line_number is not None:
            message += f" on line {line_number}"
        super().__init__(message)


def rank_from_token(char: str) -> Rank:
    """Look up the rank for a single token character.

    Raises:
        UnknownTokenError: If the character is not one of 23456789TJQKA
    """
    try:
        return TOKEN_TO_RANK[char]
    except KeyError:
        raise UnknownTokenError(char, "rank") from None


def suit_from_token(char: str) -> Suit:
    """Look up the suit for a single token character.

    Raises:
        UnknownTokenError: If the character is not one of h, d, s, c
    """
    try:
        return TOKEN_TO_SUIT[char]
    except KeyError:
        raise UnknownTokenError(char, "suit") from None


def rank_to_token(rank: Rank) -> str:
    return RANK_TOKENS[rank]


def suit_to_token(suit: Suit) -> str:
    return SUIT_TOKENS[suit]


@dataclass(frozen=True, order=True)
class Card:
    """A playing card with rank and suit.

    Cards are ordered by rank first, then by suit.
    Immutable and hashable for use in sets.
    """

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{RANK_TOKENS[self.rank]}{SUIT_TOKENS[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({self})"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from a two-character token like 'Th' or '2c'."""
        return card_from_token(s)


def card_from_token(token: str) -> Card:
    """Parse a two-character card token.

    Args:
        token: "<rank><suit>", e.g. "Ah"

    Returns:
        Card object

    Raises:
        MalformedCardTokenError: If the token is not exactly two characters
        UnknownTokenError: If either character is not in the token tables
    """
    if len(token) != 2:
        raise MalformedCardTokenError(token)
    try:
        rank = rank_from_token(token[0])
        suit = suit_from_token(token[1])
    except UnknownTokenError as exc:
        raise UnknownTokenError(exc.char, exc.kind, token=token) from None
    return Card(rank=rank, suit=suit)


def get_rank_counts(cards: Iterable[Card]) -> Dict[Rank, int]:
    """Count occurrences of each rank in a list of cards."""
    counts: Dict[Rank, int] = {}
    for card in cards:
        counts[card.rank] = counts.get(card.rank, 0) + 1
    return counts


def create_standard_deck() -> List[Card]:
    """Create a standard 52-card deck (13 ranks x 4 suits)."""
    deck = []
    for rank in Rank:
        for suit in Suit:
            deck.append(Card(rank=rank, suit=suit))
    return deck


def sort_cards(cards: Iterable[Card], descending: bool = False) -> List[Card]:
    """Sort cards by rank only. Cards of equal rank keep their relative order."""
    return sorted(cards, key=lambda card: card.rank, reverse=descending)
