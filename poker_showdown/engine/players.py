"""Input line parsing and player construction.

Input format, one player per line:

    <id> <card1> <card2> ... <cardN>

Tokens are separated by any whitespace. The id is taken as-is, even when it
looks like a card. Every other token must be a two-character card token.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional

from poker_showdown.rules import (
    Hand,
    MalformedCardTokenError,
    ShowdownError,
    UnknownTokenError,
    card_from_token,
    make_hand,
)

logger = logging.getLogger(__name__)

_LINE_SEPARATORS = re.compile(r"[\r\n]")


class MalformedLineError(ShowdownError, ValueError):
    """Raised when a line has no player id at all."""

    def __init__(self, line: str, line_number: Optional[int] = None):
        self.line = line
        self.line_number = line_number
        message = f"Missing player id in line {line!r}"
        if line_number is not None:
            message += f" (line {line_number})"
        super().__init__(message)


@dataclass(frozen=True)
class Player:
    """A player id and the hand read for it.

    Attributes:
        player_id: Identifier reported when the player wins (not unique-checked)
        hand: The player's hand
    """

    player_id: str
    hand: Hand

    def __str__(self) -> str:
        return f"{self.player_id} {self.hand}".rstrip()


def parse_player(line: str, line_number: Optional[int] = None) -> Player:
    """Parse one input line into a Player.

    Args:
        line: Raw line, e.g. "P1 2h 3h 4h 5h 6h"
        line_number: 1-based position in the input, used in error messages

    Returns:
        Player with cards in token order

    Raises:
        MalformedLineError: If the line holds no tokens
        MalformedCardTokenError: If a card token is not two characters
        UnknownTokenError: If a card token has an unknown rank or suit
    """
    tokens = line.split()
    if not tokens:
        raise MalformedLineError(line, line_number)

    player_id, card_tokens = tokens[0], tokens[1:]
    cards = []
    for token in card_tokens:
        try:
            cards.append(card_from_token(token))
        except MalformedCardTokenError:
            raise MalformedCardTokenError(token, line_number) from None
        except UnknownTokenError as exc:
            raise UnknownTokenError(
                exc.char, exc.kind, token=token, line_number=line_number
            ) from None

    return Player(player_id=player_id, hand=make_hand(cards))


def split_input_lines(text: str) -> List[str]:
    """Split raw input on CR/LF, dropping empty lines."""
    return [line for line in _LINE_SEPARATORS.split(text) if line]


def parse_players(lines: Iterable[str]) -> List[Player]:
    """Parse every line, stopping at the first bad one."""
    players = []
    for line_number, line in enumerate(lines, start=1):
        player = parse_player(line, line_number)
        logger.debug("Line %d: player %s holds %s", line_number, player.player_id, player.hand)
        players.append(player)
    return players
