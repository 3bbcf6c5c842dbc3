"""Winner selection.

A player wins when no other hand beats theirs, so a showdown can have
several winners. Winners are reported in input order.
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence

from poker_showdown.rules import (
    ShowdownError,
    TieBreak,
    compare_hands,
    describe_hand,
)

from .players import Player, parse_players, split_input_lines

logger = logging.getLogger(__name__)


class EmptyInputError(ShowdownError):
    """Raised when a showdown is run with no players."""

    def __init__(self, message: str = "No players to compare"):
        super().__init__(message)


def find_winners(players: Sequence[Player], tie_break: TieBreak = TieBreak.KICKER) -> List[Player]:
    """Return every player whose hand no other hand beats.

    Args:
        players: Players in input order
        tie_break: How hands with equal scores are ordered

    Returns:
        Winning players, in input order

    Raises:
        EmptyInputError: If players is empty
    """
    if not players:
        raise EmptyInputError()

    # A hand that runs out of cards compares equal, which is not transitive
    # across lengths. Strictly beating is, so the unbeaten set is never empty.
    winners = [
        p
        for p in players
        if all(compare_hands(p.hand, other.hand, tie_break) >= 0 for other in players)
    ]

    best = winners[0]
    logger.debug(
        "Winning hand %s (%s, score %d); %d of %d players tied",
        best.hand,
        describe_hand(best.hand),
        best.hand.score,
        len(winners),
        len(players),
    )
    return winners


def winner_ids(players: Sequence[Player], tie_break: TieBreak = TieBreak.KICKER) -> List[str]:
    return [p.player_id for p in find_winners(players, tie_break)]


def format_winners(winners: Sequence[Player]) -> str:
    """Output line: winning ids separated by single spaces."""
    return " ".join(p.player_id for p in winners)


@dataclass
class ShowdownResult:
    """Outcome of one showdown.

    Attributes:
        players: All players, in input order
        winners: Winning players, in input order
        tie_break: Tie-break mode used
    """

    players: List[Player]
    winners: List[Player]
    tie_break: TieBreak = TieBreak.KICKER

    def is_winner(self, player: Player) -> bool:
        # Identity, not equality: two lines may hold the same id and cards
        return any(winner is player for winner in self.winners)

    @property
    def output_line(self) -> str:
        return format_winners(self.winners)


def run_showdown(text: str, tie_break: TieBreak = TieBreak.KICKER) -> ShowdownResult:
    """Parse raw input text and pick the winners.

    Raises:
        ShowdownError: On any malformed line, or if the input has no players
    """
    players = parse_players(split_input_lines(text))
    winners = find_winners(players, tie_break)
    return ShowdownResult(players=players, winners=winners, tie_break=tie_break)
