#!/usr/bin/env python3
"""Read one player per line and print the winning player ids.

Input (stdin by default), one player per line:

    P1 2h 3h 4h 5h 6h
    P2 Ah Ad As Ac Kh

Output, a single line on stdout:

    P1

Any malformed line aborts the run with exit status 1 and a message naming
the line and token; nothing is printed to stdout in that case.

Usage:
    python -m poker_showdown.scripts.showdown < hands.txt
    python -m poker_showdown.scripts.showdown --input hands.txt --table
    python -m poker_showdown.scripts.showdown --tie-break legacy --verbose
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from poker_showdown.engine import ShowdownResult, run_showdown
from poker_showdown.rules import HandCategory, ShowdownError, TieBreak, describe_hand

logger = logging.getLogger(__name__)

# Category colours for the --table view
CATEGORY_STYLES = {
    HandCategory.HIGH_CARD: "white",
    HandCategory.PAIR: "cyan1",
    HandCategory.FLUSH: "green1",
    HandCategory.STRAIGHT: "yellow1",
    HandCategory.THREE_OF_A_KIND: "magenta",
    HandCategory.STRAIGHT_FLUSH: "bold red1",
}


@dataclass
class ShowdownConfig:
    """Command-line configuration."""

    # Input
    input_path: Optional[str] = None  # None reads stdin

    # Scoring
    tie_break: TieBreak = TieBreak.KICKER

    # Display
    show_table: bool = False
    verbose: bool = False


def setup_logging(verbose: bool, console: Console) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def read_input(config: ShowdownConfig) -> str:
    if config.input_path is None:
        return sys.stdin.read()
    return Path(config.input_path).read_text(encoding="utf-8")


def render_table(result: ShowdownResult) -> Table:
    """Build a rich table with one row per player."""
    table = Table(title=f"Showdown (tie-break: {result.tie_break.value})")
    table.add_column("Player", style="bold")
    table.add_column("Cards")
    table.add_column("Hand")
    table.add_column("Score", justify="right")
    table.add_column("Winner", justify="center")

    for player in result.players:
        hand = player.hand
        style = CATEGORY_STYLES[hand.category]
        table.add_row(
            player.player_id,
            str(hand),
            f"[{style}]{describe_hand(hand)}[/{style}]",
            str(hand.score),
            "*" if result.is_winner(player) else "",
        )
    return table


def run(config: ShowdownConfig, console: Optional[Console] = None) -> int:
    """Run one showdown and print the winners.

    Returns:
        Process exit status
    """
    console = console or Console(stderr=True)

    try:
        text = read_input(config)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Cannot read input %s: %s", config.input_path, exc)
        return 1

    try:
        result = run_showdown(text, config.tie_break)
    except ShowdownError as exc:
        logger.error("%s", exc)
        return 1

    if config.show_table:
        console.print(render_table(result))

    print(result.output_line)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Print the winning players of a poker showdown")
    parser.add_argument(
        "--input",
        type=str,
        default=None,
        help="Read players from this file instead of stdin",
    )
    parser.add_argument(
        "--tie-break",
        choices=[mode.value for mode in TieBreak],
        default=TieBreak.KICKER.value,
        help="How to order hands with equal scores (default: kicker)",
    )
    parser.add_argument(
        "--table",
        action="store_true",
        help="Show every player's hand and score on stderr",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log parsing and scoring details",
    )
    args = parser.parse_args(argv)

    config = ShowdownConfig(
        input_path=args.input,
        tie_break=TieBreak(args.tie_break),
        show_table=args.table,
        verbose=args.verbose,
    )

    console = Console(stderr=True)
    setup_logging(config.verbose, console)
    return run(config, console)


if __name__ == "__main__":
    sys.exit(main())
