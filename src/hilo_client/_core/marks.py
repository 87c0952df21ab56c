# Area: Core
# PRD: docs/prd-hilo-client.md
"""
hilo_client._core.marks — Live mark formatters
==============================================

Each game variant publishes a different "live mark" and reads it from a
different contract function. A formatter knows which contract it talks
to, which function holds the mark and how to describe the raw value.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Type

SUITS = ["Clubs", "Diamonds", "Hearts", "Spades"]
RANKS = [
    "Ace", "2", "3", "4", "5", "6", "7",
    "8", "9", "10", "Jack", "Queen", "King",
]

# The dice contract stores the sum of two dice offset by the minimum roll
DICE_MIN_SUM = 2


class MarkFormatter(ABC):
    """Describes a variant's live mark for display."""

    variant: str = ""
    contract_name: str = ""
    mark_function: str = ""
    label: str = ""

    @abstractmethod
    def describe(self, raw: Any) -> str:
        """Return a human-readable description of the raw mark value."""
        ...


class CardMarkFormatter(MarkFormatter):
    """Mark is the live card, read as a (suit, rank) pair."""

    variant = "cards"
    contract_name = "HiLoCards"
    mark_function = "latestCard"
    label = "Live card"

    def describe(self, raw: Any) -> str:
        suit_index, rank_index = int(raw[0]), int(raw[1])
        if not 0 <= suit_index < len(SUITS) or not 0 <= rank_index < len(RANKS):
            raise ValueError(f"Not a card: suit={suit_index}, rank={rank_index}")
        return f"{SUITS[suit_index]}-{RANKS[rank_index]}"


class DiceMarkFormatter(MarkFormatter):
    """Mark is the live dice sum."""

    variant = "dice"
    contract_name = "HiLoDice"
    mark_function = "latestMark"
    label = "Live dice sum"

    def describe(self, raw: Any) -> str:
        return str(int(raw) + DICE_MIN_SUM)


MARK_FORMATTERS: Dict[str, Type[MarkFormatter]] = {
    CardMarkFormatter.variant: CardMarkFormatter,
    DiceMarkFormatter.variant: DiceMarkFormatter,
}


def get_mark_formatter(variant: str) -> MarkFormatter:
    """
    Build the formatter for a game variant.

    Raises:
        ValueError: If the variant is unknown
    """
    try:
        return MARK_FORMATTERS[variant]()
    except KeyError:
        known = ", ".join(sorted(MARK_FORMATTERS))
        raise ValueError(f"Unknown game variant '{variant}' (expected one of: {known})") from None
