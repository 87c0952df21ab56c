"""
hilo_client.types — Value types shared across the client
=========================================================

Immutable value objects that flow between the round handler, the
commitment codec and the ledger:

    Bet           the operator's wager for one round
    Commitment    the concealed digest of a Bet
    PlayerSeat    one of the two fixed player seats
    GameOutcome   the terminal result of a game
    Snapshot      balances and live mark for display
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


# Static index -> label mapping for the two seats
SEAT_LABELS: Tuple[str, str] = ("Alice", "Bob")


class Direction(Enum):
    """Which way the operator wagers the next mark will move."""
    HIGHER = "H"
    LOWER = "L"

    @property
    def is_higher(self) -> bool:
        """Boolean form used by the contract (true = higher)."""
        return self is Direction.HIGHER


@dataclass(frozen=True)
class Bet:
    """A chip amount wagered on a direction."""
    amount: int
    direction: Direction


@dataclass(frozen=True)
class Commitment:
    """Keccak-256 digest of an encoded Bet."""
    digest: bytes

    def as_uint256(self) -> int:
        return int.from_bytes(self.digest, "big")

    def hex(self) -> str:
        return "0x" + self.digest.hex()


@dataclass(frozen=True)
class PlayerSeat:
    """One of the two player seats."""
    index: int
    label: str

    @classmethod
    def from_index(cls, index: int) -> "PlayerSeat":
        if index not in (0, 1):
            raise ValueError(f"Seat index must be 0 or 1, got {index}")
        return cls(index=index, label=SEAT_LABELS[index])


@dataclass(frozen=True)
class GameOutcome:
    """Result announced by the GameEnd notification."""
    winner_seat: PlayerSeat


@dataclass(frozen=True)
class Snapshot:
    """Observable game state at one point in time."""
    balance_seat0: int
    balance_seat1: int
    live_mark_description: str
    own_balance: int

    @property
    def balances(self) -> Tuple[int, int]:
        return (self.balance_seat0, self.balance_seat1)
