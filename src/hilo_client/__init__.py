"""
hilo_client — HiLo Commit-Reveal Player Client
==============================================

Plays one seat of a two-player HiLo game run by an on-chain contract.
Each round the player bets chips on whether the next card (or dice sum)
will be higher or lower, commits to the bet with a hash, and reveals it
once betting closes.

Quick Start (bets chosen automatically):
    from hilo_client import ClientConfig, DemoOperator, HiLoRunner
    config = ClientConfig(seat=0, private_key="0x...", variant="dice")
    runner = HiLoRunner(config=config, operator=DemoOperator())
    runner.run()

Interactive play from the terminal:
    hilo-client 0 <private-key> --variant cards

Watching a game without a seat:
    hilo-listen --variant dice
"""

from .runner import HiLoRunner
from .listener import EventListener
from .operator import Operator, ConsoleOperator
from .demo_operator import DemoOperator
from ._runner_config import ClientConfig, ListenerConfig
from .errors import (
    HiLoClientError,
    ConfigurationError,
    InvalidBetError,
    InvalidBetReason,
    ProtocolSequenceError,
    SubmissionError,
    SeatClaimError,
    LedgerReadError,
)
from .types import (
    SEAT_LABELS,
    Direction,
    Bet,
    Commitment,
    PlayerSeat,
    GameOutcome,
    Snapshot,
)

__version__ = "1.0.0"

__all__ = [
    # Runners
    "HiLoRunner",
    "EventListener",
    # Operators
    "Operator",
    "ConsoleOperator",
    "DemoOperator",
    # Config
    "ClientConfig",
    "ListenerConfig",
    # Errors
    "HiLoClientError",
    "ConfigurationError",
    "InvalidBetError",
    "InvalidBetReason",
    "ProtocolSequenceError",
    "SubmissionError",
    "SeatClaimError",
    "LedgerReadError",
    # Types
    "SEAT_LABELS",
    "Direction",
    "Bet",
    "Commitment",
    "PlayerSeat",
    "GameOutcome",
    "Snapshot",
]
