# Area: Core
# PRD: docs/prd-hilo-client.md
"""
Core commit-reveal protocol for one HiLo seat.

This package handles:
- Bet validation and commitment encoding
- The round state machine and notification dispatch
- Status snapshots and live mark formatting
- Seat registration and end-of-game reporting
"""

from .enums import RoundPhase, RoundEvent
from .state_machine import RoundStateMachine
from .commitment import commit, encode_bet
from .validator import validate_bet, ask_valid_bet
from .marks import MarkFormatter, get_mark_formatter
from .notifications import Notification, NotificationKind
from .client_context import ClientContext
from .round_handler import RoundHandler
from .seat import claim_seat

__all__ = [
    "RoundPhase",
    "RoundEvent",
    "RoundStateMachine",
    "commit",
    "encode_bet",
    "validate_bet",
    "ask_valid_bet",
    "MarkFormatter",
    "get_mark_formatter",
    "Notification",
    "NotificationKind",
    "ClientContext",
    "RoundHandler",
    "claim_seat",
]
