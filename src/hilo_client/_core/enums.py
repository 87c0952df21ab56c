# Area: Core
# PRD: docs/prd-hilo-client.md
"""
hilo_client._core.enums — Round State Machine Enums
===================================================

Defines the phases and events of the per-seat round state machine.
"""

from enum import Enum


class RoundPhase(Enum):
    """
    Phases of the round state machine.

    Phase transitions:
    IDLE -> AWAITING_BET (on OPEN_ROUND)
    AWAITING_BET -> COMMITTED (on BET_COMMITTED)
    COMMITTED -> REVEALED (on CLOSE_ROUND)
    REVEALED -> AWAITING_BET (on OPEN_ROUND)
    Any phase -> TERMINATED (on GAME_END)
    """
    IDLE = "IDLE"
    AWAITING_BET = "AWAITING_BET"
    COMMITTED = "COMMITTED"
    REVEALED = "REVEALED"
    TERMINATED = "TERMINATED"


class RoundEvent(Enum):
    """
    Events that trigger phase transitions.

    Events are triggered by:
    - OPEN_ROUND: OpenRound log received
    - BET_COMMITTED: commitBet submitted successfully
    - CLOSE_ROUND: CloseRound log received
    - GAME_END: GameEnd log received
    """
    OPEN_ROUND = "OPEN_ROUND"
    BET_COMMITTED = "BET_COMMITTED"
    CLOSE_ROUND = "CLOSE_ROUND"
    GAME_END = "GAME_END"
