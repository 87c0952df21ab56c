# Area: Core
# PRD: docs/prd-hilo-client.md
"""
hilo_client._core.state_machine — Round State Machine
=====================================================

Tracks which phase of the commit-reveal round the seat is in and
validates transitions triggered by contract notifications.
"""

import logging

from ..errors import ProtocolSequenceError
from .enums import RoundPhase, RoundEvent

logger = logging.getLogger("hilo_client.state_machine")


# Valid phase transitions: {current_phase: {event: next_phase}}
TRANSITIONS = {
    RoundPhase.IDLE: {
        RoundEvent.OPEN_ROUND: RoundPhase.AWAITING_BET,
        RoundEvent.GAME_END: RoundPhase.TERMINATED,
    },
    RoundPhase.AWAITING_BET: {
        RoundEvent.BET_COMMITTED: RoundPhase.COMMITTED,
        RoundEvent.GAME_END: RoundPhase.TERMINATED,
    },
    RoundPhase.COMMITTED: {
        RoundEvent.CLOSE_ROUND: RoundPhase.REVEALED,
        RoundEvent.GAME_END: RoundPhase.TERMINATED,
    },
    RoundPhase.REVEALED: {
        RoundEvent.OPEN_ROUND: RoundPhase.AWAITING_BET,
        RoundEvent.GAME_END: RoundPhase.TERMINATED,
    },
    RoundPhase.TERMINATED: {},
}


class RoundStateMachine:
    """
    State machine for one seat's round lifecycle.

    Attributes:
        current_phase: The phase the seat is currently in
    """

    def __init__(self):
        """Initialize state machine in IDLE."""
        self.current_phase = RoundPhase.IDLE

    @property
    def is_terminated(self) -> bool:
        return self.current_phase is RoundPhase.TERMINATED

    def can_transition(self, event: RoundEvent) -> bool:
        """
        Check if a transition is valid from the current phase.

        Args:
            event: The event to check

        Returns:
            True if the transition is valid, False otherwise
        """
        valid_transitions = TRANSITIONS.get(self.current_phase, {})
        return event in valid_transitions

    def transition(self, event: RoundEvent, force: bool = False) -> RoundPhase:
        """
        Execute a phase transition.

        Args:
            event: The event triggering the transition
            force: If True, move to the phase the event leads to even when
                it is not valid from the current phase (used to abandon a
                round that never completed)

        Returns:
            The new phase after transition

        Raises:
            ProtocolSequenceError: If the transition is not valid and force=False
        """
        if not self.can_transition(event):
            if force and not self.is_terminated:
                logger.warning(
                    f"Forced transition: {event.value} from {self.current_phase.value}"
                )
                for transitions in TRANSITIONS.values():
                    if event in transitions:
                        self.current_phase = transitions[event]
                        return self.current_phase
                return self.current_phase
            raise ProtocolSequenceError(
                notification=event.value,
                phase=self.current_phase.value,
                round_index=None,
                detail=f"{event.value} is not valid from {self.current_phase.value}",
            )

        next_phase = TRANSITIONS[self.current_phase][event]
        logger.debug(f"Phase: {self.current_phase.value} → {next_phase.value}")
        self.current_phase = next_phase
        return next_phase
