# Area: Core
# PRD: docs/prd-hilo-client.md
"""
hilo_client._core.round_handler — Commit-reveal round driver
============================================================

Handles the three round lifecycle notifications for one seat:

    OpenRound(n)    show status, ask for a bet, submit its commitment
    CloseRound(n)   reveal the bet committed for round n
    GameEnd(w)      report the winner and exit

Notifications must arrive in order (open, close, next open). Anything
else is reported to the operator as a protocol error; the handler never
invents a commitment or reveals a bet it did not commit.
"""

from __future__ import annotations
import logging
from typing import List, Optional

from ..errors import (
    HiLoClientError,
    LedgerReadError,
    ProtocolSequenceError,
    SubmissionError,
)
from ..types import Bet, GameOutcome, PlayerSeat
from .._shared.display import (
    BET_SECTION,
    COMMITTED_LINE,
    PROCESS_SECTION,
    REVEALED_LINE,
    SECTION_END,
    error_line,
    round_header,
    status_lines,
)
from .client_context import ClientContext
from .commitment import commit
from .enums import RoundEvent, RoundPhase
from .notifications import Notification, NotificationKind
from .round_context import RoundContext
from .state_machine import RoundStateMachine
from .status import StatusReporter
from .terminator import GameTerminator
from .validator import ask_valid_bet

logger = logging.getLogger("hilo_client.round_handler")


class RoundHandler:
    """
    Drives one seat through the commit-reveal rounds of a game.

    Attributes:
        state_machine: Phase tracking for the current round
        round: Context of the current (or last) round, None before the first
        reported: Every error reported to the operator, oldest first
    """

    def __init__(self, context: ClientContext):
        self.context = context
        self.state_machine = RoundStateMachine()
        self.status = StatusReporter(context)
        self.terminator = GameTerminator(context, self.status)
        self.round: Optional[RoundContext] = None
        self.reported: List[HiLoClientError] = []

    @property
    def phase(self) -> RoundPhase:
        return self.state_machine.current_phase

    # ── Dispatch ──────────────────────────────────────────────

    def dispatch(self, notification: Notification) -> None:
        """Handle one notification. Must not be called concurrently."""
        if self.state_machine.is_terminated:
            logger.debug(f"Ignoring {notification.kind.value} after game end")
            return

        kind = notification.kind
        logger.info(
            f"Received {kind.value} (round={notification.round_index}, "
            f"winner={notification.winner_index}) in phase {self.phase.value}"
        )

        if kind is NotificationKind.OPEN_ROUND:
            self.open_round(notification.round_index)
        elif kind is NotificationKind.CLOSE_ROUND:
            self.close_round(notification.round_index)
        elif kind is NotificationKind.GAME_END:
            self.end_game(notification.winner_index)

    # ── OpenRound ─────────────────────────────────────────────

    def open_round(self, round_index: int) -> None:
        """Start a round: status, bet prompt, commitment."""
        operator = self.context.operator

        if self.state_machine.can_transition(RoundEvent.OPEN_ROUND):
            self.state_machine.transition(RoundEvent.OPEN_ROUND)
        else:
            stale = self.round
            if stale is not None and not stale.abandoned:
                self._report(ProtocolSequenceError(
                    notification=NotificationKind.OPEN_ROUND.value,
                    phase=self.phase.value,
                    round_index=round_index,
                    detail=f"round {stale.round_index} was never revealed; its bet is discarded",
                ))
            self.state_machine.transition(RoundEvent.OPEN_ROUND, force=True)

        self.round = RoundContext(round_index=round_index)
        operator.show(round_header(round_index))

        try:
            snapshot = self.status.report()
        except LedgerReadError as e:
            self._fail_round(e)
            return

        for line in status_lines(snapshot, self.context.mark_formatter.label):
            operator.show(line)

        operator.show(BET_SECTION)
        bet = ask_valid_bet(operator, snapshot.own_balance)
        self.round.bet = bet

        operator.show(PROCESS_SECTION)
        self._commit(bet)

    def _commit(self, bet: Bet) -> None:
        """Submit the commitment for the current round's bet."""
        current = self.round
        if current.commit_tx is not None or not self.state_machine.can_transition(RoundEvent.BET_COMMITTED):
            raise ProtocolSequenceError(
                notification="commitBet",
                phase=self.phase.value,
                round_index=current.round_index,
                detail="a bet was already committed for this round",
            )

        commitment = commit(bet)
        try:
            current.commit_tx = self.context.ledger.commit_bet(commitment)
        except SubmissionError as e:
            self._fail_round(e)
            return

        self.state_machine.transition(RoundEvent.BET_COMMITTED)
        logger.info(f"[round {current.round_index}] Committed {commitment.hex()}")
        self.context.operator.show(COMMITTED_LINE)

    # ── CloseRound ────────────────────────────────────────────

    def close_round(self, round_index: int) -> None:
        """Reveal the bet committed for the closing round."""
        current = self.round
        notification = NotificationKind.CLOSE_ROUND.value

        if (
            not self.state_machine.can_transition(RoundEvent.CLOSE_ROUND)
            or current is None
            or current.abandoned
            or not current.has_commitment
        ):
            if current is not None and current.abandoned:
                detail = (
                    f"round {current.round_index} was abandoned "
                    f"({current.abandoned_reason}); nothing to reveal"
                )
            else:
                detail = "no committed bet to reveal"
            self._report(ProtocolSequenceError(
                notification=notification,
                phase=self.phase.value,
                round_index=round_index,
                detail=detail,
            ))
            return

        if round_index != current.round_index:
            error = ProtocolSequenceError(
                notification=notification,
                phase=self.phase.value,
                round_index=round_index,
                detail=f"the committed bet belongs to round {current.round_index}",
            )
            self._report(error)
            current.abandon(str(error))
            return

        try:
            current.reveal_tx = self.context.ledger.reveal_bet(current.bet)
        except SubmissionError as e:
            self._fail_round(e)
            return

        self.state_machine.transition(RoundEvent.CLOSE_ROUND)
        logger.info(f"[round {current.round_index}] Revealed {current.bet}")

        operator = self.context.operator
        operator.show(REVEALED_LINE)
        operator.show(SECTION_END)
        operator.show("")

    # ── GameEnd ───────────────────────────────────────────────

    def end_game(self, winner_index: int) -> None:
        """Finish the game. Exits the process."""
        self.state_machine.transition(RoundEvent.GAME_END)

        try:
            winner = PlayerSeat.from_index(winner_index)
        except ValueError as e:
            logger.error(f"GameEnd names an unknown seat: {e}")
            winner = PlayerSeat(index=winner_index, label=f"Seat {winner_index}")

        self.terminator.on_game_end(GameOutcome(winner_seat=winner))

    # ── Reporting ─────────────────────────────────────────────

    def _report(self, error: HiLoClientError) -> None:
        """Show an error to the operator and log it."""
        self.reported.append(error)
        logger.error(str(error))
        self.context.operator.warn(error_line(str(error)))

    def _fail_round(self, error: HiLoClientError) -> None:
        """Report an error that ends this seat's participation in the round."""
        self._report(error)
        self.round.abandon(str(error))
