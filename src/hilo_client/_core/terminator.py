# Area: Core
# PRD: docs/prd-hilo-client.md
"""
hilo_client._core.terminator — End of game
==========================================

Prints the final standings, announces the winner and exits the process
with status 0. This is the client's only normal way to stop.
"""

import logging
import sys

from ..errors import LedgerReadError
from ..types import GameOutcome
from .._shared.display import (
    GAME_ENDED_HEADER,
    SECTION_END,
    error_line,
    status_lines,
    winner_line,
)
from .client_context import ClientContext
from .status import StatusReporter

logger = logging.getLogger("hilo_client.terminator")


class GameTerminator:
    """Reports the outcome and stops the process."""

    def __init__(self, context: ClientContext, status: StatusReporter):
        self.context = context
        self.status = status
        self.invocations = 0

    def on_game_end(self, outcome: GameOutcome) -> None:
        """Report the outcome, then exit. Does not return."""
        self.invocations += 1
        operator = self.context.operator

        operator.show(GAME_ENDED_HEADER)
        try:
            snapshot = self.status.report()
        except LedgerReadError as e:
            logger.error(f"Final status unavailable: {e}")
            operator.warn(error_line(f"Final status unavailable: {e}"))
        else:
            for line in status_lines(snapshot, self.context.mark_formatter.label):
                operator.show(line)

        operator.show(winner_line(outcome.winner_seat))
        operator.show(SECTION_END)
        operator.show("")

        logger.info(f"Game ended, winner: {outcome.winner_seat.label}")
        sys.exit(0)
