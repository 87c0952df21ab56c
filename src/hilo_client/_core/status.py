# Area: Core
# PRD: docs/prd-hilo-client.md
"""
hilo_client._core.status — Game status snapshots
================================================

Reads both seats' balances and the live mark. Never writes.
"""

import logging

from ..errors import LedgerReadError
from ..types import Snapshot
from .client_context import ClientContext

logger = logging.getLogger("hilo_client.status")


class StatusReporter:
    """Builds a Snapshot for the seat behind a ClientContext."""

    def __init__(self, context: ClientContext):
        self.context = context

    def report(self) -> Snapshot:
        """
        Read balances and the live mark.

        Raises:
            LedgerReadError: If any read fails
        """
        ledger = self.context.ledger
        formatter = self.context.mark_formatter

        balances = (ledger.balance_of(0), ledger.balance_of(1))
        raw_mark = ledger.read(formatter.mark_function)
        try:
            description = formatter.describe(raw_mark)
        except (ValueError, TypeError, IndexError) as e:
            raise LedgerReadError(formatter.mark_function, f"unrecognized mark {raw_mark!r}: {e}") from e

        logger.debug(f"Status: balances={balances} mark={description}")
        return Snapshot(
            balance_seat0=balances[0],
            balance_seat1=balances[1],
            live_mark_description=description,
            own_balance=balances[self.context.seat.index],
        )
