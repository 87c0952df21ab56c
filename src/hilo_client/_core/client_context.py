# Area: Core
# PRD: docs/prd-hilo-client.md
"""
hilo_client._core.client_context — Handles shared by all handlers
=================================================================

One ClientContext is built per client instance and passed to every
component that needs the ledger, the seat or the operator.
"""

from dataclasses import dataclass

from ..operator import Operator
from ..types import PlayerSeat
from .._shared.ledger import Ledger
from .marks import MarkFormatter


@dataclass(frozen=True)
class ClientContext:
    """Everything a handler may touch outside its own round state."""
    ledger: Ledger
    seat: PlayerSeat
    operator: Operator
    mark_formatter: MarkFormatter
