# Area: Core
# PRD: docs/prd-hilo-client.md
"""
hilo_client._core.seat — Seat registration
==========================================

Claims the client's seat once, before any round is played. A rejected
claim is not retried: the contract does not treat a repeated claim as
harmless.
"""

import logging

from ..errors import SeatClaimError, SubmissionError
from .._shared.display import SECTION_END, claim_header
from .client_context import ClientContext

logger = logging.getLogger("hilo_client.seat")


def claim_seat(context: ClientContext) -> str:
    """
    Submit the seat claim.

    Returns:
        The claim transaction hash

    Raises:
        SeatClaimError: If the ledger rejects the claim
    """
    seat = context.seat
    operator = context.operator

    operator.show(claim_header(seat))
    operator.show("- Broadcasting")
    try:
        tx_hash = context.ledger.claim_seat(seat.index)
    except SubmissionError as e:
        raise SeatClaimError(seat.index, seat.label, e.reason) from e

    logger.info(f"Claimed seat {seat.index} ({seat.label}): {tx_hash}")
    operator.show("- Done")
    operator.show(SECTION_END)
    operator.show("")
    return tx_hash
