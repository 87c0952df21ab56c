# Area: Core
# PRD: docs/prd-hilo-client.md
"""
hilo_client._core.commitment — Bet commitment codec
===================================================

Encodes a Bet exactly as the contract's ``abi.encodePacked(uint128, bool)``
does and hashes it with Keccak-256. The contract recomputes the same digest
from the revealed values, so the layout must not change.
"""

from eth_abi.packed import encode_packed
from eth_utils import keccak

from ..types import Bet, Commitment

BET_SOL_TYPES = ("uint128", "bool")

UINT128_MAX = 2 ** 128 - 1


def encode_bet(bet: Bet) -> bytes:
    """
    Encode a bet as 16 big-endian amount bytes followed by one bool byte.

    Raises:
        ValueError: If the amount does not fit in a uint128
    """
    if not 0 <= bet.amount <= UINT128_MAX:
        raise ValueError(f"Bet amount {bet.amount} does not fit in uint128")
    return encode_packed(BET_SOL_TYPES, (bet.amount, bet.direction.is_higher))


def commit(bet: Bet) -> Commitment:
    """Derive the on-chain commitment for a bet."""
    return Commitment(digest=keccak(encode_bet(bet)))
