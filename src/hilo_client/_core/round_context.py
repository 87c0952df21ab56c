# Area: Core
# PRD: docs/prd-hilo-client.md
"""
hilo_client._core.round_context — Per-round state
=================================================

Holds the live bet between commit and reveal. A new context replaces the
old one whenever a round opens; nothing carries over.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import logging

from ..types import Bet

logger = logging.getLogger("hilo_client.round")


@dataclass
class RoundContext:
    """State of the seat's participation in one round."""
    round_index: int
    bet: Optional[Bet] = None
    commit_tx: Optional[str] = None
    reveal_tx: Optional[str] = None
    abandoned_reason: Optional[str] = None

    @property
    def abandoned(self) -> bool:
        return self.abandoned_reason is not None

    @property
    def has_commitment(self) -> bool:
        return self.bet is not None and self.commit_tx is not None

    def abandon(self, reason: str) -> None:
        """Give up on this round; no further commit or reveal is sent for it."""
        logger.warning(f"[round {self.round_index}] Abandoned: {reason}")
        self.abandoned_reason = reason
