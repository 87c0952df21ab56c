# Area: Core
# PRD: docs/prd-hilo-client.md
"""
hilo_client._core.notifications — Round lifecycle notifications
===============================================================

Decodes contract event logs into the three notifications the round
handler understands. Other events (CommitBet, RevealBet) are not
notifications; they are only shown by the listener.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional


class NotificationKind(Enum):
    """Round lifecycle events, named as the contract emits them."""
    OPEN_ROUND = "OpenRound"
    CLOSE_ROUND = "CloseRound"
    GAME_END = "GameEnd"


# Event argument names; older contracts emit GameEnd(winner)
ROUND_INDEX_ARG = "roundIndex"
WINNER_ARGS = ("winnerIdx", "winner")


@dataclass(frozen=True)
class Notification:
    """A decoded round lifecycle event."""
    kind: NotificationKind
    round_index: Optional[int] = None
    winner_index: Optional[int] = None
    block_number: int = 0
    log_index: int = 0

    @classmethod
    def from_log(cls, log: Mapping[str, Any]) -> Optional["Notification"]:
        """
        Decode an event log.

        Args:
            log: Mapping with "event", "args", "blockNumber", "logIndex"

        Returns:
            The Notification, or None if the event is not a round lifecycle event

        Raises:
            ValueError: If a lifecycle event lacks its argument
        """
        try:
            kind = NotificationKind(log.get("event"))
        except ValueError:
            return None

        args = log.get("args") or {}
        round_index = None
        winner_index = None

        if kind is NotificationKind.GAME_END:
            for name in WINNER_ARGS:
                if name in args:
                    winner_index = int(args[name])
                    break
            else:
                raise ValueError(f"GameEnd log without winner argument: {dict(args)}")
        else:
            if ROUND_INDEX_ARG not in args:
                raise ValueError(f"{kind.value} log without {ROUND_INDEX_ARG}: {dict(args)}")
            round_index = int(args[ROUND_INDEX_ARG])

        return cls(
            kind=kind,
            round_index=round_index,
            winner_index=winner_index,
            block_number=int(log.get("blockNumber") or 0),
            log_index=int(log.get("logIndex") or 0),
        )
