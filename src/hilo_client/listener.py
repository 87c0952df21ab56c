# Area: Runner
# PRD: docs/prd-hilo-client.md
"""
hilo_client.listener — Event logger
===================================

Prints every HiLo contract event as it appears on chain. A quick way to
watch a game without taking a seat.
"""

from __future__ import annotations
import logging
import signal
import sys
import time
from typing import Any, Dict, Mapping, TextIO

from ._shared import ALL_EVENTS, Ledger
from .errors import LedgerReadError

logger = logging.getLogger("hilo_client.listener")


def format_event(log: Mapping[str, Any]) -> Dict[str, Any]:
    """Reduce a log to its event name and arguments."""
    return {
        "eventName": log.get("event"),
        "args": dict(log.get("args") or {}),
    }


class EventListener:
    """Polls all HiLo events and prints them."""

    def __init__(self, ledger: Ledger, poll_interval: float = 1.0, out: TextIO = sys.stdout):
        self.ledger = ledger
        self.poll_interval = poll_interval
        self.out = out
        self._running = False

    def start(self) -> None:
        self.ledger.connect()
        self.ledger.subscribe(ALL_EVENTS)

    def poll_once(self) -> int:
        """Print new events. Returns how many were printed."""
        logs = self.ledger.poll()
        for log in logs:
            print(format_event(log), file=self.out, flush=True)
        return len(logs)

    def run(self) -> None:
        """Print events until interrupted (Ctrl+C)."""
        self._running = True
        signal.signal(signal.SIGINT, lambda s, f: setattr(self, "_running", False))
        self.start()

        while self._running:
            try:
                self.poll_once()
                time.sleep(self.poll_interval)
            except KeyboardInterrupt:
                break
            except LedgerReadError as e:
                logger.error(f"Poll failed: {e}")
                time.sleep(self.poll_interval)
