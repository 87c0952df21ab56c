# Area: Runner
# PRD: docs/prd-hilo-client.md
"""
hilo_client.runner — Main event loop
====================================

The HiLoRunner wires the ledger, the operator and the round handler
together and runs a single blocking loop:

    subscribe -> claim seat -> poll logs -> dispatch, one at a time

Logs produced while the operator is answering a prompt wait in the
node-side filters and the pending queue until the loop comes back.
"""

from __future__ import annotations
import logging
import signal
import time
from collections import deque
from typing import Any, Deque, Iterable, Mapping, Optional

from ._core import ClientContext, Notification, RoundHandler, claim_seat, get_mark_formatter
from ._runner_config import ClientConfig
from ._shared import (
    ROUND_EVENTS,
    Ledger,
    Web3Ledger,
    enable_console_mode,
    load_artifacts,
    log_and_terminate,
    setup_logging,
)
from .errors import LedgerReadError, SeatClaimError
from .operator import ConsoleOperator, Operator
from .types import PlayerSeat

logger = logging.getLogger("hilo_client")


class HiLoRunner:
    """
    Runs one seat of a HiLo game.

    Usage
    -----
        from hilo_client import ClientConfig, HiLoRunner

        config = ClientConfig(seat=0, private_key="0x...", variant="dice")
        HiLoRunner(config=config).run()
    """

    def __init__(
        self,
        config: ClientConfig,
        operator: Optional[Operator] = None,
        ledger: Optional[Ledger] = None,
    ):
        self.config = config
        self._stop_requested = False
        self._pending: Deque[Notification] = deque()

        setup_logging(
            log_file_path=config.log_file,
            level=logging.DEBUG if config.verbose else logging.INFO,
        )

        formatter = get_mark_formatter(config.variant)
        if ledger is None:
            artifacts = load_artifacts(config.contracts_out, formatter.contract_name)
            ledger = Web3Ledger(
                rpc_url=config.rpc_url,
                abi=artifacts.abi,
                address=artifacts.address,
                private_key=config.private_key,
            )

        self.context = ClientContext(
            ledger=ledger,
            seat=PlayerSeat.from_index(config.seat),
            operator=operator or ConsoleOperator(),
            mark_formatter=formatter,
        )
        self.handler = RoundHandler(self.context)
        self.poll_interval = config.poll_interval_seconds

        # Operator display owns the terminal unless verbose logging was asked for
        if not config.verbose:
            enable_console_mode()

    # ── Main loop ─────────────────────────────────────────────

    def run(self) -> None:
        """
        Claim the seat and process notifications until the game ends
        (the process exits) or the loop is interrupted (Ctrl+C).
        """
        self._stop_requested = False
        signal.signal(signal.SIGINT, self._handle_interrupt)

        self._log_startup()
        self.start()

        while not self._stop_requested:
            try:
                self._poll_and_process()
                time.sleep(self.poll_interval)
            except KeyboardInterrupt:
                break
            except LedgerReadError as e:
                logger.error(f"Poll failed: {e}")
                time.sleep(self.poll_interval)

        logger.info("HiLo runner stopped.")

    def _handle_interrupt(self, signum, frame) -> None:
        """SIGINT: stop the loop and break out of a blocked operator prompt."""
        self._stop_requested = True
        raise KeyboardInterrupt

    def start(self) -> None:
        """Subscribe to round events, then claim the seat (fatal on failure)."""
        ledger = self.context.ledger
        try:
            ledger.connect()
            # Filters exist before the claim so the first OpenRound is not missed
            ledger.subscribe(ROUND_EVENTS)
        except LedgerReadError as e:
            log_and_terminate(e)

        try:
            claim_seat(self.context)
        except SeatClaimError as e:
            log_and_terminate(e)

    def _log_startup(self) -> None:
        """Log startup information."""
        seat = self.context.seat
        logger.info("=" * 60)
        logger.info("  HiLo Client — Starting")
        logger.info(f"  Seat:    {seat.index} ({seat.label})")
        logger.info(f"  Variant: {self.config.variant}")
        logger.info(f"  Node:    {self.config.rpc_url}")
        logger.info(f"  Poll:    every {self.poll_interval}s")
        logger.info("=" * 60)

    def _poll_and_process(self) -> None:
        """Single poll iteration: fetch new logs, dispatch them in order."""
        self.enqueue(self.context.ledger.poll())
        self.process_pending()

    def enqueue(self, logs: Iterable[Mapping[str, Any]]) -> None:
        """Decode logs and queue the round lifecycle notifications."""
        for log in logs:
            try:
                notification = Notification.from_log(log)
            except ValueError as e:
                logger.error(f"Undecodable log skipped: {e}")
                continue
            if notification is not None:
                self._pending.append(notification)

    def process_pending(self) -> None:
        """Dispatch queued notifications one at a time, oldest first."""
        while self._pending and not self._stop_requested:
            self.handler.dispatch(self._pending.popleft())
