# Area: Shared
# PRD: docs/prd-hilo-client.md
"""
hilo_client._shared.ledger — Contract access
============================================

The round handler reaches the HiLo contract only through a Ledger:

    subscribe(event_names)    start watching contract events
    poll()                    new event logs, oldest first
    read(function, *args)     call a view function
    submit(function, *args)   send a transaction, return its hash

Submissions are fire-and-forget: the hash is returned as soon as the node
accepts the transaction, without waiting for a receipt.

Web3Ledger implements this over JSON-RPC with web3.py, signing locally
with the seat's private key.
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Mapping, Optional

from web3 import Web3
from web3.exceptions import Web3Exception
from web3.middleware import SignAndSendRawMiddlewareBuilder

from ..errors import LedgerReadError, SubmissionError
from ..types import Bet, Commitment

logger = logging.getLogger("hilo_client.ledger")

# Round lifecycle events the player reacts to
ROUND_EVENTS = ("OpenRound", "CloseRound", "GameEnd")

# Every event the HiLo contracts emit
ALL_EVENTS = ROUND_EVENTS + ("CommitBet", "RevealBet")

# Errors web3 raises for RPC, contract-logic and transport failures
LEDGER_ERRORS = (Web3Exception, ValueError, OSError)


class Ledger(ABC):
    """
    Abstract access to the HiLo contract.

    Subclasses implement the four primitives; the named helpers below
    map protocol actions onto contract functions.
    """

    def connect(self) -> None:
        """Check the ledger is reachable before the game starts."""

    @abstractmethod
    def subscribe(self, event_names: Iterable[str]) -> None:
        """Start collecting logs for the given event names."""
        ...

    @abstractmethod
    def poll(self) -> List[Mapping[str, Any]]:
        """
        Return event logs seen since the last poll.

        Each log is a mapping with "event", "args", "blockNumber" and
        "logIndex", ordered by (blockNumber, logIndex).
        """
        ...

    @abstractmethod
    def read(self, function_name: str, *args: Any) -> Any:
        """Call a view function. Raises LedgerReadError on failure."""
        ...

    @abstractmethod
    def submit(self, function_name: str, *args: Any) -> str:
        """Send a transaction. Raises SubmissionError on failure."""
        ...

    # ── Protocol actions ──────────────────────────────────────

    def balance_of(self, seat_index: int) -> int:
        return int(self.read("getChips", seat_index))

    def claim_seat(self, seat_index: int) -> str:
        return self.submit("claimPlayer", seat_index)

    def commit_bet(self, commitment: Commitment) -> str:
        return self.submit("commitBet", commitment.as_uint256())

    def reveal_bet(self, bet: Bet) -> str:
        return self.submit("revealBet", bet.amount, bet.direction.is_higher)


class Web3Ledger(Ledger):
    """Ledger backed by a JSON-RPC node through web3.py."""

    def __init__(
        self,
        rpc_url: str,
        abi: List[Dict[str, Any]],
        address: str,
        private_key: Optional[str] = None,
    ):
        """
        Initialize the web3 session and contract handle.

        Args:
            rpc_url: HTTP JSON-RPC endpoint of the node
            abi: Contract ABI (from the build artifact)
            address: Deployed contract address
            private_key: Seat key; omit for a read-only ledger
        """
        self.rpc_url = rpc_url
        self.w3 = Web3(Web3.HTTPProvider(rpc_url))
        self.account = None

        if private_key:
            self.account = self.w3.eth.account.from_key(private_key)
            self.w3.middleware_onion.inject(
                SignAndSendRawMiddlewareBuilder.build(self.account),
                layer=0,
            )
            self.w3.eth.default_account = self.account.address

        self.contract = self.w3.eth.contract(
            address=Web3.to_checksum_address(address),
            abi=abi,
        )
        self._filters: Dict[str, Any] = {}
        # Entries fetched but not yet returned; survives a failed poll
        self._undelivered: List[Mapping[str, Any]] = []

    @property
    def sender(self) -> str:
        return self.account.address if self.account else ""

    def connect(self) -> None:
        """Check that the node answers. Raises LedgerReadError otherwise."""
        if not self.w3.is_connected():
            raise LedgerReadError("connect", f"node at {self.rpc_url} is not reachable")
        logger.info(
            f"Connected to {self.rpc_url} (contract {self.contract.address}, "
            f"sender {self.sender or 'read-only'})"
        )

    def subscribe(self, event_names: Iterable[str]) -> None:
        for name in event_names:
            try:
                event = getattr(self.contract.events, name)
                self._filters[name] = event.create_filter(from_block="latest")
            except LEDGER_ERRORS as e:
                raise LedgerReadError(f"subscribe {name}", str(e)) from e
            logger.debug(f"Subscribed to {name}")

    def poll(self) -> List[Mapping[str, Any]]:
        for name, event_filter in self._filters.items():
            try:
                self._undelivered.extend(event_filter.get_new_entries())
            except LEDGER_ERRORS as e:
                raise LedgerReadError(f"poll {name}", str(e)) from e
        entries, self._undelivered = self._undelivered, []
        entries.sort(key=lambda entry: (entry["blockNumber"], entry["logIndex"]))
        return entries

    def read(self, function_name: str, *args: Any) -> Any:
        try:
            return getattr(self.contract.functions, function_name)(*args).call()
        except LEDGER_ERRORS as e:
            raise LedgerReadError(function_name, str(e)) from e

    def submit(self, function_name: str, *args: Any) -> str:
        logger.info(f"Submitting {function_name}{args}")
        try:
            tx_hash = getattr(self.contract.functions, function_name)(*args).transact()
        except LEDGER_ERRORS as e:
            raise SubmissionError(
                operation=function_name,
                reason=str(e),
                arguments={"args": list(args)},
            ) from e
        tx_hex = Web3.to_hex(tx_hash)
        logger.info(f"{function_name} sent: {tx_hex}")
        return tx_hex
