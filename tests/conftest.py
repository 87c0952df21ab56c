# Area: Test Support
# PRD: docs/prd-hilo-client.md
"""Shared fakes for the HiLo client tests."""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Tuple

import pytest

from hilo_client._core import ClientContext, get_mark_formatter
from hilo_client._shared import Ledger, disable_console_mode
from hilo_client.errors import LedgerReadError, SubmissionError
from hilo_client.operator import Operator
from hilo_client.types import PlayerSeat

TEST_PRIVATE_KEY = "0x" + "ab" * 32


class FakeLedger(Ledger):
    """In-memory ledger that records submissions and serves canned reads."""

    def __init__(self, balances=(100, 100), mark: Any = 5):
        self.balances = list(balances)
        self.mark = mark
        self.submitted: List[Tuple[str, tuple]] = []
        self.subscribed: List[str] = []
        self.logs: List[Mapping[str, Any]] = []
        self.fail_submit: Dict[str, str] = {}
        self.fail_read: Dict[str, str] = {}
        self.fail_connect = False
        self.connected = False

    def connect(self) -> None:
        if self.fail_connect:
            raise LedgerReadError("connect", "node is not reachable")
        self.connected = True

    def subscribe(self, event_names: Iterable[str]) -> None:
        self.subscribed.extend(event_names)

    def poll(self) -> List[Mapping[str, Any]]:
        logs, self.logs = self.logs, []
        return logs

    def read(self, function_name: str, *args: Any) -> Any:
        if function_name in self.fail_read:
            raise LedgerReadError(function_name, self.fail_read[function_name])
        if function_name == "getChips":
            return self.balances[args[0]]
        return self.mark

    def submit(self, function_name: str, *args: Any) -> str:
        if function_name in self.fail_submit:
            raise SubmissionError(
                operation=function_name,
                reason=self.fail_submit[function_name],
                arguments={"args": list(args)},
            )
        self.submitted.append((function_name, args))
        return "0x" + format(len(self.submitted), "064x")

    def calls(self, function_name: str) -> List[tuple]:
        return [args for name, args in self.submitted if name == function_name]


class ScriptedOperator(Operator):
    """Operator that replays (amount, direction) answers and records output."""

    def __init__(self, answers=()):
        self.answers = list(answers)
        self.lines: List[str] = []
        self.warnings: List[str] = []
        self.asked_balances: List[int] = []
        self._direction = ""

    def show(self, line: str) -> None:
        self.lines.append(line)

    def warn(self, line: str) -> None:
        self.warnings.append(line)

    def ask_amount(self, balance: int) -> str:
        self.asked_balances.append(balance)
        amount, self._direction = self.answers.pop(0)
        return amount

    def ask_direction(self) -> str:
        return self._direction


def make_log(event: str, block: int = 1, index: int = 0, **args) -> Dict[str, Any]:
    """Build an event log shaped like web3's decoded entries."""
    return {"event": event, "args": args, "blockNumber": block, "logIndex": index}


@pytest.fixture
def ledger():
    return FakeLedger()


@pytest.fixture
def operator():
    return ScriptedOperator()


@pytest.fixture
def make_context(ledger, operator):
    """Factory for a ClientContext over the shared fake ledger and operator."""

    def _make(seat: int = 0, variant: str = "dice") -> ClientContext:
        return ClientContext(
            ledger=ledger,
            seat=PlayerSeat.from_index(seat),
            operator=operator,
            mark_formatter=get_mark_formatter(variant),
        )

    return _make


@pytest.fixture(autouse=True)
def reset_package_logging():
    """Undo setup_logging() and console mode after each test."""
    yield
    pkg_logger = logging.getLogger("hilo_client")
    for handler in list(pkg_logger.handlers):
        handler.close()
        pkg_logger.removeHandler(handler)
    pkg_logger.propagate = True
    pkg_logger.setLevel(logging.NOTSET)
    disable_console_mode()
