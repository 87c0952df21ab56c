# Area: Presentation
# PRD: docs/prd-hilo-client.md
"""
hilo_client.operator — The seat operator interface
===================================================

The round handler never talks to a terminal directly. Everything it shows
and everything it asks goes through an Operator:

    show(line)            display one status line
    warn(line)            display one error line
    ask_amount(balance)   ask how many chips to bet (raw text)
    ask_direction()       ask higher or lower (raw text)

Answers are returned as raw text; validation happens in the client, which
re-asks until the answers form a valid bet.

Subclass Operator to drive the client from something other than a console:

    class MyOperator(Operator): ...
    runner = HiLoRunner(config=config, operator=MyOperator())
"""

import sys
from abc import ABC, abstractmethod

from ._shared.display import AMOUNT_QUESTION, DIRECTION_QUESTION, RED, RESET


class Operator(ABC):
    """
    Abstract base class for the human (or program) behind a seat.

    The client calls ask_amount() then ask_direction() once per attempt,
    and calls warn() before asking again when the answers were invalid.
    """

    @abstractmethod
    def show(self, line: str) -> None:
        """Display one line of game status."""
        ...

    @abstractmethod
    def warn(self, line: str) -> None:
        """Display one line describing a problem."""
        ...

    @abstractmethod
    def ask_amount(self, balance: int) -> str:
        """
        Ask how many chips to bet this round.

        Parameters
        ----------
        balance : int
            The seat's current chip balance (the upper bound of a valid bet).

        Returns
        -------
        str
            The raw answer, e.g. "20".
        """
        ...

    @abstractmethod
    def ask_direction(self) -> str:
        """
        Ask whether the next mark will be higher or lower.

        Returns
        -------
        str
            The raw answer; "H" and "L" are the valid tokens.
        """
        ...


class ConsoleOperator(Operator):
    """Operator backed by stdin/stdout."""

    def show(self, line: str) -> None:
        print(line, file=sys.stdout, flush=True)

    def warn(self, line: str) -> None:
        print(f"{RED}{line}{RESET}", file=sys.stderr, flush=True)

    def ask_amount(self, balance: int) -> str:
        return input(AMOUNT_QUESTION)

    def ask_direction(self) -> str:
        return input(DIRECTION_QUESTION)
