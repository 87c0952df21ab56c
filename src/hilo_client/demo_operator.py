# Area: Presentation
# PRD: docs/prd-hilo-client.md
"""
hilo_client.demo_operator — Demo Operator Implementation
========================================================

A ready-to-use Operator that bets on its own. Useful for watching two
seats play against each other without typing.

Usage:
    from hilo_client import DemoOperator, HiLoRunner

    HiLoRunner(config=config, operator=DemoOperator()).run()
"""

import random
from typing import Optional

from ._shared.display import AMOUNT_QUESTION, DIRECTION_QUESTION
from .operator import ConsoleOperator


class DemoOperator(ConsoleOperator):
    """
    Console operator that answers its own prompts.

    Bets a random share of the balance (at most max_fraction of it) in a
    random direction, and echoes the answers so the console reads the same
    as an interactive session.
    """

    def __init__(self, max_fraction: float = 0.5, seed: Optional[int] = None):
        """
        Initialize DemoOperator.

        Args:
            max_fraction: Largest share of the balance bet in one round
            seed: Seed for reproducible bets
        """
        self.max_fraction = max_fraction
        self._rng = random.Random(seed)

    def ask_amount(self, balance: int) -> str:
        ceiling = max(0, int(balance * self.max_fraction))
        answer = str(self._rng.randint(0, ceiling))
        self.show(f"{AMOUNT_QUESTION}{answer}")
        return answer

    def ask_direction(self) -> str:
        answer = self._rng.choice(["H", "L"])
        self.show(f"{DIRECTION_QUESTION}{answer}")
        return answer
