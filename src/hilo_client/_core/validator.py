# Area: Core
# PRD: docs/prd-hilo-client.md
"""
hilo_client._core.validator — Bet input validation
==================================================

Turns the operator's raw answers into a Bet. Rules are checked in a fixed
order (direction, integer amount, non-negative, within balance) and the
first failure is reported.
"""

import logging
import re

from ..errors import InvalidBetError, InvalidBetReason
from ..operator import Operator
from ..types import Bet, Direction
from .._shared.display import INVALID_INPUT

logger = logging.getLogger("hilo_client.validator")

# Recognized direction tokens (case-sensitive)
DIRECTION_TOKENS = {
    "H": Direction.HIGHER,
    "L": Direction.LOWER,
}

# Plain ASCII digits; rejects "1_000", "+5" and non-ASCII digits
AMOUNT_PATTERN = re.compile(r"-?[0-9]+")


def validate_bet(amount_text: str, direction_token: str, balance: int) -> Bet:
    """
    Validate raw operator input against the current balance.

    Args:
        amount_text: Raw amount answer, e.g. "20"
        direction_token: Raw direction answer, "H" or "L"
        balance: The seat's current chip balance

    Returns:
        The validated Bet

    Raises:
        InvalidBetError: If any rule fails (carries the first failing reason)
    """
    direction = DIRECTION_TOKENS.get(direction_token)
    if direction is None:
        raise InvalidBetError(InvalidBetReason.UNKNOWN_DIRECTION)

    text = str(amount_text).strip()
    if not AMOUNT_PATTERN.fullmatch(text):
        raise InvalidBetError(InvalidBetReason.NOT_AN_INTEGER)
    amount = int(text)

    if amount < 0:
        raise InvalidBetError(InvalidBetReason.NEGATIVE_AMOUNT)
    if amount > balance:
        raise InvalidBetError(InvalidBetReason.EXCEEDS_BALANCE)

    return Bet(amount=amount, direction=direction)


def ask_valid_bet(operator: Operator, balance: int) -> Bet:
    """
    Ask the operator for a bet until a valid one is given.

    There is no retry limit: the round cannot proceed without a bet.
    """
    while True:
        amount_text = operator.ask_amount(balance)
        direction_token = operator.ask_direction()
        try:
            return validate_bet(amount_text, direction_token, balance)
        except InvalidBetError as e:
            logger.debug(f"Rejected bet input ({amount_text!r}, {direction_token!r}): {e.reason.name}")
            operator.warn(f"{INVALID_INPUT} ({e.reason.value})")
