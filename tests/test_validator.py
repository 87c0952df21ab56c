# Area: Core Tests
# PRD: docs/prd-hilo-client.md
"""Tests for bet input validation."""

import pytest

from conftest import ScriptedOperator
from hilo_client._core.validator import ask_valid_bet, validate_bet
from hilo_client._shared.display import INVALID_INPUT
from hilo_client.errors import InvalidBetError, InvalidBetReason
from hilo_client.types import Bet, Direction


class TestValidateBet:
    """Tests for validate_bet() rules and their order."""

    def test_valid_higher_bet(self):
        assert validate_bet("20", "H", 100) == Bet(20, Direction.HIGHER)

    def test_valid_lower_bet(self):
        assert validate_bet("20", "L", 100) == Bet(20, Direction.LOWER)

    def test_whitespace_around_amount_ignored(self):
        assert validate_bet(" 20 ", "H", 100).amount == 20

    def test_zero_amount_is_valid(self):
        assert validate_bet("0", "L", 100).amount == 0

    def test_full_balance_is_valid(self):
        assert validate_bet("100", "H", 100).amount == 100

    def test_lowercase_direction_rejected(self):
        with pytest.raises(InvalidBetError) as exc_info:
            validate_bet("20", "h", 100)
        assert exc_info.value.reason is InvalidBetReason.UNKNOWN_DIRECTION

    def test_direction_checked_before_amount(self):
        with pytest.raises(InvalidBetError) as exc_info:
            validate_bet("abc", "X", 100)
        assert exc_info.value.reason is InvalidBetReason.UNKNOWN_DIRECTION

    @pytest.mark.parametrize("amount_text", ["abc", "2.5", "", "1_000", "+5", "\u0663", "1e3"])
    def test_non_integer_rejected(self, amount_text):
        with pytest.raises(InvalidBetError) as exc_info:
            validate_bet(amount_text, "H", 100)
        assert exc_info.value.reason is InvalidBetReason.NOT_AN_INTEGER

    def test_negative_rejected(self):
        with pytest.raises(InvalidBetError) as exc_info:
            validate_bet("-1", "H", 100)
        assert exc_info.value.reason is InvalidBetReason.NEGATIVE_AMOUNT

    def test_over_balance_rejected(self):
        with pytest.raises(InvalidBetError) as exc_info:
            validate_bet("101", "H", 100)
        assert exc_info.value.reason is InvalidBetReason.EXCEEDS_BALANCE


class TestAskValidBet:
    """Tests for the re-ask loop."""

    def test_first_valid_answer_returned(self):
        operator = ScriptedOperator([("20", "H")])
        assert ask_valid_bet(operator, 100) == Bet(20, Direction.HIGHER)
        assert operator.warnings == []

    def test_reasks_until_valid(self):
        """150 of 100 is rejected, then 50 is accepted."""
        operator = ScriptedOperator([("150", "H"), ("50", "L")])

        bet = ask_valid_bet(operator, 100)

        assert bet == Bet(50, Direction.LOWER)
        assert operator.asked_balances == [100, 100]
        assert len(operator.warnings) == 1
        assert operator.warnings[0].startswith(INVALID_INPUT)
        assert InvalidBetReason.EXCEEDS_BALANCE.value in operator.warnings[0]

    def test_one_warning_per_rejection(self):
        operator = ScriptedOperator([("x", "H"), ("5", "Q"), ("-3", "L"), ("5", "L")])
        ask_valid_bet(operator, 10)
        assert len(operator.warnings) == 3
