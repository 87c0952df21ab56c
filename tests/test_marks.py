# Area: Core Tests
# PRD: docs/prd-hilo-client.md
"""Tests for live mark formatters."""

import pytest

from hilo_client._core.marks import (
    CardMarkFormatter,
    DiceMarkFormatter,
    get_mark_formatter,
)


class TestDiceMarkFormatter:
    """Dice marks are stored offset by the minimum sum of two dice."""

    def test_raw_zero_is_two(self):
        assert DiceMarkFormatter().describe(0) == "2"

    def test_raw_five_is_seven(self):
        assert DiceMarkFormatter().describe(5) == "7"

    def test_reads_latest_mark_of_dice_contract(self):
        formatter = DiceMarkFormatter()
        assert formatter.contract_name == "HiLoDice"
        assert formatter.mark_function == "latestMark"
        assert formatter.label == "Live dice sum"


class TestCardMarkFormatter:
    """Card marks are (suit, rank) pairs."""

    def test_ace_of_clubs(self):
        assert CardMarkFormatter().describe((0, 0)) == "Clubs-Ace"

    def test_queen_of_hearts(self):
        assert CardMarkFormatter().describe([2, 11]) == "Hearts-Queen"

    def test_number_card(self):
        assert CardMarkFormatter().describe((3, 9)) == "Spades-10"

    @pytest.mark.parametrize("raw", [(4, 0), (0, 13), (-1, 2)])
    def test_out_of_range_rejected(self, raw):
        with pytest.raises(ValueError):
            CardMarkFormatter().describe(raw)

    def test_reads_latest_card_of_cards_contract(self):
        formatter = CardMarkFormatter()
        assert formatter.contract_name == "HiLoCards"
        assert formatter.mark_function == "latestCard"
        assert formatter.label == "Live card"


class TestGetMarkFormatter:
    """Tests for variant lookup."""

    def test_cards(self):
        assert isinstance(get_mark_formatter("cards"), CardMarkFormatter)

    def test_dice(self):
        assert isinstance(get_mark_formatter("dice"), DiceMarkFormatter)

    def test_unknown_variant_rejected(self):
        with pytest.raises(ValueError, match="roulette"):
            get_mark_formatter("roulette")
