# Area: Core Tests
# PRD: docs/prd-hilo-client.md
"""Tests for end-of-game reporting."""

import pytest

from hilo_client._core.status import StatusReporter
from hilo_client._core.terminator import GameTerminator
from hilo_client._shared.display import GAME_ENDED_HEADER
from hilo_client.types import GameOutcome, PlayerSeat


def _terminator(context):
    return GameTerminator(context, StatusReporter(context))


class TestGameTerminator:
    """Tests for GameTerminator.on_game_end()."""

    def test_exits_with_status_zero(self, make_context):
        terminator = _terminator(make_context())
        with pytest.raises(SystemExit) as exc_info:
            terminator.on_game_end(GameOutcome(PlayerSeat.from_index(1)))
        assert exc_info.value.code == 0
        assert terminator.invocations == 1

    def test_prints_final_status_and_winner(self, ledger, operator, make_context):
        ledger.balances = [0, 200]
        ledger.mark = 10

        with pytest.raises(SystemExit):
            _terminator(make_context()).on_game_end(GameOutcome(PlayerSeat.from_index(1)))

        assert operator.lines == [
            GAME_ENDED_HEADER,
            "- Status",
            "  - Number of chips (Alice): 0",
            "  - Number of chips (Bob): 200",
            "  - Live dice sum: 12",
            "- Bob wins",
            "==",
            "",
        ]

    def test_status_failure_still_announces_winner(self, ledger, operator, make_context):
        ledger.fail_read["getChips"] = "node down"

        with pytest.raises(SystemExit) as exc_info:
            _terminator(make_context()).on_game_end(GameOutcome(PlayerSeat.from_index(0)))

        assert exc_info.value.code == 0
        assert "- Alice wins" in operator.lines
        assert len(operator.warnings) == 1
        assert operator.warnings[0].startswith("ERROR.")
