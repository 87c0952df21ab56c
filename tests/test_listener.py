# Area: Runner Tests
# PRD: docs/prd-hilo-client.md
"""Tests for the event listener."""

import io

from unittest.mock import patch

from conftest import make_log
from hilo_client._shared import ALL_EVENTS
from hilo_client.listener import EventListener, format_event


class TestFormatEvent:
    """Tests for format_event()."""

    def test_name_and_arguments(self):
        log = make_log("RevealBet", player=1, amount=20, higher=True)
        assert format_event(log) == {
            "eventName": "RevealBet",
            "args": {"player": 1, "amount": 20, "higher": True},
        }

    def test_event_without_arguments(self):
        assert format_event({"event": "OpenRound"}) == {"eventName": "OpenRound", "args": {}}


class TestEventListener:
    """Tests for EventListener."""

    def test_start_subscribes_to_every_event(self, ledger):
        EventListener(ledger).start()
        assert ledger.connected is True
        assert ledger.subscribed == list(ALL_EVENTS)

    def test_poll_once_prints_each_event(self, ledger):
        out = io.StringIO()
        ledger.logs = [
            make_log("CommitBet", player=0),
            make_log("OpenRound", roundIndex=1),
        ]

        count = EventListener(ledger, out=out).poll_once()

        assert count == 2
        assert out.getvalue().splitlines() == [
            "{'eventName': 'CommitBet', 'args': {'player': 0}}",
            "{'eventName': 'OpenRound', 'args': {'roundIndex': 1}}",
        ]

    def test_never_submits(self, ledger):
        ledger.logs = [make_log("GameEnd", winnerIdx=0)]
        EventListener(ledger, out=io.StringIO()).poll_once()
        assert ledger.submitted == []

    @patch("hilo_client.listener.time.sleep", side_effect=KeyboardInterrupt)
    @patch("hilo_client.listener.signal.signal")
    def test_run_stops_on_interrupt(self, mock_signal, mock_sleep, ledger):
        out = io.StringIO()
        ledger.logs = [make_log("CloseRound", roundIndex=4)]

        EventListener(ledger, out=out).run()

        assert "CloseRound" in out.getvalue()
        mock_signal.assert_called_once()
