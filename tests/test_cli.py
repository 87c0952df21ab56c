# Area: Runner Tests
# PRD: docs/prd-hilo-client.md
"""Tests for the hilo-client and hilo-listen entry points."""

import pytest
from unittest.mock import MagicMock, patch

from conftest import TEST_PRIVATE_KEY
from hilo_client._runner_config import DEFAULT_CONTRACTS_OUT, ENV_MAPPINGS
from hilo_client.cli import cli_overrides, listen_main, main, parse_args
from hilo_client.demo_operator import DemoOperator
from hilo_client.errors import ConfigurationError
from hilo_client.operator import ConsoleOperator


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep HILO_* variables and .env files out of the tests."""
    for key in list(ENV_MAPPINGS) + ["HILO_DEMO"]:
        monkeypatch.delenv(key, raising=False)
    with patch("hilo_client.cli.load_dotenv"):
        yield


class TestParseArgs:
    """Tests for argument parsing."""

    def test_seat_and_key(self):
        args = parse_args(["1", TEST_PRIVATE_KEY])
        assert args.seat == 1
        assert args.private_key == TEST_PRIVATE_KEY

    def test_key_is_optional(self):
        assert parse_args(["0"]).private_key is None

    def test_seat_required(self):
        with pytest.raises(SystemExit):
            parse_args([])

    def test_unknown_variant_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["0", "--variant", "poker"])

    def test_overrides_only_given_flags(self):
        args = parse_args(["0", "--poll-interval", "0.5", "--rpc-url", "http://node:8545"])
        assert cli_overrides(args) == {
            "seat": 0,
            "poll_interval_seconds": 0.5,
            "rpc_url": "http://node:8545",
        }


class TestMain:
    """Tests for main()."""

    def test_missing_private_key_exits_1(self, capsys):
        assert main(["0"]) == 1
        err = capsys.readouterr().err
        assert err.startswith("Error:")
        assert "private_key" in err

    def test_seat_out_of_range_exits_1(self, capsys):
        assert main(["2", TEST_PRIVATE_KEY]) == 1
        assert "seat" in capsys.readouterr().err

    @patch("hilo_client.runner.HiLoRunner")
    def test_runs_console_operator(self, mock_runner):
        assert main(["1", TEST_PRIVATE_KEY, "--variant", "cards", "--poll-interval", "0.5"]) == 0

        kwargs = mock_runner.call_args.kwargs
        config = kwargs["config"]
        assert (config.seat, config.variant, config.poll_interval_seconds) == (1, "cards", 0.5)
        assert type(kwargs["operator"]) is ConsoleOperator
        mock_runner.return_value.run.assert_called_once()

    @patch("hilo_client.runner.HiLoRunner")
    def test_private_key_from_environment(self, mock_runner, monkeypatch):
        monkeypatch.setenv("HILO_PRIVATE_KEY", TEST_PRIVATE_KEY)
        assert main(["0"]) == 0
        assert mock_runner.call_args.kwargs["config"].private_key == TEST_PRIVATE_KEY

    @patch("hilo_client.runner.HiLoRunner")
    def test_cli_key_beats_environment(self, mock_runner, monkeypatch):
        monkeypatch.setenv("HILO_PRIVATE_KEY", "0x" + "cd" * 32)
        assert main(["0", TEST_PRIVATE_KEY]) == 0
        assert mock_runner.call_args.kwargs["config"].private_key == TEST_PRIVATE_KEY

    @patch("hilo_client.runner.HiLoRunner")
    def test_demo_flag(self, mock_runner):
        main(["0", TEST_PRIVATE_KEY, "--demo"])
        assert isinstance(mock_runner.call_args.kwargs["operator"], DemoOperator)

    @patch("hilo_client.runner.HiLoRunner")
    def test_demo_environment(self, mock_runner, monkeypatch):
        monkeypatch.setenv("HILO_DEMO", "true")
        main(["0", TEST_PRIVATE_KEY])
        assert mock_runner.call_args.kwargs["config"].demo is True

    @patch("hilo_client.runner.HiLoRunner")
    def test_missing_artifacts_exit_1(self, mock_runner, capsys):
        mock_runner.side_effect = ConfigurationError("Contract artifact not found: out/HiLoDice.sol/HiLoDice.json")
        assert main(["0", TEST_PRIVATE_KEY]) == 1
        assert "Contract artifact not found" in capsys.readouterr().err


class TestListenMain:
    """Tests for listen_main()."""

    def test_missing_artifacts_exit_1(self, tmp_path, capsys):
        assert listen_main(["--contracts-out", str(tmp_path)]) == 1
        assert "Error:" in capsys.readouterr().err

    @patch("hilo_client.listener.EventListener")
    @patch("hilo_client._shared.Web3Ledger")
    @patch("hilo_client._shared.load_artifacts")
    def test_runs_read_only_listener(self, mock_load, mock_ledger, mock_listener):
        mock_load.return_value = MagicMock(abi=[], address="0x5FbDB2315678afecb367f032d93F642f64180aa3")

        assert listen_main(["--variant", "dice"]) == 0

        mock_load.assert_called_once_with(DEFAULT_CONTRACTS_OUT, "HiLoDice")
        assert "private_key" not in mock_ledger.call_args.kwargs
        mock_listener.assert_called_once_with(mock_ledger.return_value, poll_interval=1.0)
        mock_listener.return_value.run.assert_called_once()
