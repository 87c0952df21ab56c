# Area: Shared
# PRD: docs/prd-hilo-client.md
"""
Shared plumbing used by the runner, the listener and the core.

This package contains:
- Ledger access (web3.py)
- Contract artifact loading
- Logging configuration
- Operator-facing display text
"""

from .ledger import Ledger, Web3Ledger, ROUND_EVENTS, ALL_EVENTS
from .artifacts import ContractArtifacts, load_artifacts
from .logging_config import (
    setup_logging,
    log_and_terminate,
    log_error_block,
    enable_console_mode,
    disable_console_mode,
)

__all__ = [
    "Ledger",
    "Web3Ledger",
    "ROUND_EVENTS",
    "ALL_EVENTS",
    "ContractArtifacts",
    "load_artifacts",
    "setup_logging",
    "log_and_terminate",
    "log_error_block",
    "enable_console_mode",
    "disable_console_mode",
]
