"""
hilo_client.errors — Custom exception classes
==============================================

Defines the exception hierarchy for the HiLo client.
Each exception stores full context for structured logging.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Dict, List, Optional
import json


class HiLoClientError(Exception):
    """Base exception for all HiLo client errors."""
    pass


class ConfigurationError(HiLoClientError):
    """Raised when configuration or contract artifacts are unusable."""

    def __init__(self, message: str, problems: Optional[List[str]] = None):
        self.problems = problems or []
        super().__init__(message)

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="CONFIGURATION_ERROR",
            operation="configure",
            context=None,
            details=self.problems or [str(self)],
        )


class InvalidBetReason(Enum):
    """Why a proposed bet was rejected."""
    UNKNOWN_DIRECTION = "direction must be H (higher) or L (lower)"
    NOT_AN_INTEGER = "amount must be a whole number of chips"
    NEGATIVE_AMOUNT = "amount must not be negative"
    EXCEEDS_BALANCE = "amount exceeds your chip balance"


class InvalidBetError(HiLoClientError):
    """Raised when operator input does not form a valid bet."""

    def __init__(self, reason: InvalidBetReason):
        self.reason = reason
        super().__init__(f"Invalid bet: {reason.value}")


class ProtocolSequenceError(HiLoClientError):
    """Raised when a notification arrives in a phase that cannot accept it."""

    def __init__(
        self,
        notification: str,
        phase: str,
        round_index: Optional[int],
        detail: str,
    ):
        self.notification = notification
        self.phase = phase
        self.round_index = round_index
        self.detail = detail
        where = f"round {round_index}" if round_index is not None else "no round"
        super().__init__(
            f"Protocol error on {notification} ({where}, phase {phase}): {detail}"
        )

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="PROTOCOL_SEQUENCE_ERROR",
            operation=self.notification,
            context={"phase": self.phase, "round_index": self.round_index},
            details=[self.detail],
        )


class SubmissionError(HiLoClientError):
    """Raised when the ledger rejects an outbound transaction."""

    def __init__(
        self,
        operation: str,
        reason: str,
        arguments: Optional[Dict[str, Any]] = None,
    ):
        self.operation = operation
        self.reason = reason
        self.arguments = arguments or {}
        super().__init__(f"Submitting '{operation}' failed: {reason}")

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="SUBMISSION_ERROR",
            operation=self.operation,
            context=self.arguments,
            details=[self.reason],
        )


class SeatClaimError(SubmissionError):
    """Raised when the seat claim is rejected. Always fatal."""

    def __init__(self, seat_index: int, seat_label: str, reason: str):
        self.seat_index = seat_index
        self.seat_label = seat_label
        super().__init__(
            operation="claimPlayer",
            reason=reason,
            arguments={"seat": seat_index, "label": seat_label},
        )

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="SEAT_CLAIM_REJECTED",
            operation=self.operation,
            context=self.arguments,
            details=[self.reason],
        )


class LedgerReadError(HiLoClientError):
    """Raised when reading contract state fails."""

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"Reading '{operation}' failed: {reason}")

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="LEDGER_READ_ERROR",
            operation=self.operation,
            context=None,
            details=[self.reason],
        )


def _format_error_block(
    error_type: str,
    operation: str,
    context: Optional[Dict[str, Any]],
    details: Optional[List[str]],
) -> str:
    """Format a structured error block for terminal output."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " HILO CLIENT ERROR",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Operation:    {operation}",
    ]

    if context:
        lines.append("")
        lines.append(" ── CONTEXT " + "─" * 52)
        lines.append(_indent_json(context))

    if details:
        lines.append("")
        lines.append(" ── DETAILS " + "─" * 52)
        for detail in details:
            lines.append(f" • {detail}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
