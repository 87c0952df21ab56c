# Area: Shared
# PRD: docs/prd-hilo-client.md
"""
hilo_client._shared.display — Operator-facing text
==================================================

ANSI color codes, prompts and line builders used when talking to the
seat operator. Keeping every displayed string here keeps the round
handler free of formatting.
"""

from typing import List

from ..types import PlayerSeat, Snapshot, SEAT_LABELS

# ══════════════════════════════════════════════════════════════
# ANSI COLOR CODES
# ══════════════════════════════════════════════════════════════

RED = "\033[31m"         # Errors
RESET = "\033[0m"

# ══════════════════════════════════════════════════════════════
# PROMPTS
# ══════════════════════════════════════════════════════════════

AMOUNT_QUESTION = "  - How many chips? "
DIRECTION_QUESTION = "  - Higher (H) or lower (L)? "
INVALID_INPUT = "ERROR. Invalid input. Try again."

# ══════════════════════════════════════════════════════════════
# SECTION LINES
# ══════════════════════════════════════════════════════════════

SECTION_END = "=="
BET_SECTION = "- Bet"
PROCESS_SECTION = "- Process"
COMMITTED_LINE = "  - Committed to bet"
REVEALED_LINE = "  - Revealed bet"
GAME_ENDED_HEADER = "== Game has ended"


def round_header(round_index: int) -> str:
    return f"== Beginning round {round_index}"


def claim_header(seat: PlayerSeat) -> str:
    return f"== Claiming {seat.label} slot"


def winner_line(seat: PlayerSeat) -> str:
    return f"- {seat.label} wins"


def status_lines(snapshot: Snapshot, mark_label: str) -> List[str]:
    """Render a status snapshot as display lines."""
    return [
        "- Status",
        f"  - Number of chips ({SEAT_LABELS[0]}): {snapshot.balance_seat0}",
        f"  - Number of chips ({SEAT_LABELS[1]}): {snapshot.balance_seat1}",
        f"  - {mark_label}: {snapshot.live_mark_description}",
    ]


def error_line(message: str) -> str:
    return f"ERROR. {message}"
