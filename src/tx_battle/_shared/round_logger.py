# Area: Shared
"""
tx_battle._shared.round_logger — Round display lines
====================================================

Colored terminal lines for the round lifecycle: start, prediction,
countdown, resolution and errors. Used by the runner in display mode.
"""

from __future__ import annotations
import sys
from datetime import datetime
from typing import Iterable, Optional

from ..types import TransactionSummary

# ══════════════════════════════════════════════════════════════
# ANSI COLOR CODES
# ══════════════════════════════════════════════════════════════

GREEN = "\033[32m"          # Round lifecycle
ORANGE = "\033[38;5;208m"   # Bitcoin data
RED = "\033[31m"            # Errors
RESET = "\033[0m"

# ══════════════════════════════════════════════════════════════
# DISPLAY NAMES
# ══════════════════════════════════════════════════════════════

RESOLUTION_DISPLAY_NAMES = {
    "new_block": "NEW-BLOCK",
    "countdown_expired": "TIME-UP",
    "manual": "MANUAL",
}

FIELD_DISPLAY_NAMES = {
    "tx_count": "TX-COUNT",
    "block_size": "BLOCK-SIZE",
    "difficulty": "DIFFICULTY",
}


def _hit_mark(hit: Optional[bool]) -> str:
    if hit is None:
        return "-"
    return "HIT" if hit else "MISS"


class RoundLogger:
    """Printer for round lifecycle lines."""

    def _now(self) -> str:
        return datetime.now().strftime("%H:%M:%S")

    def _print(self, color: str, text: str) -> None:
        print(f"{color}{self._now()} | {text}{RESET}", file=sys.stdout)

    def log_round_started(self, snapshot: dict) -> None:
        block = snapshot["current_block"]
        self._print(
            GREEN,
            f"ROUND STARTED | BLOCK {block['height']} | "
            f"TX {block['tx_count']} | SIZE {block['size_bytes']} | "
            f"WINDOW {snapshot['time_remaining_seconds']}s",
        )

    def log_prediction(self, snapshot: dict) -> None:
        prediction = snapshot["prediction"] or {}
        parts = [
            f"{FIELD_DISPLAY_NAMES[name]} {value}"
            for name, value in prediction.items()
            if value is not None
        ]
        self._print(GREEN, "PREDICTION | " + " | ".join(parts))

    def log_countdown(self, seconds: int) -> None:
        minutes, secs = divmod(seconds, 60)
        self._print(GREEN, f"WAITING FOR NEXT BLOCK | {minutes:02d}:{secs:02d} LEFT")

    def log_resolved(self, snapshot: dict) -> None:
        block = snapshot["next_block"]
        reason = RESOLUTION_DISPLAY_NAMES.get(snapshot["resolved_by"], snapshot["resolved_by"])
        self._print(
            ORANGE,
            f"RESOLVED BY {reason} | BLOCK {block['height']} | "
            f"TX {block['tx_count']} | SIZE {block['size_bytes']} | "
            f"DIFFICULTY {block['difficulty']:.2f}",
        )

        outcome = snapshot["outcome"]
        if outcome is None:
            self._print(GREEN, "NO PREDICTION | STATS UNCHANGED")
        else:
            self._print(
                GREEN,
                f"TX-COUNT {_hit_mark(outcome['tx_count_hit'])} | "
                f"BLOCK-SIZE {_hit_mark(outcome['block_size_hit'])} | "
                f"DIFFICULTY {_hit_mark(outcome['difficulty_hit'])} | "
                f"+{outcome['points']} POINTS | {'WIN' if outcome['correct'] else 'LOSS'}",
            )

        stats = snapshot["stats"]
        self._print(
            GREEN,
            f"SCORE {stats['score']} | STREAK {stats['streak']} | "
            f"WINS {stats['wins']}/{stats['total_games']} "
            f"({stats['win_rate'] * 100:.0f}%)",
        )

    def log_transactions(self, transactions: Iterable[TransactionSummary]) -> None:
        for tx in transactions:
            self._print(
                ORANGE,
                f"TX {tx.txid[:10]}...{tx.txid[-8:]} | "
                f"{tx.input_count} IN -> {tx.output_count} OUT | "
                f"{tx.total_output_sats / 1e8:.8f} BTC | FEE {tx.fee} sat",
            )

    def log_error(self, description: str) -> None:
        line = f"{RED}[ERROR] {self._now()} | {description}{RESET}"
        print(line, file=sys.stderr)
