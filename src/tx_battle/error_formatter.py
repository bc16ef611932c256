# Area: Shared
"""Framed error blocks for engine errors, printed to stderr and logged."""

from __future__ import annotations
import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

FRAME_WIDTH = 64
TITLE = "TX BATTLE ERROR"


def _utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def _section(title: str) -> List[str]:
    heading = f" ── {title} "
    return ["", heading + "─" * (FRAME_WIDTH - len(heading))]


def format_error_block(
    error_type: str,
    operation: str,
    details: Optional[Dict[str, Any]],
    validation_errors: Optional[List[str]] = None,
) -> str:
    """
    Build the framed block for one error.

    ``details`` is rendered as indented JSON; ``validation_errors`` as a
    bullet list. Either section is omitted when empty.
    """
    rule = "=" * FRAME_WIDTH
    lines = [
        "",
        rule,
        f" {TITLE}",
        rule,
        f" Timestamp:    {_utc_timestamp()}",
        f" Error Type:   {error_type}",
        f" Operation:    {operation}",
    ]

    if details:
        lines += _section("DETAILS")
        lines.append(indent_json(details))

    if validation_errors:
        lines += _section("VALIDATION ERRORS")
        lines += [f" • {message}" for message in validation_errors]

    lines += ["", rule, ""]
    return "\n".join(lines)


def indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Pretty JSON shifted one column right; falls back to repr."""
    try:
        text = json.dumps(data, indent=indent, default=str)
    except (TypeError, ValueError):
        return f" {data!r}"
    return "\n".join(f" {line}" for line in text.splitlines())
