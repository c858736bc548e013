"""Formatting utilities for CLI output.

Handles human-readable tables, draw-command listings and JSON envelope
wrapping.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any

# JSON envelope version, bump on breaking changes to JSON structure
SCHEMA_VERSION = 1

MAX_LINES = 100


def json_envelope(command: str, data: Any) -> dict[str, Any]:
    """Wrap data in the standard JSON output envelope."""
    return {
        "schema_version": SCHEMA_VERSION,
        "command": command,
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "data": data,
    }


def print_json(command: str, data: Any, output: str | None = None) -> None:
    """Print JSON envelope to stdout or write to file."""
    envelope = json_envelope(command, data)
    text = json.dumps(envelope, indent=2, default=str)

    if output:
        with open(output, "w") as f:
            f.write(text)
        size_kb = len(text.encode()) / 1024
        print(f"Wrote {command} output to {output} ({size_kb:.1f}KB)")
    else:
        print(text)


def format_seconds(seconds: float | None) -> str:
    """Format a timeline position for display."""
    if seconds is None:
        return "—"
    return f"{seconds:.2f}s"


def format_px(value: float) -> str:
    """Pixel coordinate with at most two decimals: 200.0 -> '200', 12.5 -> '12.5'."""
    return f"{value:.2f}".rstrip("0").rstrip(".")


DRAW_COMMAND_HEADERS = ["#", "Op", "X", "Y", "W / X1", "H / Y1", "Color"]


def draw_command_rows(commands: list[dict[str, Any]]) -> list[list[str]]:
    """Table rows for recorded draw commands (``RecordingSurface.to_list()``).

    Rectangles fill X/Y/W/H; lines put their start point in X/Y and their
    end point in the last two coordinate columns.
    """
    rows = []
    for i, cmd in enumerate(commands):
        if cmd["op"] == "stroke":
            coords = (cmd["x0"], cmd["y0"], cmd["x1"], cmd["y1"])
        else:
            coords = (cmd["x"], cmd["y"], cmd["w"], cmd["h"])
        rows.append([str(i), cmd["op"], *(format_px(c) for c in coords), cmd.get("color", "")])
    return rows


def print_table(headers: list[str], rows: list[list[str]], indent: int = 2) -> list[str]:
    """Format a table with aligned columns.

    Returns list of lines (does not print).
    """
    if not rows:
        return []

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            if i < len(widths):
                widths[i] = max(widths[i], len(cell))

    prefix = " " * indent
    lines = [
        prefix + "  ".join(h.ljust(widths[i]) for i, h in enumerate(headers)),
        prefix + "  ".join("─" * w for w in widths),
    ]
    for row in rows:
        lines.append(prefix + "  ".join(cell.ljust(widths[i]) for i, cell in enumerate(row) if i < len(widths)))
    return lines


def print_lines(lines: list[str], max_lines: int = MAX_LINES) -> None:
    """Print lines with truncation warning if too many."""
    for line in lines[:max_lines]:
        print(line)
    if len(lines) > max_lines:
        print(f"\n  # ... {len(lines) - max_lines} more lines")
