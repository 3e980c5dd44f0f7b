"""Severity grading and plain-text summaries for DoT clip metrics."""

from __future__ import annotations

from typing import Any

MINOR = "minor"
MEDIUM = "medium"
MAJOR = "major"


def format_duration(ms: int) -> str:
    """Format milliseconds as 'Xm Ys'."""
    seconds = ms // 1000
    return f"{seconds // 60}m {seconds % 60}s"


def clip_severity(
    max_clip_ms: int,
    minor_threshold_ms: int = 10000,
    major_threshold_ms: int = 30000,
) -> str:
    """Grade the worst DoT's clip total into minor / medium / major."""
    if max_clip_ms < minor_threshold_ms:
        return MINOR
    if max_clip_ms < major_threshold_ms:
        return MEDIUM
    return MAJOR


def format_clip_summary(metrics: dict[str, Any]) -> str:
    """Build the one-line clip explanation from analyze_dots_for_fight() output.

    Example: "0m 12s of Bio III and 0m 3s of Miasma III lost to early refreshes."
    """
    parts = [
        f"{format_duration(row['clip_ms'])} of {row['ability_name']}"
        for row in metrics["dots"]
    ]
    if not parts:
        return "No DoTs tracked."
    if len(parts) == 1:
        joined = parts[0]
    else:
        joined = ", ".join(parts[:-1]) + f" and {parts[-1]}"
    return f"{joined} lost to early refreshes."


def format_uptime_lines(metrics: dict[str, Any]) -> list[str]:
    lines = []
    for row in metrics["dots"]:
        pct = row["uptime_pct"]
        shown = f"{pct:.1f}%" if pct is not None else "n/a"
        lines.append(f"{row['ability_name']} uptime: {shown}")

    cd = metrics.get("cooldown_effect")
    if cd:
        pct = cd["max_uptime_pct"]
        shown = f"{pct:.1f}%" if pct is not None else "n/a"
        lines.append(f"{cd['ability_name']} uptime (of max): {shown}")
    return lines
