"""Invulnerability window lookups for enemy targets."""

from dataclasses import dataclass

ALL_TARGETS = "all"


@dataclass(frozen=True)
class InvulnWindow:
    """Half-open interval [start_ms, end_ms) where a target can't be affected.

    target_id None means the window covers every enemy. Untargetable windows
    are a subset of invulnerable ones.
    """
    start_ms: int
    end_ms: int
    target_id: int | None = None
    untargetable: bool = False


def merge_intervals(intervals: list[tuple[int, int]]) -> list[tuple[int, int]]:
    """Sort and merge overlapping or touching [start, end) intervals."""
    merged: list[tuple[int, int]] = []
    for start, end in sorted(intervals):
        if end <= start:
            continue
        if merged and start <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged


def overlap_ms(
    intervals: list[tuple[int, int]], start: int, end: int,
) -> int:
    """Total length of merged intervals falling inside [start, end)."""
    total = 0
    for i_start, i_end in intervals:
        lo = max(i_start, start)
        hi = min(i_end, end)
        if hi > lo:
            total += hi - lo
    return total


class InvulnerabilityWindows:
    """Answers overlap queries against a fixed set of invulnerability windows.

    Scope is either ALL_TARGETS ("all"), which only considers windows that
    apply to every enemy, or a target ID, which also includes that target's
    own windows.
    """

    def __init__(self, windows: list[InvulnWindow], fight_duration_ms: int):
        self._windows = list(windows)
        self._fight_duration_ms = fight_duration_ms

    def _intervals(self, scope, untargetable_only: bool) -> list[tuple[int, int]]:
        intervals = []
        for w in self._windows:
            if untargetable_only and not w.untargetable:
                continue
            if w.target_id is not None and w.target_id != scope:
                continue
            intervals.append((w.start_ms, w.end_ms))
        return merge_intervals(intervals)

    def get_untargetable_uptime(self, scope, start: int, end: int) -> int:
        """Milliseconds the scope was untargetable inside [start, end)."""
        return overlap_ms(self._intervals(scope, True), start, end)

    def get_invulnerable_uptime(
        self, scope=ALL_TARGETS, start: int | None = None, end: int | None = None,
    ) -> int:
        """Milliseconds the scope was invulnerable inside [start, end).

        With no bounds, returns the total inside the fight.
        """
        if start is None:
            start = 0
        if end is None:
            end = self._fight_duration_ms
        return overlap_ms(self._intervals(scope, False), start, end)
