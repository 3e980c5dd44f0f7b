"""Status active-duration totals built from apply/remove event pairs."""

import logging

from jizoku.pipeline.invuln import ALL_TARGETS, merge_intervals

logger = logging.getLogger(__name__)


class StatusUptime:
    """Pairs status applications with removals per (target, status).

    A refresh while the status is already up keeps the original start. Any
    interval still open when queried is closed at fight end. Intervals are
    merged across targets, so uptime is time the status was on at least one
    target. When invuln windows are given, time the enemies were invulnerable
    is not counted as active.
    """

    def __init__(self, fight_duration_ms: int, invuln=None):
        self.fight_duration_ms = fight_duration_ms
        self._invuln = invuln
        self._open: dict[tuple[int, int], int] = {}
        self._closed: dict[int, list[tuple[int, int]]] = {}
        self._seen: set[tuple[int, int]] = set()

    def apply(self, target_id: int, status_id: int, timestamp: int) -> None:
        key = (target_id, status_id)
        self._seen.add(key)
        self._open.setdefault(key, timestamp)

    def remove(self, target_id: int, status_id: int, timestamp: int) -> None:
        key = (target_id, status_id)
        start = self._open.pop(key, None)
        if start is None:
            if key in self._seen:
                logger.debug(
                    "Ignoring stray removal of status %d from %d at %d",
                    status_id, target_id, timestamp,
                )
                return
            # Applied before the fight window began
            logger.debug(
                "Status %d removed from %d at %d with no tracked application",
                status_id, target_id, timestamp,
            )
            start = 0
        self._seen.add(key)
        self._closed.setdefault(status_id, []).append((start, timestamp))

    def get_status_uptime(self, status_id: int) -> int:
        intervals = list(self._closed.get(status_id, []))
        for (_target_id, open_status_id), start in self._open.items():
            if open_status_id == status_id:
                intervals.append((start, self.fight_duration_ms))

        total = 0
        for start, end in merge_intervals(intervals):
            total += end - start
            if self._invuln is not None:
                total -= self._invuln.get_invulnerable_uptime(ALL_TARGETS, start, end)
        return total
