"""DoT clip accounting and uptime getters for a single encounter."""

import logging

from jizoku.pipeline.constants import CooldownEffectDef, DotDef
from jizoku.pipeline.invuln import ALL_TARGETS
from jizoku.pipeline.uptime import percent_uptime, theoretical_max_uptime_percent

logger = logging.getLogger(__name__)


class DotTrackerError(Exception):
    pass


class OutOfOrderEventError(DotTrackerError):
    """An application arrived earlier than the stored one for its target/status."""


class UnknownEffectError(DotTrackerError):
    """A status ID that was never registered for tracking."""


class MissingStatusUptimeError(DotTrackerError):
    """An uptime getter was called on a tracker built without a status uptime service."""


class DotTracker:
    """Accumulates DoT clip from a time-ordered stream of applications.

    Collaborators are passed in explicitly:
      invuln: object with get_untargetable_uptime(scope, start, end) and
        get_invulnerable_uptime(scope, start=None, end=None).
      status_uptime: object with get_status_uptime(status_id) -> ms.
      cooldown_effect: the cooldown-gated effect for the theoretical max
        getter, or None if the job has none.

    One instance per encounter. Events must be fed in non-decreasing
    timestamp order per (target, status).
    """

    def __init__(
        self,
        dots: tuple[DotDef, ...] | list[DotDef],
        invuln,
        fight_duration_ms: int,
        status_uptime=None,
        cooldown_effect: CooldownEffectDef | None = None,
    ):
        self._dots = {d.status_id: d for d in dots}
        self._invuln = invuln
        self._status_uptime = status_uptime
        self._cooldown_effect = cooldown_effect
        self.fight_duration_ms = fight_duration_ms

        # target_id -> status_id -> last application timestamp
        self._last_application: dict[int, dict[int, int]] = {}
        self._clip: dict[int, int] = {status_id: 0 for status_id in self._dots}

    def _get_dot(self, status_id: int) -> DotDef:
        dot = self._dots.get(status_id)
        if dot is None:
            raise UnknownEffectError(f"Status {status_id} is not tracked")
        return dot

    def record_application(
        self, target_id: int, status_id: int, timestamp: int, is_rushing: bool,
    ) -> None:
        dot = self._get_dot(status_id)
        last_application = self._last_application.setdefault(target_id, {})
        last = last_application.get(status_id)

        if last is not None and timestamp < last:
            raise OutOfOrderEventError(
                f"Status {status_id} on target {target_id} applied at {timestamp}, "
                f"before previous application at {last}"
            )

        # First application or rushing: set the baseline, no clip
        if last is None or is_rushing:
            last_application[status_id] = timestamp
            return

        clip = dot.duration_ms - (timestamp - last)

        # Untargetable time in the previous application's window couldn't
        # have ticked anyway
        clip -= self._invuln.get_untargetable_uptime(
            ALL_TARGETS, timestamp - dot.duration_ms, timestamp,
        )

        # Invuln time ahead that a later refresh would just have pushed the DoT into
        clip -= self._invuln.get_invulnerable_uptime(
            ALL_TARGETS, timestamp, timestamp + dot.duration_ms + clip,
        )

        # Negative clip is downtime, which uptime already accounts for
        clip = max(0, clip)
        if clip:
            logger.debug(
                "Clipped %dms of %s on target %d at %d",
                clip, dot.name, target_id, timestamp,
            )
        self._clip[status_id] += clip

        last_application[status_id] = timestamp

    def get_accumulated_clip(self, status_id: int) -> int:
        self._get_dot(status_id)
        return self._clip[status_id]

    def get_max_clip(self) -> int:
        return max(self._clip.values(), default=0)

    def _get_status_uptime(self, status_id: int) -> int:
        if self._status_uptime is None:
            raise MissingStatusUptimeError(
                f"No status uptime service to measure status {status_id}"
            )
        return self._status_uptime.get_status_uptime(status_id)

    def get_dot_uptime_percent(self, status_id: int) -> float:
        self._get_dot(status_id)
        return percent_uptime(
            self._get_status_uptime(status_id),
            self.fight_duration_ms,
            self._invuln.get_invulnerable_uptime(),
        )

    def get_theoretical_max_uptime_percent(self) -> float:
        effect = self._cooldown_effect
        if effect is None:
            raise UnknownEffectError("No cooldown-gated effect registered")
        return theoretical_max_uptime_percent(
            self._get_status_uptime(effect.status_id),
            self.fight_duration_ms,
            self._invuln.get_invulnerable_uptime(),
            effect.cooldown_ms,
            effect.duration_ms,
        )
