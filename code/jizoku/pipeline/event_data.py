"""Pipeline for turning a fight's status events into DoT uptime/clip metrics."""

import logging

from jizoku.config import Settings, get_settings
from jizoku.pipeline.constants import (
    APPLICATION_EVENT_TYPES,
    SHADOW_FLARE,
    STATUS_APPLY_TYPES,
    STATUS_REMOVE_TYPES,
    SUMMONER_DOTS,
    CooldownEffectDef,
    DotDef,
)
from jizoku.pipeline.dots import DotTracker
from jizoku.pipeline.invuln import InvulnerabilityWindows, InvulnWindow
from jizoku.pipeline.report import clip_severity
from jizoku.pipeline.rushing import RushingWindows
from jizoku.pipeline.status_uptime import StatusUptime

logger = logging.getLogger(__name__)


def normalize_status_events(
    events: list[dict],
    fight_start_time: int,
    source_id: int | None = None,
    status_ids: set[int] | None = None,
) -> list[dict]:
    """Filter raw WCL status events and rebase them to fight-relative time.

    Args:
        events: Raw events with "type", "timestamp", "sourceID", "targetID",
            "abilityGameID".
        fight_start_time: Absolute fight start timestamp (ms).
        source_id: Only keep events from this actor (None = all sources).
        status_ids: Only keep these status IDs (None = all statuses).

    Returns:
        List of {"type", "timestamp", "target_id", "status_id"} dicts, stably
        sorted by timestamp.
    """
    kinds = STATUS_APPLY_TYPES | STATUS_REMOVE_TYPES
    results = []
    for event in events:
        event_type = event.get("type")
        if event_type not in kinds:
            continue
        if source_id is not None and event.get("sourceID") != source_id:
            continue
        status_id = event.get("abilityGameID", 0)
        if status_ids is not None and status_id not in status_ids:
            continue

        target_id = event.get("targetID")
        if target_id is None:
            # Self-applied buffs may omit the target
            target_id = event.get("sourceID", 0)

        results.append({
            "type": event_type,
            "timestamp": event.get("timestamp", 0) - fight_start_time,
            "target_id": target_id,
            "status_id": status_id,
        })

    results.sort(key=lambda e: e["timestamp"])
    return results


def analyze_dots_for_fight(
    events: list[dict],
    fight_start_time: int,
    fight_duration_ms: int,
    invuln_windows: list[InvulnWindow],
    source_id: int | None = None,
    settings: Settings | None = None,
    dots: tuple[DotDef, ...] = SUMMONER_DOTS,
    cooldown_effect: CooldownEffectDef | None = SHADOW_FLARE,
) -> dict:
    """Run the DoT tracker over one fight and collect its metrics.

    Invuln windows must already be fight-relative.

    Returns:
        Dict with: dots (per-DoT uptime/clip rows), cooldown_effect (theoretical
        max row or None), invulnerable_ms, max_clip_ms, clip_severity.
        Percentages are None when the target was invulnerable all fight.
    """
    settings = settings or get_settings()

    invuln = InvulnerabilityWindows(invuln_windows, fight_duration_ms)
    rushing = RushingWindows(
        fight_duration_ms,
        opener_ms=settings.rushing.opener_ms,
        closer_ms=settings.rushing.closer_ms,
    )
    status_uptime = StatusUptime(fight_duration_ms, invuln=invuln)
    tracker = DotTracker(
        dots, invuln, fight_duration_ms,
        status_uptime=status_uptime,
        cooldown_effect=cooldown_effect,
    )

    dot_ids = {d.status_id for d in dots}
    status_ids = set(dot_ids)
    if cooldown_effect is not None:
        status_ids.add(cooldown_effect.status_id)

    normalized = normalize_status_events(
        events, fight_start_time, source_id=source_id, status_ids=status_ids,
    )
    for event in normalized:
        ts = event["timestamp"]
        if event["type"] in STATUS_REMOVE_TYPES:
            status_uptime.remove(event["target_id"], event["status_id"], ts)
            continue

        status_uptime.apply(event["target_id"], event["status_id"], ts)
        if event["type"] in APPLICATION_EVENT_TYPES and event["status_id"] in dot_ids:
            tracker.record_application(
                event["target_id"], event["status_id"], ts, rushing.is_rushing(ts),
            )

    invulnerable_ms = invuln.get_invulnerable_uptime()
    targetable = fight_duration_ms - invulnerable_ms > 0
    if not targetable:
        logger.warning(
            "Target invulnerable for the whole fight (%dms), skipping uptime percentages",
            fight_duration_ms,
        )

    dot_rows = []
    for dot in dots:
        dot_rows.append({
            "status_id": dot.status_id,
            "ability_name": dot.name,
            "uptime_ms": status_uptime.get_status_uptime(dot.status_id),
            "uptime_pct": (
                round(tracker.get_dot_uptime_percent(dot.status_id), 1)
                if targetable else None
            ),
            "clip_ms": tracker.get_accumulated_clip(dot.status_id),
        })

    cooldown_row = None
    if cooldown_effect is not None:
        cooldown_row = {
            "status_id": cooldown_effect.status_id,
            "ability_name": cooldown_effect.name,
            "uptime_ms": status_uptime.get_status_uptime(cooldown_effect.status_id),
            "max_uptime_pct": (
                round(tracker.get_theoretical_max_uptime_percent(), 1)
                if targetable else None
            ),
        }

    max_clip_ms = tracker.get_max_clip()
    severity = clip_severity(
        max_clip_ms,
        minor_threshold_ms=settings.clip.minor_threshold_ms,
        major_threshold_ms=settings.clip.major_threshold_ms,
    )

    logger.info(
        "Analyzed %d status events over %dms: max clip %dms (%s)",
        len(normalized), fight_duration_ms, max_clip_ms, severity,
    )
    return {
        "dots": dot_rows,
        "cooldown_effect": cooldown_row,
        "invulnerable_ms": invulnerable_ms,
        "max_clip_ms": max_clip_ms,
        "clip_severity": severity,
    }
