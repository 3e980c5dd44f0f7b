"""Uptime percentage calculators.

Both calculators are pure and read-only. They refuse to divide by a fight
window that is fully invulnerable instead of returning NaN or 0.
"""


class DegenerateFightWindowError(ValueError):
    """Available (non-invulnerable) fight time is zero or negative."""


def available_duration(fight_duration_ms: int, invulnerable_ms: int) -> int:
    available = fight_duration_ms - invulnerable_ms
    if available <= 0:
        raise DegenerateFightWindowError(
            f"No targetable fight time: duration {fight_duration_ms}ms, "
            f"invulnerable {invulnerable_ms}ms"
        )
    return available


def percent_uptime(
    active_ms: int, fight_duration_ms: int, invulnerable_ms: int,
) -> float:
    """Active duration as a percent of the non-invulnerable fight time.

    Not capped: a result above 100 means the active duration double counts.
    """
    available = available_duration(fight_duration_ms, invulnerable_ms)
    return active_ms / available * 100


def max_total_active_duration(
    fight_duration_ms: int,
    invulnerable_ms: int,
    cooldown_ms: int,
    active_duration_ms: int,
) -> int:
    """Greatest total active time a cooldown-gated effect can reach.

    Every full cooldown cycle that fits in the available time contributes one
    whole window, the trailing partial cycle contributes whatever is left of
    one more window.
    """
    if cooldown_ms <= 0:
        raise ValueError(f"cooldown_ms must be > 0, got {cooldown_ms}")
    available = available_duration(fight_duration_ms, invulnerable_ms)
    max_full_casts = available // cooldown_ms
    last_cast_ms = min(active_duration_ms, available - max_full_casts * cooldown_ms)
    return max_full_casts * active_duration_ms + last_cast_ms


def theoretical_max_uptime_percent(
    observed_ms: int,
    fight_duration_ms: int,
    invulnerable_ms: int,
    cooldown_ms: int,
    active_duration_ms: int,
) -> float:
    """Observed active time as a percent of the theoretical max, capped at 100."""
    max_total = max_total_active_duration(
        fight_duration_ms, invulnerable_ms, cooldown_ms, active_duration_ms,
    )
    return min(100.0, observed_ms / max_total * 100)
