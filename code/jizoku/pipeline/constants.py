"""Summoner DoT and cooldown effect data."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DotDef:
    status_id: int
    name: str
    duration_ms: int


@dataclass(frozen=True)
class CooldownEffectDef:
    status_id: int
    name: str
    cooldown_ms: int
    duration_ms: int  # One cast = one contiguous window of this length


BIO_III = DotDef(1214, "Bio III", 30000)
MIASMA_III = DotDef(1215, "Miasma III", 30000)

SUMMONER_DOTS: tuple[DotDef, ...] = (BIO_III, MIASMA_III)

SHADOW_FLARE = CooldownEffectDef(1228, "Shadow Flare", 60000, 15000)

# Reverse lookup: status_id -> DotDef
DOT_BY_STATUS_ID: dict[int, DotDef] = {d.status_id: d for d in SUMMONER_DOTS}

# WCL event types the clip accumulator consumes
APPLICATION_EVENT_TYPES: frozenset[str] = frozenset({"applydebuff", "refreshdebuff"})

# WCL event types that open or close a status interval (debuffs on enemies,
# buffs on the player for ground effects like Shadow Flare)
STATUS_APPLY_TYPES: frozenset[str] = frozenset({
    "applydebuff", "refreshdebuff", "applybuff", "refreshbuff",
})
STATUS_REMOVE_TYPES: frozenset[str] = frozenset({"removedebuff", "removebuff"})
