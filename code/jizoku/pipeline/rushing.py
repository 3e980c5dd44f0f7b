"""Opener / closer windows where early DoT refreshes are intentional."""


class RushingWindows:
    def __init__(self, fight_duration_ms: int, opener_ms: int = 0, closer_ms: int = 0):
        self.fight_duration_ms = fight_duration_ms
        self.opener_ms = opener_ms
        self.closer_ms = closer_ms

    def is_rushing(self, timestamp: int) -> bool:
        if timestamp < self.opener_ms:
            return True
        return self.closer_ms > 0 and timestamp >= self.fight_duration_ms - self.closer_ms
