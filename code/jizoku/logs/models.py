from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from jizoku.pipeline.invuln import InvulnWindow


class LogBaseModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Fight(LogBaseModel):
    id: int
    name: str = ""
    start_time: int
    end_time: int
    kill: bool = False

    @property
    def duration_ms(self) -> int:
        return self.end_time - self.start_time


class StatusEvent(LogBaseModel):
    timestamp: int
    type: str
    source_id: int | None = Field(default=None, alias="sourceID")
    target_id: int | None = Field(default=None, alias="targetID")
    ability_game_id: int = Field(alias="abilityGameID")


class InvulnWindowEntry(LogBaseModel):
    # Absolute report timestamps, like the events
    start_time: int
    end_time: int
    target_id: int | None = Field(default=None, alias="targetID")
    untargetable: bool = False

    def to_window(self, fight_start_time: int) -> InvulnWindow:
        return InvulnWindow(
            start_ms=self.start_time - fight_start_time,
            end_ms=self.end_time - fight_start_time,
            target_id=self.target_id,
            untargetable=self.untargetable,
        )


class FightDump(LogBaseModel):
    fight: Fight
    events: list[StatusEvent] = []
    invuln_windows: list[InvulnWindowEntry] = []
