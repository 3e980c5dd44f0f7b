from functools import lru_cache

from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClipConfig(BaseModel):
    # Severity tiers for total clip lost on the worst DoT
    minor_threshold_ms: int = 10000
    major_threshold_ms: int = 30000


class RushingConfig(BaseModel):
    opener_ms: int = 0  # 0 = no opener exemption
    closer_ms: int = 0  # 0 = no end-of-fight exemption


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    debug: bool = False
    log_level: str = "INFO"
    clip: ClipConfig = ClipConfig()
    rushing: RushingConfig = RushingConfig()

    @model_validator(mode="after")
    def _check_cross_field_deps(self):
        if self.clip.minor_threshold_ms >= self.clip.major_threshold_ms:
            raise ValueError(
                "CLIP__MINOR_THRESHOLD_MS must be < CLIP__MAJOR_THRESHOLD_MS"
            )
        if self.rushing.opener_ms < 0 or self.rushing.closer_ms < 0:
            raise ValueError(
                "RUSHING__OPENER_MS and RUSHING__CLOSER_MS must be >= 0"
            )
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
