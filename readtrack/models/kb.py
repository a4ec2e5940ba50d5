from pydantic import BaseModel, Field


class PaceConfig(BaseModel):
    lookback_days: int = Field(default=21, ge=1)
    reliable_min_days: int = Field(default=3, ge=1)
    listening_min_days: int = Field(default=1, ge=1)
    default_reading_pace: float = Field(default=25.0, ge=0)
    default_listening_pace: float = Field(default=0.0, ge=0)
    audio_minutes_per_page: float = Field(default=1.5, gt=0)
    # Single listening transition above this many minutes is an imported baseline
    listening_seed_threshold: int = Field(default=300, gt=0)


class StatusConfig(BaseModel):
    impossible_increase_pct: float = Field(default=100.0, gt=0)
    urgent_start_days: int = Field(default=3, ge=0)


class AchievementConfig(BaseModel):
    ebook_pages_per_book: int = Field(default=300, gt=0)  # ebook progress is a percentage
    audio_minutes_per_page: float = Field(default=1.5, gt=0)
    early_finish_min_days: int = Field(default=1, ge=0)
