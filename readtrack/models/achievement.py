from datetime import UTC, date, datetime

from pydantic import BaseModel, ConfigDict, Field

from readtrack.models.deadline import Deadline
from readtrack.models.enums import AchievementCategory, AchievementType


class AchievementCriteria(BaseModel):
    model_config = ConfigDict(extra="allow")

    target: int | None = Field(default=None, gt=0)


class AchievementDefinition(BaseModel):
    id: str
    title: str
    description: str = ""
    type: AchievementType
    category: AchievementCategory
    criteria: AchievementCriteria = Field(default_factory=AchievementCriteria)
    icon: str = ""
    color: str = ""
    is_active: bool = True
    sort_order: int = 0


class AchievementProgress(BaseModel):
    current: float  # raw value, never clamped to max
    max: int
    percentage: int = Field(ge=0, le=100)
    achieved: bool


class StreakResult(BaseModel):
    current_streak: int = Field(ge=0)
    max_streak: int = Field(ge=0)


class CalculatorContext(BaseModel):
    deadlines: list[Deadline] = Field(default_factory=list)
    completed_deadlines: list[Deadline] = Field(default_factory=list)
    user_id: str | None = None
    today: date = Field(default_factory=lambda: datetime.now(UTC).date())


class UserAchievement(BaseModel):
    user_id: str
    achievement_id: str
    progress_data: dict = Field(default_factory=dict)
    unlocked_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class AchievementProgressRecord(BaseModel):
    user_id: str
    achievement_id: str
    current_value: float
    max_value: int
    metadata: dict = Field(default_factory=dict)
    last_updated: datetime = Field(default_factory=lambda: datetime.now(UTC))


class AchievementWithStatus(BaseModel):
    definition: AchievementDefinition
    is_unlocked: bool
    progress: AchievementProgress
    unlocked_at: datetime | None = None
