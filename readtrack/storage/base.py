from abc import ABC, abstractmethod

from readtrack.models.achievement import (
    AchievementDefinition,
    AchievementProgressRecord,
    UserAchievement,
)
from readtrack.models.deadline import Deadline


class StorageBackend(ABC):
    @abstractmethod
    def get_deadlines(self, user_id: str) -> list[Deadline]: ...

    @abstractmethod
    def save_deadline(self, deadline: Deadline) -> None: ...

    @abstractmethod
    def get_active_achievements(self) -> list[AchievementDefinition]: ...

    @abstractmethod
    def save_achievement(self, achievement: AchievementDefinition) -> None: ...

    @abstractmethod
    def get_user_achievements(self, user_id: str) -> list[UserAchievement]: ...

    @abstractmethod
    def save_user_achievement(self, user_achievement: UserAchievement) -> None: ...

    @abstractmethod
    def get_achievement_progress(self, user_id: str) -> list[AchievementProgressRecord]: ...

    @abstractmethod
    def save_achievement_progress(self, record: AchievementProgressRecord) -> None: ...
