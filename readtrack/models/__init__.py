from readtrack.models.enums import (
    BookFormat,
    Flexibility,
    DeadlineStatus,
    CalculationMethod,
    StatusColor,
    StatusLevel,
    AchievementType,
    AchievementCategory,
)
from readtrack.models.kb import (
    PaceConfig,
    StatusConfig,
    AchievementConfig,
)
from readtrack.models.deadline import (
    ProgressSnapshot,
    DeadlineStatusEntry,
    Deadline,
)
from readtrack.models.pace import (
    ReadingDay,
    ListeningDay,
    UserPaceData,
    UserListeningPaceData,
    PaceBasedStatus,
    DeadlineCalculations,
)
from readtrack.models.achievement import (
    AchievementCriteria,
    AchievementDefinition,
    AchievementProgress,
    StreakResult,
    CalculatorContext,
    UserAchievement,
    AchievementProgressRecord,
    AchievementWithStatus,
)
