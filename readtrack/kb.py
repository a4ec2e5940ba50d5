"""Static configuration and achievement catalog."""

from readtrack.models.achievement import AchievementCriteria, AchievementDefinition
from readtrack.models.enums import AchievementCategory, AchievementType
from readtrack.models.kb import AchievementConfig, PaceConfig, StatusConfig

PACE_CONFIG = PaceConfig()
STATUS_CONFIG = StatusConfig()
ACHIEVEMENT_CONFIG = AchievementConfig()


def _streak(id_: str, title: str, days: int, sort_order: int) -> AchievementDefinition:
    return AchievementDefinition(
        id=id_,
        title=title,
        description=f"Read {days} days in a row",
        type=AchievementType.MAX_STREAK,
        category=AchievementCategory.CONSISTENCY,
        criteria=AchievementCriteria(target=days),
        icon="flame",
        sort_order=sort_order,
    )


STREAK_ACHIEVEMENTS: list[AchievementDefinition] = [
    _streak("dedicated_reader", "Dedicated Reader", 25, 10),
    _streak("reading_habit_master", "Reading Habit Master", 50, 11),
    _streak("reading_champion", "Reading Champion", 75, 12),
    _streak("century_reader", "Century Reader", 100, 13),
    _streak("half_year_scholar", "Half Year Scholar", 180, 14),
    _streak("year_long_scholar", "Year Long Scholar", 365, 15),
    _streak("reading_hero", "Reading Hero", 500, 16),
    _streak("reading_myth", "Reading Myth", 750, 17),
    _streak("reading_legend", "Reading Legend", 1000, 18),
]

ACHIEVEMENT_DEFINITIONS: list[AchievementDefinition] = [
    AchievementDefinition(
        id="consistency_champion",
        title="Consistency Champion",
        description="Keep a 7-day reading streak going",
        type=AchievementType.CURRENT_STREAK,
        category=AchievementCategory.CONSISTENCY,
        criteria=AchievementCriteria(target=7),
        icon="calendar",
        sort_order=1,
    ),
    AchievementDefinition(
        id="ambitious_reader",
        title="Ambitious Reader",
        description="Track 5 books at the same time",
        type=AchievementType.COUNT,
        category=AchievementCategory.VOLUME,
        criteria=AchievementCriteria(target=5),
        icon="books",
        sort_order=2,
    ),
    AchievementDefinition(
        id="format_explorer",
        title="Format Explorer",
        description="Read in all 3 formats (physical, ebook, audio)",
        type=AchievementType.COUNT,
        category=AchievementCategory.DIVERSITY,
        criteria=AchievementCriteria(target=3),
        icon="shapes",
        sort_order=3,
    ),
    AchievementDefinition(
        id="library_warrior",
        title="Library Warrior",
        description="Read 10 books from the library",
        type=AchievementType.COUNT,
        category=AchievementCategory.SOCIAL,
        criteria=AchievementCriteria(target=10),
        icon="library",
        sort_order=4,
    ),
    AchievementDefinition(
        id="speed_reader",
        title="Speed Reader",
        description="Read 50 pages in a single day",
        type=AchievementType.SINGLE_DAY,
        category=AchievementCategory.SPEED,
        criteria=AchievementCriteria(target=50),
        icon="bolt",
        sort_order=5,
    ),
    AchievementDefinition(
        id="marathon_listener",
        title="Marathon Listener",
        description="Listen for 8 hours in a single day",
        type=AchievementType.SINGLE_DAY,
        category=AchievementCategory.SPEED,
        criteria=AchievementCriteria(target=480),
        icon="headphones",
        sort_order=6,
    ),
    AchievementDefinition(
        id="page_turner",
        title="Page Turner",
        description="Read 1000 pages in total",
        type=AchievementType.VOLUME,
        category=AchievementCategory.VOLUME,
        criteria=AchievementCriteria(target=1000),
        icon="page",
        sort_order=7,
    ),
    AchievementDefinition(
        id="early_finisher",
        title="Early Finisher",
        description="Finish 5 books before their deadline",
        type=AchievementType.COUNT,
        category=AchievementCategory.SPEED,
        criteria=AchievementCriteria(target=5),
        icon="flag",
        sort_order=8,
    ),
    *STREAK_ACHIEVEMENTS,
]
