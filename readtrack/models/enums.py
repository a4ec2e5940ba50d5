from enum import Enum


class BookFormat(str, Enum):
    PHYSICAL = "physical"
    EBOOK = "ebook"
    AUDIO = "audio"


class Flexibility(str, Enum):
    FLEXIBLE = "flexible"
    STRICT = "strict"


class DeadlineStatus(str, Enum):
    REQUESTED = "requested"
    READING = "reading"
    COMPLETE = "complete"
    SET_ASIDE = "set_aside"


class CalculationMethod(str, Enum):
    RECENT_DATA = "recent_data"
    DEFAULT_FALLBACK = "default_fallback"


class StatusColor(str, Enum):
    GREEN = "green"
    ORANGE = "orange"
    RED = "red"


class StatusLevel(str, Enum):
    GOOD = "good"
    APPROACHING = "approaching"
    OVERDUE = "overdue"
    IMPOSSIBLE = "impossible"


class AchievementType(str, Enum):
    MAX_STREAK = "max_streak"
    CURRENT_STREAK = "current_streak"
    COUNT = "count"
    SINGLE_DAY = "single_day"
    VOLUME = "volume"


class AchievementCategory(str, Enum):
    CONSISTENCY = "consistency"
    VOLUME = "volume"
    DIVERSITY = "diversity"
    SPEED = "speed"
    SOCIAL = "social"
