"""Achievement progress calculator.

Each achievement id maps to one rule producing a raw `current` value, which is
compared with the target from the achievement's criteria. Streak-based rules
reward the best historical run (max streak); only consistency_champion looks at
the live streak.
"""

from collections import defaultdict
from collections.abc import Callable
from datetime import date

from readtrack.engine.dates import day_key, parse_timestamp, sorted_snapshots
from readtrack.engine.numeric import clamped_percentage
from readtrack.engine.streaks import calculate_reading_streaks, collect_activity_dates
from readtrack.kb import ACHIEVEMENT_CONFIG, ACHIEVEMENT_DEFINITIONS
from readtrack.models.achievement import (
    AchievementDefinition,
    AchievementProgress,
    CalculatorContext,
    StreakResult,
)
from readtrack.models.deadline import Deadline
from readtrack.models.enums import BookFormat, DeadlineStatus
from readtrack.models.kb import AchievementConfig

STREAK_ACHIEVEMENT_IDS = (
    "dedicated_reader",
    "reading_habit_master",
    "reading_champion",
    "century_reader",
    "half_year_scholar",
    "year_long_scholar",
    "reading_hero",
    "reading_myth",
    "reading_legend",
)

# Fallback when a stored catalog row lost its target
_DEFAULT_TARGETS = {a.id: a.criteria.target for a in ACHIEVEMENT_DEFINITIONS}


def page_equivalent_factors(config: AchievementConfig) -> dict[BookFormat, float]:
    """Page-equivalents per unit of recorded progress. Ebook progress is a percentage."""
    return {
        BookFormat.PHYSICAL: 1.0,
        BookFormat.EBOOK: config.ebook_pages_per_book / 100,
        BookFormat.AUDIO: 1 / config.audio_minutes_per_page,
    }


def _daily_forward_progress(deadline: Deadline) -> dict[date, float]:
    """Forward progress per snapshot date, measured from zero, never negative."""
    daily: dict[date, float] = defaultdict(float)
    previous = 0
    for ts, snap in sorted_snapshots(deadline):
        daily[day_key(ts)] += max(0, snap.current_progress - previous)
        previous = snap.current_progress
    return daily


class AchievementCalculator:
    def __init__(self, context: CalculatorContext, config: AchievementConfig = ACHIEVEMENT_CONFIG):
        self.context = context
        self.config = config
        self._streaks: StreakResult | None = None
        self._rules: dict[str, Callable[[], float]] = {
            "ambitious_reader": self._ambitious_reader,
            "format_explorer": self._format_explorer,
            "library_warrior": self._library_warrior,
            "speed_reader": self._speed_reader,
            "marathon_listener": self._marathon_listener,
            "consistency_champion": self._consistency_champion,
            "page_turner": self._page_turner,
            "early_finisher": self._early_finisher,
        }
        for achievement_id in STREAK_ACHIEVEMENT_IDS:
            self._rules[achievement_id] = self._max_streak

    def calculate_progress(self, achievement: AchievementDefinition) -> AchievementProgress:
        rule = self._rules.get(achievement.id)
        if rule is None:
            return AchievementProgress(current=0, max=1, percentage=0, achieved=False)

        target = achievement.criteria.target or _DEFAULT_TARGETS.get(achievement.id, 1)
        current = rule()
        return AchievementProgress(
            current=current,
            max=target,
            percentage=clamped_percentage(current, target),
            achieved=current >= target,
        )

    def streaks(self) -> StreakResult:
        if self._streaks is None:
            self._streaks = calculate_reading_streaks(
                collect_activity_dates(self.context.deadlines), self.context.today
            )
        return self._streaks

    # ── Rules ────────────────────────────────────────────────────────

    def _max_streak(self) -> float:
        return self.streaks().max_streak

    def _consistency_champion(self) -> float:
        return self.streaks().current_streak

    def _ambitious_reader(self) -> float:
        return len(self.context.deadlines)

    def _format_explorer(self) -> float:
        return len({d.format for d in self.context.deadlines if d.progress})

    def _library_warrior(self) -> float:
        return sum(1 for d in self.context.deadlines if d.source == "library" and d.progress)

    def _speed_reader(self) -> float:
        factors = page_equivalent_factors(self.config)
        daily: dict[date, float] = defaultdict(float)
        for deadline in self.context.deadlines:
            for day, amount in _daily_forward_progress(deadline).items():
                daily[day] += amount * factors[deadline.format]
        return max(daily.values(), default=0)

    def _marathon_listener(self) -> float:
        daily: dict[date, float] = defaultdict(float)
        for deadline in self.context.deadlines:
            if deadline.format != BookFormat.AUDIO:
                continue
            for day, minutes in _daily_forward_progress(deadline).items():
                daily[day] += minutes
        return max(daily.values(), default=0)

    def _page_turner(self) -> float:
        factors = page_equivalent_factors(self.config)
        total = 0.0
        for deadline in [*self.context.deadlines, *self.context.completed_deadlines]:
            timed = sorted_snapshots(deadline)
            if timed:
                total += timed[-1][1].current_progress * factors[deadline.format]
        return total

    def _early_finisher(self) -> float:
        count = 0
        for deadline in self.context.completed_deadlines:
            due = parse_timestamp(deadline.deadline_date)
            completions = [
                parse_timestamp(entry.created_at)
                for entry in deadline.status
                if entry.status == DeadlineStatus.COMPLETE
            ]
            completions = [ts for ts in completions if ts is not None]
            if due is None or not completions:
                continue
            days_early = (day_key(due) - day_key(max(completions))).days
            if days_early >= self.config.early_finish_min_days:
                count += 1
        return count
