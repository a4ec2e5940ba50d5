from collections.abc import Iterable
from datetime import date

from readtrack.engine.dates import ONE_DAY, day_key, sorted_snapshots
from readtrack.models.achievement import StreakResult
from readtrack.models.deadline import Deadline


def collect_activity_dates(deadlines: list[Deadline]) -> set[date]:
    """Every date with at least one snapshot, any format, seed entries included."""
    dates: set[date] = set()
    for deadline in deadlines:
        for ts, _ in sorted_snapshots(deadline):
            dates.add(day_key(ts))
    return dates


def calculate_current_streak(activity_dates: set[date], today: date) -> int:
    """Consecutive active days ending today. No activity today → 0."""
    streak = 0
    day = today
    while day in activity_dates:
        streak += 1
        day -= ONE_DAY
    return streak


def calculate_max_streak(activity_dates: Iterable[date]) -> int:
    best = 0
    run = 0
    previous: date | None = None
    for day in sorted(set(activity_dates)):
        if previous is not None and (day - previous).days == 1:
            run += 1
        else:
            run = 1
        best = max(best, run)
        previous = day
    return best


def calculate_reading_streaks(activity_dates: Iterable[date], today: date) -> StreakResult:
    dates = set(activity_dates)
    return StreakResult(
        current_streak=calculate_current_streak(dates, today),
        max_streak=calculate_max_streak(dates),
    )
