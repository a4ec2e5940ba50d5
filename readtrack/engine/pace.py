from datetime import date, datetime, timedelta

from readtrack.engine.dates import latest_snapshot_time
from readtrack.engine.reading_days import extract_listening_days, extract_reading_days
from readtrack.kb import PACE_CONFIG
from readtrack.models.deadline import Deadline
from readtrack.models.enums import CalculationMethod
from readtrack.models.kb import PaceConfig
from readtrack.models.pace import UserListeningPaceData, UserPaceData


def lookback_start(deadlines: list[Deadline], config: PaceConfig) -> datetime | None:
    """Cutoff anchored on the newest snapshot in the whole dataset, not on now."""
    latest = latest_snapshot_time(deadlines)
    if latest is None:
        return None
    return latest - timedelta(days=config.lookback_days)


def activity_span_days(days: list[date]) -> int:
    """Calendar days between first and last active day, at least 1."""
    if not days:
        return 1
    return max(1, (max(days) - min(days)).days)


def calculate_user_pace(
    deadlines: list[Deadline], config: PaceConfig = PACE_CONFIG
) -> UserPaceData:
    """Reading pace in page-equivalents/day. Tier 1 needs reliable_min_days active days."""
    days = extract_reading_days(deadlines, config, since=lookback_start(deadlines, config))
    count = len(days)

    if count >= config.reliable_min_days:
        total = sum(d.pages_read for d in days)
        span = activity_span_days([d.date for d in days])
        return UserPaceData(
            average_pace=total / span,
            reading_days_count=count,
            is_reliable=True,
            calculation_method=CalculationMethod.RECENT_DATA,
        )

    return UserPaceData(
        average_pace=config.default_reading_pace,
        reading_days_count=count,
        is_reliable=False,
        calculation_method=CalculationMethod.DEFAULT_FALLBACK,
    )


def calculate_user_listening_pace(
    deadlines: list[Deadline], config: PaceConfig = PACE_CONFIG
) -> UserListeningPaceData:
    """Listening pace in minutes/day. Any listening day counts as recent data."""
    days = extract_listening_days(deadlines, config, since=lookback_start(deadlines, config))
    count = len(days)

    if count >= config.listening_min_days:
        total = sum(d.minutes_listened for d in days)
        span = activity_span_days([d.date for d in days])
        return UserListeningPaceData(
            average_pace=total / span,
            listening_days_count=count,
            is_reliable=count >= config.reliable_min_days,
            calculation_method=CalculationMethod.RECENT_DATA,
        )

    return UserListeningPaceData(
        average_pace=config.default_listening_pace,
        listening_days_count=count,
        is_reliable=False,
        calculation_method=CalculationMethod.DEFAULT_FALLBACK,
    )
