"""Per-deadline derived values used by list and detail views."""

import math
from datetime import UTC, datetime

from readtrack.engine.dates import ONE_DAY, parse_timestamp, sorted_snapshots
from readtrack.engine.numeric import round_half_up
from readtrack.engine.status import (
    calculate_required_pace,
    get_pace_based_status,
    get_pace_status_message,
)
from readtrack.kb import PACE_CONFIG
from readtrack.models.deadline import Deadline
from readtrack.models.enums import BookFormat, DeadlineStatus
from readtrack.models.pace import DeadlineCalculations, UserListeningPaceData, UserPaceData

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def unit_for_format(format: BookFormat) -> str:
    return "minutes" if format == BookFormat.AUDIO else "pages"


def calculate_days_left(deadline_date: str, now: datetime) -> int:
    """Whole days until the due date, rounded up. Zero or negative once it has passed."""
    due = parse_timestamp(deadline_date)
    if due is None:
        return 0
    return math.ceil((due - parse_timestamp(now)) / ONE_DAY)


def calculate_current_progress(deadline: Deadline) -> int:
    timed = sorted_snapshots(deadline)
    if not timed:
        return 0
    return timed[-1][1].current_progress


def calculate_remaining(deadline: Deadline) -> int:
    return deadline.total_quantity - calculate_current_progress(deadline)


def calculate_progress_percentage(deadline: Deadline) -> int:
    return round_half_up(calculate_current_progress(deadline) / deadline.total_quantity * 100)


def latest_status(deadline: Deadline) -> DeadlineStatus | None:
    dated = [
        (parse_timestamp(entry.created_at) or _EPOCH, entry) for entry in deadline.status
    ]
    if not dated:
        return None
    return max(dated, key=lambda pair: pair[0])[1].status


def _sort_key(deadline: Deadline):
    # Due date ascending, then most recently updated, then most recently created.
    due = parse_timestamp(deadline.deadline_date) or _EPOCH
    updated = parse_timestamp(deadline.updated_at) or _EPOCH
    created = parse_timestamp(deadline.created_at) or _EPOCH
    return (due, -updated.timestamp(), -created.timestamp())


def separate_deadlines(
    deadlines: list[Deadline], now: datetime
) -> tuple[list[Deadline], list[Deadline]]:
    """Split into (active, overdue), each sorted for display."""
    now = parse_timestamp(now)
    active: list[Deadline] = []
    overdue: list[Deadline] = []
    for deadline in deadlines:
        due = parse_timestamp(deadline.deadline_date)
        if due is not None and due < now:
            overdue.append(deadline)
        else:
            active.append(deadline)
    active.sort(key=_sort_key)
    overdue.sort(key=_sort_key)
    return active, overdue


def calculate_units_per_day(deadline: Deadline, now: datetime) -> int:
    """Native units (pages or minutes) per day needed to finish on time."""
    remaining = calculate_remaining(deadline)
    days_left = calculate_days_left(deadline.deadline_date, now)
    if days_left <= 0:
        return remaining
    return math.ceil(remaining / days_left)


def get_total_reading_time_per_day(active_deadlines: list[Deadline], now: datetime) -> str:
    if not active_deadlines:
        return "No active deadlines"

    total_minutes = 0.0
    for deadline in active_deadlines:
        units = calculate_units_per_day(deadline, now)
        if deadline.format == BookFormat.AUDIO:
            total_minutes += units
        else:
            total_minutes += units * PACE_CONFIG.audio_minutes_per_page

    hours, minutes = divmod(round_half_up(total_minutes), 60)
    if hours > 0:
        if minutes > 0:
            return f"{hours}h {minutes}m/day needed"
        return f"{hours}h/day needed"
    return f"{minutes}m/day needed"


def get_deadline_calculations(
    deadline: Deadline,
    user_pace: UserPaceData,
    listening_pace: UserListeningPaceData,
    now: datetime,
) -> DeadlineCalculations:
    """Everything a deadline card shows, computed in one pass.

    Audio deadlines compare against listening pace converted to page-equivalents,
    since required pace is always expressed in page-equivalents.
    """
    current = calculate_current_progress(deadline)
    days_left = calculate_days_left(deadline.deadline_date, now)
    percentage = calculate_progress_percentage(deadline)
    required = calculate_required_pace(
        deadline.total_quantity, current, days_left, deadline.format
    )

    if deadline.format == BookFormat.AUDIO:
        pace_data = UserPaceData(
            average_pace=listening_pace.average_pace / PACE_CONFIG.audio_minutes_per_page,
            reading_days_count=listening_pace.listening_days_count,
            is_reliable=listening_pace.is_reliable,
            calculation_method=listening_pace.calculation_method,
        )
    else:
        pace_data = user_pace

    status = get_pace_based_status(pace_data.average_pace, required, days_left, percentage)

    return DeadlineCalculations(
        current_progress=current,
        total_quantity=deadline.total_quantity,
        remaining=deadline.total_quantity - current,
        progress_percentage=percentage,
        days_left=days_left,
        units_per_day=calculate_units_per_day(deadline, now),
        required_pace=required,
        unit=unit_for_format(deadline.format),
        status=status,
        status_message=get_pace_status_message(pace_data, required, status),
    )
