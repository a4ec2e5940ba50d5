import math

from readtrack.engine.numeric import round_half_up
from readtrack.kb import PACE_CONFIG, STATUS_CONFIG
from readtrack.models.enums import BookFormat, StatusColor, StatusLevel
from readtrack.models.kb import PaceConfig, StatusConfig
from readtrack.models.pace import PaceBasedStatus, UserPaceData


def calculate_required_pace(
    total_quantity: int,
    current_progress: int,
    days_left: int,
    format: BookFormat,
    config: PaceConfig = PACE_CONFIG,
) -> int:
    """Page-equivalents/day needed to finish on time. Overdue → everything remaining, now.

    Remaining is not clamped, so over-completion yields zero or a negative pace.
    """
    remaining = total_quantity - current_progress

    if days_left <= 0:
        return remaining

    if format == BookFormat.AUDIO:
        remaining = remaining / config.audio_minutes_per_page

    return math.ceil(remaining / days_left)


def get_pace_based_status(
    user_pace: float,
    required_pace: float,
    days_left: int,
    progress_percentage: float,
    config: StatusConfig = STATUS_CONFIG,
) -> PaceBasedStatus:
    """Classify a deadline. Ordered checks, first match wins."""
    if days_left <= 0:
        return PaceBasedStatus(
            color=StatusColor.RED, level=StatusLevel.OVERDUE, message="Return or renew"
        )

    if progress_percentage == 0 and days_left < config.urgent_start_days:
        return PaceBasedStatus(
            color=StatusColor.RED, level=StatusLevel.IMPOSSIBLE, message="Start reading now"
        )

    if user_pace < required_pace:
        # No measurable pace means any requirement is out of reach
        if user_pace <= 0:
            return PaceBasedStatus(
                color=StatusColor.RED, level=StatusLevel.IMPOSSIBLE, message="Pace too slow"
            )
        increase_needed = (required_pace - user_pace) / user_pace * 100
        if increase_needed > config.impossible_increase_pct:
            return PaceBasedStatus(
                color=StatusColor.RED, level=StatusLevel.IMPOSSIBLE, message="Pace too slow"
            )
        return PaceBasedStatus(
            color=StatusColor.ORANGE, level=StatusLevel.APPROACHING, message="Pick up the pace"
        )

    return PaceBasedStatus(
        color=StatusColor.GREEN, level=StatusLevel.GOOD, message="You're on track"
    )


def get_pace_status_message(
    user_pace_data: UserPaceData, required_pace: float, status: PaceBasedStatus
) -> str:
    """Longer message for a status, aware of how reliable the user's pace is."""
    if status.level == StatusLevel.OVERDUE:
        return "Return or renew"

    if status.level == StatusLevel.IMPOSSIBLE:
        if not user_pace_data.is_reliable:
            return "Start reading to track pace"
        return "Pace too ambitious"

    if status.color == StatusColor.GREEN:
        if user_pace_data.is_reliable:
            return f"On track at {round_half_up(user_pace_data.average_pace)} pages/day"
        return "You're doing great"

    if status.color == StatusColor.ORANGE:
        increase = round_half_up(required_pace - user_pace_data.average_pace)
        return f"Need {increase} more pages/day"

    return status.message
