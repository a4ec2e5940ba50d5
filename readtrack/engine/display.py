from readtrack.engine.numeric import round_half_up
from readtrack.kb import PACE_CONFIG
from readtrack.models.enums import BookFormat

_WEEK = 7
_WEEKS_PER_MONTH = 4


def _hours_minutes(minutes: int) -> tuple[int, int]:
    return minutes // 60, minutes % 60


def format_listening_pace_display(minutes_per_day: float) -> str:
    hours, minutes = _hours_minutes(round_half_up(minutes_per_day))
    if hours > 0:
        return f"{hours}h {minutes}m/day"
    return f"{minutes}m/day"


def format_pace_display(pace: float, format: BookFormat) -> str:
    """Render a page-equivalent pace. Audio is converted back to minutes."""
    if format == BookFormat.AUDIO:
        return format_listening_pace_display(pace * PACE_CONFIG.audio_minutes_per_page)
    return f"{round_half_up(pace)} pages/day"


def format_combined_pace_display(pace: float) -> str:
    pages = round_half_up(pace)
    total_minutes = round_half_up(pace * PACE_CONFIG.audio_minutes_per_page)

    if total_minutes >= 60:
        hours, minutes = _hours_minutes(total_minutes)
        if minutes > 0:
            return f"{pages} pages/day ~{hours}h{minutes}m/day"
        return f"{pages} pages/day ~{hours}h/day"

    return f"{pages} pages/day ~{total_minutes}m/day"


def format_units_per_day(units: int, format: BookFormat) -> str:
    """'N pages/day needed', or hours/minutes for audio."""
    if format == BookFormat.AUDIO:
        hours, minutes = _hours_minutes(units)
        if hours > 0:
            if minutes > 0:
                return f"{hours}h {minutes}m/day needed"
            return f"{hours}h/day needed"
        return f"{minutes} minutes/day needed"
    return f"{units} pages/day needed"


def format_units_per_day_for_display(
    units: int, format: BookFormat, remaining: float, days_left: int
) -> str:
    """Like format_units_per_day, but slow paces read as '1 page/week' or '1 page every N days'."""
    if remaining <= 0 or days_left <= 0 or remaining / days_left >= 1:
        return format_units_per_day(units, format)

    unit = "minute" if format == BookFormat.AUDIO else "page"
    days_per_unit = days_left / remaining

    if days_per_unit >= _WEEK:
        weeks = round_half_up(days_per_unit / _WEEK)
        if abs(days_per_unit - weeks * _WEEK) < 1:
            if weeks == 1:
                return f"1 {unit}/week"
            if weeks == _WEEKS_PER_MONTH:
                return f"1 {unit}/month"
            return f"1 {unit}/{weeks} weeks"

    return f"1 {unit} every {round_half_up(days_per_unit)} days"
