"""Display formatting helpers for weights, durations, dates and volume."""

import math
from datetime import datetime
from typing import Literal

from liftbook.models import utc_now
from liftbook.workouts.history import PreviousSetData

WeightUnit = Literal["kg", "lbs"]

EMPTY_PLACEHOLDER = "—"


def _format_number(value: float) -> str:
    """Render whole floats without a trailing ``.0``."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def format_weight(weight: float, unit: WeightUnit = "kg") -> str:
    if weight == 0:
        return "0"
    return f"{_format_number(weight)} {unit}"


def format_duration(seconds: int) -> str:
    """Format seconds as m:ss, or h:mm:ss from one hour up.

    Negative input renders as 0:00.
    """
    if seconds < 0:
        return "0:00"
    seconds = int(seconds)
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_previous_set(
    weight: float | None = None,
    reps: int | None = None,
    time: int | None = None,
    unit: WeightUnit = "kg",
) -> str:
    """Format one set for the "Previous" column.

    Time wins over load; weight needs reps to be shown. Anything else
    renders the placeholder dash.
    """
    if time is not None:
        return format_duration(time)
    if weight is not None and reps is not None:
        return f"{_format_number(weight)} {unit} × {reps}"
    if reps is not None:
        return f"{reps} reps"
    return EMPTY_PLACEHOLDER


def format_previous_entry(entry: PreviousSetData | None, unit: WeightUnit = "kg") -> str:
    """Format a resolved previous set.

    Holds under a minute read as seconds (``45s``), longer ones as ``m:ss``
    with minutes uncapped (``75:00``).
    """
    if entry is None:
        return EMPTY_PLACEHOLDER
    if entry.time is not None:
        minutes, seconds = divmod(entry.time, 60)
        return f"{minutes}:{seconds:02d}" if minutes > 0 else f"{seconds}s"
    return format_previous_set(entry.weight, entry.reps, unit=unit)


def format_date(value: datetime) -> str:
    """Format as e.g. ``Wed, Jan 10``."""
    return f"{value:%a}, {value:%b} {value.day}"


def format_date_time(value: datetime) -> str:
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return f"{format_date(value)}, {hour}:{value.minute:02d} {meridiem}"


def format_relative_time(value: datetime, now: datetime | None = None) -> str:
    """Describe how long ago ``value`` was (e.g. ``3h ago``, ``2 weeks ago``)."""
    now = now or utc_now()
    diff_seconds = (now - value).total_seconds()
    diff_minutes = math.floor(diff_seconds / 60)
    diff_hours = math.floor(diff_seconds / 3600)
    diff_days = math.floor(diff_seconds / 86400)

    if diff_minutes < 1:
        return "Just now"
    if diff_minutes < 60:
        return f"{diff_minutes}m ago"
    if diff_hours < 24:
        return f"{diff_hours}h ago"
    if diff_days == 1:
        return "Yesterday"
    if diff_days < 7:
        return f"{diff_days} days ago"
    if diff_days < 14:
        return "1 week ago"
    if diff_days < 30:
        return f"{diff_days // 7} weeks ago"
    if diff_days < 60:
        return "1 month ago"
    return f"{diff_days // 30} months ago"


def format_workout_duration(start_time: datetime, end_time: datetime | None = None) -> str:
    if end_time is None:
        return "In progress"

    minutes = math.floor((end_time - start_time).total_seconds() / 60)
    if minutes < 60:
        return f"{minutes} min"

    hours, remaining = divmod(minutes, 60)
    if remaining == 0:
        return f"{hours}h"
    return f"{hours}h {remaining}m"


def format_volume(volume: float, unit: WeightUnit = "kg") -> str:
    if volume >= 1_000_000:
        return f"{volume / 1_000_000:.1f}M {unit}"
    if volume >= 1000:
        return f"{volume / 1000:.1f}K {unit}"
    return f"{_format_number(volume)} {unit}"


def format_percentage(value: float, decimals: int = 0) -> str:
    return f"{value:.{decimals}f}%"
