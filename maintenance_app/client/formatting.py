import math


def _plural(count: int, unit: str) -> str:
    return f"1 {unit}" if count == 1 else f"{count} {unit}s"


def format_remaining_time(remaining_seconds: float) -> str:
    """
    human readable remaining time, rounded up to whole minutes

    0 => "Complete", 90 => "2 minutes", 3600 => "1 hour",
    3660 => "1 hour 1 minute"
    """
    remaining_minutes = math.ceil(max(0.0, remaining_seconds) / 60)

    if remaining_minutes <= 0:
        return "Complete"
    if remaining_minutes < 60:
        return _plural(remaining_minutes, "minute")

    hours, minutes = divmod(remaining_minutes, 60)
    if minutes == 0:
        return _plural(hours, "hour")
    return f"{_plural(hours, 'hour')} {_plural(minutes, 'minute')}"
