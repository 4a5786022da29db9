"""Current-date sources used for age and date-of-birth arithmetic."""

from datetime import date


class TimeProvider:
    """Supplies the current date."""

    def current_date(self) -> date:
        return date.today()


class FixedTimeProvider(TimeProvider):
    """Time provider frozen at a given date, used for reproducible output."""

    def __init__(self, today: date):
        self._today = today

    def current_date(self) -> date:
        return self._today


def minus_years(d: date, years: int) -> date:
    """Shift a date back by whole years, mapping Feb 29 to Feb 28 when needed."""
    try:
        return d.replace(year=d.year - years)
    except ValueError:
        return d.replace(year=d.year - years, day=28)


def years_between(start: date, end: date) -> int:
    """Whole years elapsed from start to end."""
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years
