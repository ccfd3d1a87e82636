"""Round date calculation for weekly league play."""

from datetime import date, timedelta

from leaguesched.errors import InvalidWeekdayError, InvalidWeeksError


def _check_weekday(target_weekday: int) -> None:
    if isinstance(target_weekday, bool) or not isinstance(target_weekday, int) \
            or not 0 <= target_weekday <= 6:
        raise InvalidWeekdayError(
            f"Weekday must be 0 (Sunday) through 6 (Saturday), "
            f"got {target_weekday!r}"
        )


def next_weekday(d: date, target_weekday: int) -> date:
    """First date on or after `d` falling on `target_weekday` (0=Sunday)."""
    _check_weekday(target_weekday)
    current = d.isoweekday() % 7
    return d + timedelta(days=(target_weekday - current) % 7)


def calculate_round_dates(start_date: date, target_weekday: int,
                          number_of_rounds: int) -> list[date]:
    """One date per round, a week apart, starting on the first matching weekday."""
    if number_of_rounds < 0:
        raise InvalidWeeksError(
            f"Number of rounds cannot be negative, got {number_of_rounds}"
        )
    first = next_weekday(start_date, target_weekday)
    return [first + timedelta(days=7 * i) for i in range(number_of_rounds)]
