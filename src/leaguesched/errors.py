"""Exceptions raised by the league scheduling engine.

Every error is a precondition violation detected before any output is
produced, so callers never see a partial schedule.
"""


class SchedulingError(ValueError):
    """Base class for all scheduling errors."""


class InvalidTeamsError(SchedulingError):
    """Fewer than two teams, or a team listed twice."""


class InvalidWeeksError(SchedulingError):
    """Season length is not a positive whole number of weeks."""


class InvalidWeekdayError(SchedulingError):
    """Target weekday outside 0 (Sunday) .. 6 (Saturday)."""


class InvalidCourtsError(SchedulingError):
    """Court list is empty or lists a court twice."""


class RoundDateMismatchError(SchedulingError):
    """Number of rounds and number of round dates differ."""


class InvalidSlotTableError(SchedulingError):
    """Slot hours are empty, repeated, or not strictly decreasing in weight."""


class ConfigError(SchedulingError):
    """Season config file is missing required data or is malformed."""

    def __init__(self, problems: list[str]):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))


class ScheduleFileError(SchedulingError):
    """Schedule CSV has rows that cannot be read back into matches."""

    def __init__(self, problems: list[str]):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))
