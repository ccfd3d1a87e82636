"""Data models for the league scheduling engine."""

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Hashable


class DayOfWeek(Enum):
    """Day of week, numbered 0=Sunday through 6=Saturday."""
    Sun = 0
    Mon = 1
    Tue = 2
    Wed = 3
    Thu = 4
    Fri = 5
    Sat = 6

    @classmethod
    def from_str(cls, s: str) -> "DayOfWeek":
        return cls[s.strip()[:3].capitalize()]

    @classmethod
    def from_date(cls, d: date) -> "DayOfWeek":
        return cls(d.isoweekday() % 7)


class _Bye(Enum):
    """Placeholder opponent for odd team counts. Never a real team."""
    BYE = "bye"

    def __repr__(self) -> str:
        return "BYE"


BYE = _Bye.BYE

TeamId = Hashable
CourtId = Hashable


@dataclass
class Team:
    """A participating team."""
    code: str
    name: str = ""

    @property
    def display_name(self) -> str:
        return self.name or self.code


@dataclass
class Matchup:
    """A pairing of two distinct real teams with home/away decided."""
    home: TeamId
    away: TeamId

    def involves(self, team: TeamId) -> bool:
        return team in (self.home, self.away)

    def opponent(self, team: TeamId) -> TeamId:
        if team == self.home:
            return self.away
        return self.home

    @property
    def teams(self) -> tuple:
        return (self.home, self.away)


@dataclass
class Round:
    """The matchups played in one week. Each team appears at most once."""
    number: int
    matchups: list[Matchup]
    bye_teams: list[TeamId] = field(default_factory=list)


@dataclass
class SlotTable:
    """Ordered start hours, best first, with their desirability weights."""
    hours: list[int]
    weights: dict[int, float]

    @property
    def average_weight(self) -> float:
        return sum(self.weights[h] for h in self.hours) / len(self.hours)

    def weight(self, hour: int) -> float:
        return self.weights[hour]

    def hour_at(self, index: int) -> int:
        """Hour for a slot index, wrapping when a round overflows the table."""
        return self.hours[index % len(self.hours)]

    def __len__(self) -> int:
        return len(self.hours)


@dataclass
class ScheduledMatch:
    """A matchup placed on a date, start hour and court."""
    home_team: TeamId
    away_team: TeamId
    round_number: int
    date: date
    start_hour: int
    court: CourtId

    @property
    def start(self) -> datetime:
        return datetime.combine(self.date, time(self.start_hour))

    @property
    def end(self) -> datetime:
        return self.start + timedelta(hours=1)

    @property
    def matchup(self) -> Matchup:
        return Matchup(self.home_team, self.away_team)


@dataclass
class CalendarEntry:
    """A calendar event plus match record, ready for a persistence layer."""
    title: str
    description: str
    start: datetime
    end: datetime
    court: CourtId
    home_team: TeamId
    away_team: TeamId
    round_number: int
