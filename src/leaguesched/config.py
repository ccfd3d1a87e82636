"""Season config loading and validation."""

import logging
from datetime import date, time
from pathlib import Path

import yaml

from leaguesched.errors import ConfigError, SchedulingError
from leaguesched.models import DayOfWeek, SlotTable, Team
from leaguesched.slots import DEFAULT_SLOT_TABLE, validate_slot_table

logger = logging.getLogger(__name__)


def parse_time(s: str) -> time:
    """Parse time strings like '6pm', '6:30pm', '18:00'."""
    s = s.strip()
    s_lower = s.lower()

    is_pm = s_lower.endswith("pm")
    is_am = s_lower.endswith("am")

    s_clean = s_lower
    if is_pm or is_am:
        s_clean = s_clean[:-2].strip()

    if ":" in s_clean:
        parts = s_clean.split(":")
        h = int(parts[0])
        m = int(parts[1])
    else:
        h = int(s_clean)
        m = 0

    if is_pm and h < 12:
        h += 12
    elif is_am and h == 12:
        h = 0

    return time(h, m)


def parse_hour(value) -> int:
    """Parse a slot start into a whole hour. Accepts 18, '18', '6pm', '18:00'."""
    if isinstance(value, int):
        return value
    t = parse_time(str(value))
    if t.minute:
        raise ValueError(f"Slot times must start on the hour, got {value!r}")
    return t.hour


def parse_date(s: str) -> date:
    """Parse date string YYYY-MM-DD."""
    parts = s.strip().split("-")
    return date(int(parts[0]), int(parts[1]), int(parts[2]))


def parse_weekday(value) -> int:
    """Parse 'Wednesday', 'wed' or 3 into a weekday number (0=Sunday)."""
    if isinstance(value, int):
        return value
    s = str(value).strip()
    if s.isdigit():
        return int(s)
    return DayOfWeek.from_str(s).value


def _parse_teams(raw_teams, problems: list[str]) -> dict[str, Team]:
    teams: dict[str, Team] = {}
    if raw_teams is None:
        return teams
    if not isinstance(raw_teams, list):
        problems.append(f"teams must be a list, got {raw_teams!r}")
        return teams
    for entry in raw_teams:
        if isinstance(entry, dict):
            code = str(entry.get("code", "")).strip()
            team = Team(code=code, name=str(entry.get("name", "")))
        else:
            code = str(entry).strip()
            team = Team(code=code)
        if not code:
            problems.append(f"Team entry {entry!r} has no code")
            continue
        if code in teams:
            problems.append(f"Team {code} listed more than once")
            continue
        teams[code] = team
    return teams


def _parse_courts(raw_courts, problems: list[str]) -> list | None:
    """Court ids as listed, or None after recording a shape problem."""
    if raw_courts is None:
        return []
    if not isinstance(raw_courts, list):
        problems.append(f"courts must be a list, got {raw_courts!r}")
        return None
    bad = [c for c in raw_courts if not isinstance(c, (int, str)) or isinstance(c, bool)]
    if bad:
        problems.append(f"Court ids must be numbers or names, got {bad!r}")
        return None
    return list(raw_courts)


def _parse_slots(raw_slots, problems: list[str]) -> SlotTable:
    if not raw_slots:
        return DEFAULT_SLOT_TABLE
    if not isinstance(raw_slots, list):
        problems.append(f"slots must be a list, got {raw_slots!r}")
        return DEFAULT_SLOT_TABLE
    hours = []
    weights = {}
    for entry in raw_slots:
        try:
            hour = parse_hour(entry["time"])
            weight = float(entry["weight"])
        except (KeyError, TypeError, ValueError) as e:
            problems.append(f"Bad slot entry {entry!r}: {e}")
            continue
        hours.append(hour)
        weights[hour] = weight
    table = SlotTable(hours=hours, weights=weights)
    try:
        validate_slot_table(table)
    except SchedulingError as e:
        problems.append(str(e))
    return table


def load_config(path: str | Path) -> dict:
    """Load and validate a season config YAML, returning structured data.

    Returns dict with:
    - season: {name, start_date, day, weeks}
    - teams: dict[code -> Team], in file order
    - courts: list of court ids
    - slot_table: SlotTable

    Raises ConfigError listing every problem found.
    """
    path = Path(path)
    with open(path) as f:
        try:
            raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError([f"Could not parse {path}: {e}"]) from e

    problems: list[str] = []

    if not isinstance(raw, dict):
        raise ConfigError([f"Config must be a mapping of sections, got {raw!r}"])

    raw_season = raw.get("season") or {}
    if not isinstance(raw_season, dict):
        problems.append(f"season must be a mapping, got {raw_season!r}")
        raw_season = {}
    season = {
        "name": raw_season.get("name", ""),
        "start_date": None,
        "day": None,
        "weeks": None,
    }
    try:
        season["start_date"] = parse_date(str(raw_season["start_date"]))
    except (KeyError, ValueError, IndexError) as e:
        problems.append(f"season.start_date missing or invalid: {e}")
    try:
        season["day"] = parse_weekday(raw_season["day"])
    except (KeyError, ValueError) as e:
        problems.append(f"season.day missing or invalid: {e}")
    else:
        if not 0 <= season["day"] <= 6:
            problems.append(f"season.day must be 0-6 (0=Sunday), got {season['day']}")
    weeks = raw_season.get("weeks")
    if isinstance(weeks, bool) or not isinstance(weeks, int) or weeks < 1:
        problems.append(f"season.weeks must be a whole number >= 1, got {weeks!r}")
    else:
        season["weeks"] = weeks

    teams = _parse_teams(raw.get("teams"), problems)
    if len(teams) < 2:
        problems.append(f"Need at least 2 teams, found {len(teams)}")

    courts = _parse_courts(raw.get("courts"), problems)
    if courts is None:
        courts = []
    elif not courts:
        problems.append("At least one court is required")
    elif len(set(courts)) != len(courts):
        problems.append(f"Courts listed more than once: {courts}")

    slot_table = _parse_slots(raw.get("slots"), problems)

    if problems:
        raise ConfigError(problems)

    if season["weeks"] < len(teams) - (len(teams) % 2 == 0):
        logger.warning(
            "%d weeks is shorter than a full round-robin of %d teams; "
            "some pairs will not meet", season["weeks"], len(teams),
        )

    return {
        "season": season,
        "teams": teams,
        "courts": courts,
        "slot_table": slot_table,
    }
