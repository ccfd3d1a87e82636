"""Output formatters: calendar entries, text schedule, CSV."""

import csv
from io import StringIO
from pathlib import Path

from leaguesched.models import CalendarEntry, ScheduledMatch

CSV_COLUMNS = [
    "Start_Date", "Start_Time", "End_Date", "End_Time",
    "Round", "Court", "Home", "Away", "Title", "Description",
]


def _name(code, teams: dict | None) -> str:
    if teams and code in teams:
        return teams[code].display_name
    return str(code)


def _fmt_hour(hour: int) -> str:
    """Format an hour as 12-hour with am/pm (e.g., '6pm', '10am')."""
    suffix = "am" if hour < 12 else "pm"
    h = hour % 12 or 12
    return f"{h}{suffix}"


def to_calendar_entries(matches: list[ScheduledMatch], teams: dict | None = None,
                        competition_name: str = "") -> list[CalendarEntry]:
    """Build one calendar entry per match, one hour long, titled 'Home vs Away'."""
    entries = []
    for m in matches:
        title = f"{_name(m.home_team, teams)} vs {_name(m.away_team, teams)}"
        description = f"Round {m.round_number}"
        if competition_name:
            description = f"{competition_name} - {description}"
        entries.append(CalendarEntry(
            title=title,
            description=description,
            start=m.start,
            end=m.end,
            court=m.court,
            home_team=m.home_team,
            away_team=m.away_team,
            round_number=m.round_number,
        ))
    return entries


def format_schedule(matches: list[ScheduledMatch], teams: dict | None = None,
                    title: str = "") -> str:
    """Format schedule as human-readable text, organized by round."""
    lines = []
    lines.append("=" * 60)
    lines.append((title or "LEAGUE SCHEDULE").upper())
    lines.append("=" * 60)

    by_round: dict[int, list[ScheduledMatch]] = {}
    for m in matches:
        by_round.setdefault(m.round_number, []).append(m)

    for rnd in sorted(by_round):
        round_matches = by_round[rnd]
        d = round_matches[0].date
        lines.append(f"\n--- ROUND {rnd}: {d.strftime('%A')} {d.isoformat()} ---")
        for m in sorted(round_matches, key=lambda x: x.start_hour):
            lines.append(
                f"  {_fmt_hour(m.start_hour):>5}  Court {str(m.court):<4} "
                f"{_name(m.home_team, teams):<16} vs {_name(m.away_team, teams)}"
            )

    lines.append("\n" + "=" * 60)
    lines.append("PER-TEAM SCHEDULES")
    lines.append("=" * 60)

    by_team: dict = {}
    for m in matches:
        by_team.setdefault(m.home_team, []).append(m)
        by_team.setdefault(m.away_team, []).append(m)

    codes = list(teams) if teams else sorted(by_team, key=str)
    for code in codes:
        lines.append(f"\n{_name(code, teams)}:")
        team_matches = sorted(by_team.get(code, []), key=lambda x: x.round_number)
        for m in team_matches:
            is_home = m.home_team == code
            opponent = m.away_team if is_home else m.home_team
            h_a = "H" if is_home else "A"
            lines.append(
                f"  R{m.round_number:<3} {m.date.strftime('%a %m/%d')} "
                f"{_fmt_hour(m.start_hour):>5} {h_a} vs "
                f"{_name(opponent, teams):<16} Court {m.court}"
            )

    return "\n".join(lines)


def format_calendar_csv(matches: list[ScheduledMatch], teams: dict | None = None,
                        competition_name: str = "") -> str:
    """Format schedule as CSV, one row per match in schedule order."""
    output = StringIO()
    writer = csv.writer(output)
    writer.writerow(CSV_COLUMNS)

    for m, entry in zip(matches, to_calendar_entries(matches, teams,
                                                     competition_name)):
        writer.writerow([
            entry.start.date().isoformat(), entry.start.strftime("%H:%M"),
            entry.end.date().isoformat(), entry.end.strftime("%H:%M"),
            m.round_number, m.court, m.home_team, m.away_team,
            entry.title, entry.description,
        ])

    return output.getvalue()


def write_schedule(matches: list[ScheduledMatch], teams: dict | None = None,
                   output_prefix: str | Path = "output",
                   competition_name: str = "") -> list[Path]:
    """Write schedule.txt and schedule.csv into {output_prefix}/.

    Returns the paths written.
    """
    out_dir = Path(output_prefix)
    out_dir.mkdir(parents=True, exist_ok=True)

    schedule_path = out_dir / "schedule.txt"
    schedule_path.write_text(format_schedule(matches, teams, competition_name))

    csv_path = out_dir / "schedule.csv"
    csv_path.write_text(format_calendar_csv(matches, teams, competition_name))

    return [schedule_path, csv_path]
