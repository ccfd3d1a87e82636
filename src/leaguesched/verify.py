"""Standalone verifier: re-import a schedule CSV and check it against a config.

Usage: leaguesched-verify <schedule.csv> [config.yaml]
"""

import csv
import sys
from pathlib import Path

from leaguesched.config import load_config, parse_date, parse_time
from leaguesched.constraints import validate_schedule, format_validation_report
from leaguesched.errors import ConfigError, ScheduleFileError
from leaguesched.models import ScheduledMatch
from leaguesched.stats import compute_stats, format_stats_report


def _court(value: str, courts: list | None = None):
    """Map a CSV court cell back to the configured court id.

    Without a court list, all-digit values come back as ints.
    """
    value = value.strip()
    if courts is not None:
        for c in courts:
            if str(c) == value:
                return c
    return int(value) if value.isdigit() else value


def parse_csv_schedule(csv_path: str | Path,
                       courts: list | None = None) -> list[ScheduledMatch]:
    """Parse a schedule.csv written by output.write_schedule back into matches.

    Pass the configured `courts` to get court ids back with their original
    types. Raises ScheduleFileError listing every unreadable row.
    """
    matches = []
    problems = []
    with open(csv_path, newline="") as f:
        reader = csv.DictReader(f)
        for line_no, row in enumerate(reader, start=2):
            start_date = (row.get("Start_Date") or "").strip()
            home = (row.get("Home") or "").strip()
            away = (row.get("Away") or "").strip()
            if not start_date or not home or not away:
                continue

            try:
                match = ScheduledMatch(
                    home_team=home,
                    away_team=away,
                    round_number=int(row.get("Round") or 0),
                    date=parse_date(start_date),
                    start_hour=parse_time(row.get("Start_Time") or "0:00").hour,
                    court=_court(row.get("Court") or "", courts),
                )
            except (ValueError, IndexError) as e:
                problems.append(f"Line {line_no}: {e}")
                continue
            matches.append(match)

    if problems:
        raise ScheduleFileError(problems)
    return matches


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Usage: leaguesched-verify <schedule.csv> [config.yaml]")
        print("  Validates a schedule CSV against the teams and slots in config.")
        return 1

    csv_path = args[0]
    config_path = args[1] if len(args) > 1 else "config.yaml"

    if not Path(csv_path).exists():
        print(f"Error: {csv_path} not found")
        return 1
    if not Path(config_path).exists():
        print(f"Error: {config_path} not found")
        return 1

    print(f"Loading config from {config_path}...")
    try:
        config = load_config(config_path)
    except ConfigError as e:
        print("Config errors:")
        for p in e.problems:
            print(f"  {p}")
        return 1

    print(f"Parsing schedule from {csv_path}...")
    try:
        matches = parse_csv_schedule(csv_path, config["courts"])
    except ScheduleFileError as e:
        print("Schedule file errors:")
        for p in e.problems:
            print(f"  {p}")
        return 1
    print(f"Loaded {len(matches)} matches")

    if not matches:
        print("No matches found in CSV. Check the format.")
        return 1

    result = validate_schedule(matches, config["teams"], config["slot_table"])
    print(format_validation_report(result))

    stats = compute_stats(matches, config["teams"], config["slot_table"])
    print("\n" + format_stats_report(stats, config["teams"], config["slot_table"]))

    return 0 if result["valid"] else 1


if __name__ == "__main__":
    sys.exit(main())
