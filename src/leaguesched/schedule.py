#!/usr/bin/env python3
"""League Schedule Builder.

Generate mode (default):
    leaguesched [config.yaml] [-o DIR] [-v]

    Generates a round-robin schedule from the YAML config and writes:
      {DIR}/schedule.txt  - Human-readable round-by-round + per-team schedule
      {DIR}/schedule.csv  - One row per match, for calendar import
      {DIR}/stats.txt     - Validation report + fairness statistics

Verify mode:
    leaguesched --verify <schedule.csv> [config.yaml]

    Re-imports a schedule CSV and checks all constraints against config.
    Exit code 0 if valid, 1 if violations found.

Examples:
    leaguesched                            # default config.yaml -> output/
    leaguesched spring.yaml -o spring2026  # alternate config and output dir
    leaguesched --verify output/schedule.csv
"""

import argparse
import logging
import sys
from pathlib import Path

from leaguesched.config import load_config
from leaguesched.constraints import validate_schedule, format_validation_report
from leaguesched.errors import ConfigError, SchedulingError
from leaguesched.output import write_schedule
from leaguesched.scheduler import schedule
from leaguesched.stats import compute_stats, format_stats_report
from leaguesched.verify import main as verify_main


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="League Schedule Builder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Output files (generate mode):
  {prefix}/schedule.txt  Human-readable schedule (round view + per-team)
  {prefix}/schedule.csv  Calendar CSV, one row per match
  {prefix}/stats.txt     Validation report + slot fairness statistics

Exit codes:
  0  Schedule valid
  1  Config error, generation error, or constraint violations found
""",
    )
    parser.add_argument(
        "config", nargs="?", default="config.yaml",
        help="Path to config YAML file (default: config.yaml)"
    )
    parser.add_argument(
        "--output-prefix", "-o", default="output",
        help="Output directory for generated files (default: output/)"
    )
    parser.add_argument(
        "--verify", metavar="CSV",
        help="Verify an existing schedule CSV instead of generating"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Log scheduling progress"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.verify:
        return verify_main([args.verify, args.config])

    config_path = args.config
    if not Path(config_path).exists():
        print(f"Error: config file {config_path} not found")
        return 1

    print(f"Loading config from {config_path}...")
    try:
        config = load_config(config_path)
    except ConfigError as e:
        print("Config errors:")
        for p in e.problems:
            print(f"  {p}")
        return 1

    teams = config["teams"]
    slot_table = config["slot_table"]
    season = config["season"]

    print(f"Generating {season['weeks']}-week schedule for {len(teams)} teams "
          f"on {len(config['courts'])} courts...")
    try:
        matches = schedule(config)
    except SchedulingError as e:
        print(f"Error: {e}")
        return 1

    print("\nValidating...")
    result = validate_schedule(matches, teams, slot_table)
    report = format_validation_report(result)
    print(report)

    stats = compute_stats(matches, teams, slot_table)
    stats_text = format_stats_report(stats, teams, slot_table)
    print("\n" + stats_text)

    print("\nWriting output files...")
    for path in write_schedule(matches, teams, output_prefix=args.output_prefix,
                               competition_name=season["name"]):
        print(f"Written: {path}")

    stats_path = Path(args.output_prefix) / "stats.txt"
    stats_path.write_text(report + "\n\n" + stats_text)
    print(f"Written: {stats_path}")

    if result["valid"]:
        print("\nSchedule generated successfully!")
        return 0
    print(f"\nSchedule has {len(result['errors'])} constraint violations.")
    print("Add courts or slot hours so every round fits.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
