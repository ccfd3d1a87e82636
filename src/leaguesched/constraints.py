"""Constraint validation for generated or re-imported schedules."""

from collections import defaultdict

from leaguesched.models import ScheduledMatch, SlotTable
from leaguesched.slots import DEFAULT_SLOT_TABLE


def validate_schedule(matches: list[ScheduledMatch], teams: dict | list,
                      slot_table: SlotTable | None = None) -> dict:
    """Validate a schedule against all constraints.

    Returns dict with:
    - valid: bool (True if no hard constraint violations)
    - errors: list of hard constraint violations
    - warnings: list of soft constraint issues
    """
    if slot_table is None:
        slot_table = DEFAULT_SLOT_TABLE
    team_list = list(teams)
    known = set(team_list)

    errors = []
    warnings = []

    home_counts = defaultdict(int)
    away_counts = defaultdict(int)
    per_round = defaultdict(lambda: defaultdict(int))  # team -> round -> count
    per_date = defaultdict(lambda: defaultdict(int))  # team -> date -> count
    bookings: dict[tuple, ScheduledMatch] = {}
    rounds_seen = set()

    for m in matches:
        h = m.home_team
        a = m.away_team
        rounds_seen.add(m.round_number)

        if h not in known:
            errors.append(f"Unknown home team: {h}")
            continue
        if a not in known:
            errors.append(f"Unknown away team: {a}")
            continue
        if h == a:
            errors.append(f"Round {m.round_number}: {h} plays itself")
            continue

        home_counts[h] += 1
        away_counts[a] += 1
        for t in (h, a):
            per_round[t][m.round_number] += 1
            per_date[t][m.date] += 1

        if m.start_hour not in slot_table.weights:
            errors.append(
                f"{h} vs {a} on {m.date} starts at {m.start_hour}:00, "
                f"which is not a slot hour"
            )

        key = (m.date, m.start_hour, m.court)
        if key in bookings:
            other = bookings[key]
            errors.append(
                f"Court {m.court} double-booked on {m.date} at "
                f"{m.start_hour}:00: {other.home_team} vs {other.away_team} "
                f"and {h} vs {a}"
            )
        else:
            bookings[key] = m

    for t in sorted(per_round, key=str):
        for rnd, count in sorted(per_round[t].items()):
            if count > 1:
                errors.append(f"{t} plays {count} times in round {rnd}")
        for d, count in sorted(per_date[t].items()):
            if count > 1:
                errors.append(f"{t} plays {count} times on {d}")

    # Soft: home/away balance within 1
    for t in team_list:
        diff = abs(home_counts[t] - away_counts[t])
        if diff > 1:
            warnings.append(
                f"{t}: {home_counts[t]}H / {away_counts[t]}A "
                f"(home/away differs by {diff})"
            )

    # Soft: game counts differ by more than the bye rotation allows
    totals = {t: home_counts[t] + away_counts[t] for t in team_list}
    if totals:
        spread = max(totals.values()) - min(totals.values())
        n = len(known) + len(known) % 2
        cycles = -(-len(rounds_seen) // (n - 1)) if n > 1 else 1
        allowed = cycles if len(known) % 2 else 0
        if spread > allowed:
            warnings.append(
                f"Game count spread {min(totals.values())}-{max(totals.values())} "
                f"exceeds {allowed}"
            )

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "warnings": warnings,
    }


def format_validation_report(result: dict) -> str:
    """Format a validate_schedule result as text."""
    lines = []
    lines.append("=" * 60)
    lines.append("VALIDATION REPORT")
    lines.append("=" * 60)

    if result["valid"]:
        lines.append("\nAll hard constraints satisfied.")
    else:
        lines.append(f"\nERRORS ({len(result['errors'])}):")
        for e in result["errors"]:
            lines.append(f"  - {e}")

    if result["warnings"]:
        lines.append(f"\nWARNINGS ({len(result['warnings'])}):")
        for w in result["warnings"]:
            lines.append(f"  - {w}")
    else:
        lines.append("\nNo warnings.")

    return "\n".join(lines)
