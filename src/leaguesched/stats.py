"""Fairness statistics and balance reporting."""

from collections import defaultdict

from leaguesched.models import ScheduledMatch, SlotTable
from leaguesched.slots import DEFAULT_SLOT_TABLE, slot_debt


def compute_stats(matches: list[ScheduledMatch], teams: dict | list,
                  slot_table: SlotTable | None = None) -> dict:
    """Compute per-team statistics for a schedule.

    Returns dict with:
    - rounds: sorted round numbers present in the schedule
    - games, home, away, byes: dict of team -> count
    - hours: dict of team -> {hour: count}
    - debt: dict of team -> final slot debt
    - debt_spread: max debt - min debt
    """
    if slot_table is None:
        slot_table = DEFAULT_SLOT_TABLE
    all_teams = list(teams)

    games = defaultdict(int)
    home = defaultdict(int)
    away = defaultdict(int)
    hours = defaultdict(lambda: defaultdict(int))
    played_rounds = defaultdict(set)
    rounds = set()

    for m in matches:
        rounds.add(m.round_number)
        home[m.home_team] += 1
        away[m.away_team] += 1
        for t in (m.home_team, m.away_team):
            games[t] += 1
            hours[t][m.start_hour] += 1
            played_rounds[t].add(m.round_number)

    debt = slot_debt(matches, slot_table)
    team_debt = {t: debt.get(t, 0.0) for t in all_teams}
    debt_values = list(team_debt.values())

    return {
        "rounds": sorted(rounds),
        "games": {t: games[t] for t in all_teams},
        "home": {t: home[t] for t in all_teams},
        "away": {t: away[t] for t in all_teams},
        "byes": {t: len(rounds - played_rounds[t]) for t in all_teams},
        "hours": {t: dict(hours[t]) for t in all_teams},
        "debt": team_debt,
        "debt_spread": (max(debt_values) - min(debt_values)) if debt_values else 0.0,
    }


def format_stats_report(stats: dict, teams: dict | list,
                        slot_table: SlotTable | None = None) -> str:
    """Format compute_stats output as a per-team table."""
    if slot_table is None:
        slot_table = DEFAULT_SLOT_TABLE

    lines = []
    lines.append("=" * 60)
    lines.append("SCHEDULE STATISTICS")
    lines.append("=" * 60)
    lines.append(f"\nRounds: {len(stats['rounds'])}")

    hour_cols = "".join(f"{h:>5}" for h in slot_table.hours)
    lines.append(f"\n{'Team':<12}{'GP':>4}{'H':>4}{'A':>4}{'Bye':>5}"
                 f"{hour_cols}{'Debt':>8}")
    for t in teams:
        hour_counts = "".join(
            f"{stats['hours'][t].get(h, 0):>5}" for h in slot_table.hours
        )
        lines.append(
            f"{str(t):<12}{stats['games'][t]:>4}{stats['home'][t]:>4}"
            f"{stats['away'][t]:>4}{stats['byes'][t]:>5}{hour_counts}"
            f"{stats['debt'][t]:>8.1f}"
        )

    lines.append(f"\nSlot debt spread: {stats['debt_spread']:.1f}")
    return "\n".join(lines)
