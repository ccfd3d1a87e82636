"""Round-robin pairing generation using the circle method."""

import logging

from leaguesched.errors import InvalidTeamsError, InvalidWeeksError
from leaguesched.models import BYE, Matchup, Round, TeamId

logger = logging.getLogger(__name__)


def rotate(working: list, rotations: int) -> list:
    """Return the circle-method arrangement after `rotations` steps.

    Position 0 stays fixed. Each step moves the last entry to position 1.
    """
    arranged = list(working)
    for _ in range(rotations):
        arranged.insert(1, arranged.pop())
    return arranged


def _check_teams(teams: list[TeamId]) -> None:
    if len(teams) < 2:
        raise InvalidTeamsError(
            f"Need at least 2 teams to generate a schedule, got {len(teams)}"
        )
    seen = set()
    dupes = []
    for t in teams:
        if t in seen:
            dupes.append(t)
        seen.add(t)
    if dupes:
        raise InvalidTeamsError(f"Teams listed more than once: {dupes}")


def generate_pairings(teams: list[TeamId], number_of_weeks: int) -> list[Round]:
    """Generate one Round of matchups per week using the circle method.

    For N teams (N+1 with a bye placeholder when N is odd) a full cycle is
    N-1 rounds in which every pair meets once. Seasons longer than one
    cycle repeat the cycle; the home side of each pairing alternates with
    round-in-cycle plus cycle parity, so a repeated pairing swaps home/away
    relative to its previous meeting.

    The home parity is (round_in_cycle + cycle), not (week + cycle). The
    two agree throughout the first cycle. After that they differ: the
    padded team count is always even, so (week + cycle) has the same parity
    as round_in_cycle and would never swap a repeated pairing, nor
    alternate home in a two-team league. Changing this rule changes every
    multi-cycle schedule and needs league sign-off.

    Returns list of Rounds numbered from 1. Teams drawing the bye are
    recorded in Round.bye_teams and never appear in a Matchup.
    """
    _check_teams(teams)
    if isinstance(number_of_weeks, bool) or not isinstance(number_of_weeks, int) \
            or number_of_weeks < 1:
        raise InvalidWeeksError(
            f"Number of weeks must be a whole number >= 1, got {number_of_weeks!r}"
        )

    working = list(teams)
    if len(working) % 2 == 1:
        working.append(BYE)

    n = len(working)
    rounds_per_cycle = n - 1
    rounds = []

    for week in range(number_of_weeks):
        round_in_cycle = week % rounds_per_cycle
        cycle = week // rounds_per_cycle
        arranged = rotate(working, round_in_cycle)
        first_is_home = (round_in_cycle + cycle) % 2 == 0

        matchups = []
        bye_teams = []
        for i in range(n // 2):
            t1 = arranged[i]
            t2 = arranged[n - 1 - i]
            if t1 is BYE:
                bye_teams.append(t2)
            elif t2 is BYE:
                bye_teams.append(t1)
            elif first_is_home:
                matchups.append(Matchup(t1, t2))
            else:
                matchups.append(Matchup(t2, t1))

        rounds.append(Round(number=week + 1, matchups=matchups,
                            bye_teams=bye_teams))

    logger.debug("Generated %d rounds for %d teams (%d per cycle)",
                 len(rounds), len(teams), rounds_per_cycle)
    return rounds


def verify_round_robin(rounds: list[Round], teams: list[TeamId],
                       cycles: int = 1) -> dict:
    """Verify rounds form `cycles` complete round-robins.

    Returns dict with:
    - valid: bool
    - errors: list of error strings
    - matchup_counts: dict of (team_a, team_b) -> count
    - games_per_team: dict of team -> game count
    - home_counts: dict of team -> home game count
    """
    errors = []
    matchup_counts: dict[tuple, int] = {}
    games_per_team: dict = {t: 0 for t in teams}
    home_counts: dict = {t: 0 for t in teams}
    order = {t: i for i, t in enumerate(teams)}

    def _key(a, b):
        return (a, b) if order.get(a, 0) <= order.get(b, 0) else (b, a)

    for rnd in rounds:
        teams_in_round = set()
        for m in rnd.matchups:
            if m.home == m.away:
                errors.append(f"Round {rnd.number}: {m.home} plays itself")
            for t in m.teams:
                if t in teams_in_round:
                    errors.append(f"Round {rnd.number}: {t} appears twice")
                teams_in_round.add(t)

            key = _key(m.home, m.away)
            matchup_counts[key] = matchup_counts.get(key, 0) + 1
            games_per_team[m.home] = games_per_team.get(m.home, 0) + 1
            games_per_team[m.away] = games_per_team.get(m.away, 0) + 1
            home_counts[m.home] = home_counts.get(m.home, 0) + 1

    for i, t1 in enumerate(teams):
        for t2 in teams[i + 1:]:
            count = matchup_counts.get(_key(t1, t2), 0)
            if count != cycles:
                errors.append(
                    f"{t1} vs {t2}: played {count} times (expected {cycles})"
                )

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "matchup_counts": matchup_counts,
        "games_per_team": games_per_team,
        "home_counts": home_counts,
    }
