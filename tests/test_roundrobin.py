"""Tests for roundrobin.py — circle-method pairing generation."""

import pytest

from leaguesched.errors import InvalidTeamsError, InvalidWeeksError
from leaguesched.models import BYE, Matchup, Round
from leaguesched.roundrobin import generate_pairings, rotate, verify_round_robin


class TestRotate:
    def test_no_rotation(self):
        assert rotate(["A", "B", "C", "D"], 0) == ["A", "B", "C", "D"]

    def test_first_stays_fixed(self):
        assert rotate(["A", "B", "C", "D"], 1) == ["A", "D", "B", "C"]
        assert rotate(["A", "B", "C", "D"], 2) == ["A", "C", "D", "B"]

    def test_full_turn_returns_to_start(self):
        assert rotate(["A", "B", "C", "D"], 3) == ["A", "B", "C", "D"]

    def test_does_not_mutate_input(self):
        teams = ["A", "B", "C", "D"]
        rotate(teams, 2)
        assert teams == ["A", "B", "C", "D"]


class TestGeneratePairings:
    def test_four_teams_first_cycle(self):
        rounds = generate_pairings(["A", "B", "C", "D"], 3)
        assert [r.number for r in rounds] == [1, 2, 3]
        assert rounds[0].matchups == [Matchup("A", "D"), Matchup("B", "C")]
        assert rounds[1].matchups == [Matchup("C", "A"), Matchup("B", "D")]
        assert rounds[2].matchups == [Matchup("A", "B"), Matchup("C", "D")]

    def test_round_size(self):
        for n in range(2, 11):
            teams = [f"T{i}" for i in range(n)]
            for r in generate_pairings(teams, 2 * n):
                assert len(r.matchups) == n // 2

    def test_no_team_plays_twice_in_round(self):
        teams = [f"T{i}" for i in range(9)]
        for r in generate_pairings(teams, 20):
            seen = set()
            for m in r.matchups:
                assert m.home not in seen, f"{m.home} plays twice in round {r.number}"
                assert m.away not in seen, f"{m.away} plays twice in round {r.number}"
                seen.add(m.home)
                seen.add(m.away)

    def test_bye_never_in_output(self):
        teams = ["A", "B", "C", "D", "E"]
        for r in generate_pairings(teams, 10):
            for m in r.matchups:
                assert BYE not in m.teams
            assert BYE not in r.bye_teams

    def test_every_pair_plays_once_even(self):
        teams = [f"T{i}" for i in range(6)]
        rounds = generate_pairings(teams, 5)
        result = verify_round_robin(rounds, teams)
        assert result["valid"], result["errors"]

    def test_every_pair_plays_once_odd(self):
        teams = [f"T{i}" for i in range(7)]
        rounds = generate_pairings(teams, 7)
        result = verify_round_robin(rounds, teams)
        assert result["valid"], result["errors"]
        for t in teams:
            assert result["games_per_team"][t] == 6

    def test_two_cycles_swap_home_away(self):
        teams = [f"T{i}" for i in range(6)]
        rounds = generate_pairings(teams, 10)
        result = verify_round_robin(rounds, teams, cycles=2)
        assert result["valid"], result["errors"]

        first_home = {}
        for r in rounds:
            for m in r.matchups:
                key = frozenset(m.teams)
                if key in first_home:
                    assert first_home[key] != m.home, (
                        f"{m.home} is home in both meetings of {sorted(key)}"
                    )
                else:
                    first_home[key] = m.home

    def test_two_cycles_swap_home_away_odd(self):
        teams = ["A", "B", "C", "D", "E"]
        rounds = generate_pairings(teams, 10)
        homes = {}
        for r in rounds:
            for m in r.matchups:
                homes.setdefault(frozenset(m.teams), []).append(m.home)
        assert len(homes) == 10
        for key, seq in homes.items():
            assert len(seq) == 2
            assert seq[0] != seq[1]

    def test_second_cycle_repeats_pairings(self):
        rounds = generate_pairings(["A", "B", "C", "D"], 6)
        for first, second in zip(rounds[:3], rounds[3:]):
            assert [set(m.teams) for m in first.matchups] == \
                [set(m.teams) for m in second.matchups]

    def test_short_season_is_incomplete(self):
        teams = [f"T{i}" for i in range(8)]
        rounds = generate_pairings(teams, 3)
        assert len(rounds) == 3
        result = verify_round_robin(rounds, teams)
        assert not result["valid"]
        for t in teams:
            assert result["games_per_team"][t] == 3

    def test_two_teams_alternate_home(self):
        rounds = generate_pairings(["A", "B"], 4)
        assert [r.matchups for r in rounds] == [
            [Matchup("A", "B")],
            [Matchup("B", "A")],
            [Matchup("A", "B")],
            [Matchup("B", "A")],
        ]

    def test_five_teams_four_weeks(self):
        teams = ["A", "B", "C", "D", "E"]
        rounds = generate_pairings(teams, 4)
        byes = []
        for r in rounds:
            assert len(r.matchups) == 2
            assert len(r.bye_teams) == 1
            byes.extend(r.bye_teams)
        assert len(set(byes)) == 4

    def test_odd_cycle_every_team_byes_once(self):
        teams = ["A", "B", "C", "D", "E"]
        rounds = generate_pairings(teams, 5)
        byes = sorted(t for r in rounds for t in r.bye_teams)
        assert byes == teams

    def test_games_differ_by_bye_imbalance_only(self):
        teams = [f"T{i}" for i in range(7)]
        rounds = generate_pairings(teams, 11)
        result = verify_round_robin(rounds, teams, cycles=2)
        counts = result["games_per_team"].values()
        assert max(counts) - min(counts) <= 2

    def test_first_cycle_home_follows_week_parity(self):
        teams = [f"T{i}" for i in range(6)]
        rounds = generate_pairings(teams, 5)
        for week, rnd in enumerate(rounds):
            [fixed] = [m for m in rnd.matchups if "T0" in m.teams]
            assert (fixed.home == "T0") == (week % 2 == 0)

    def test_deterministic(self):
        teams = ["A", "B", "C", "D", "E", "F"]
        assert generate_pairings(teams, 12) == generate_pairings(teams, 12)

    def test_one_team_rejected(self):
        with pytest.raises(InvalidTeamsError):
            generate_pairings(["A"], 3)

    def test_empty_rejected(self):
        with pytest.raises(InvalidTeamsError):
            generate_pairings([], 3)

    def test_duplicate_teams_rejected(self):
        with pytest.raises(InvalidTeamsError):
            generate_pairings(["A", "B", "A"], 3)

    def test_zero_weeks_rejected(self):
        with pytest.raises(InvalidWeeksError):
            generate_pairings(["A", "B"], 0)

    def test_negative_weeks_rejected(self):
        with pytest.raises(InvalidWeeksError):
            generate_pairings(["A", "B"], -2)


class TestVerifyRoundRobin:
    def test_detects_missing_matchup(self):
        rounds = [
            Round(1, [Matchup("A", "B")]),
            Round(2, [Matchup("A", "C")]),
        ]
        result = verify_round_robin(rounds, ["A", "B", "C"])
        assert not result["valid"]
        assert any("B vs C" in e for e in result["errors"])

    def test_detects_duplicate_matchup(self):
        rounds = [
            Round(1, [Matchup("A", "B")]),
            Round(2, [Matchup("A", "C")]),
            Round(3, [Matchup("B", "C")]),
            Round(4, [Matchup("B", "A")]),
        ]
        result = verify_round_robin(rounds, ["A", "B", "C"])
        assert not result["valid"]

    def test_detects_team_playing_twice_in_round(self):
        rounds = [Round(1, [Matchup("A", "B"), Matchup("A", "C")])]
        result = verify_round_robin(rounds, ["A", "B", "C"])
        assert not result["valid"]
        assert any("A" in e and "twice" in e for e in result["errors"])

    def test_home_counts(self):
        rounds = [Round(1, [Matchup("A", "B")]), Round(2, [Matchup("A", "B")])]
        result = verify_round_robin(rounds, ["A", "B"], cycles=2)
        assert result["valid"]
        assert result["home_counts"] == {"A": 2, "B": 0}
