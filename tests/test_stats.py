"""Tests for stats.py — fairness statistics."""

from datetime import date

import pytest

from leaguesched.models import Team
from leaguesched.scheduler import generate_schedule
from leaguesched.stats import compute_stats, format_stats_report


class TestComputeStats:
    def test_four_teams_one_court(self):
        teams = ["A", "B", "C", "D"]
        matches = generate_schedule(teams, 3, date(2026, 3, 2), 3, [1])
        stats = compute_stats(matches, teams)

        assert stats["rounds"] == [1, 2, 3]
        assert stats["games"] == {"A": 3, "B": 3, "C": 3, "D": 3}
        assert stats["byes"] == {"A": 0, "B": 0, "C": 0, "D": 0}
        assert stats["hours"]["A"] == {18: 3}
        assert stats["debt"]["A"] == pytest.approx(-4.5)
        assert stats["debt"]["C"] == pytest.approx(-2.5)
        assert stats["debt_spread"] == pytest.approx(2.0)

    def test_byes_counted(self):
        teams = ["A", "B", "C", "D", "E"]
        matches = generate_schedule(teams, 5, date(2026, 3, 2), 3, [1, 2])
        stats = compute_stats(matches, teams)
        assert stats["byes"] == {t: 1 for t in teams}
        assert stats["games"] == {t: 4 for t in teams}

    def test_home_away(self):
        teams = ["A", "B"]
        matches = generate_schedule(teams, 4, date(2026, 3, 2), 3, [1])
        stats = compute_stats(matches, teams)
        assert stats["home"] == {"A": 2, "B": 2}
        assert stats["away"] == {"A": 2, "B": 2}


class TestFormatStatsReport:
    def test_contains_teams_and_hours(self):
        teams = {c: Team(c) for c in ["A", "B", "C", "D"]}
        matches = generate_schedule(list(teams), 3, date(2026, 3, 2), 3, [1])
        text = format_stats_report(compute_stats(matches, teams), teams)
        assert "SCHEDULE STATISTICS" in text
        assert "Rounds: 3" in text
        for h in (18, 19, 20, 21):
            assert str(h) in text
        assert "Slot debt spread: 2.0" in text
