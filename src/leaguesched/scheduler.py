"""Schedule generation: pairings, round dates, then fair slot assignment.

Three phases:
1. Round-robin matchups for every week (roundrobin.py)
2. One calendar date per week on the league night (dates.py)
3. Start hour + court for every matchup, balancing slot debt (slots.py)

The result is an in-memory list of ScheduledMatch records. Nothing is
stored; the caller persists the whole list or none of it.
"""

import logging
from datetime import date

from leaguesched.dates import calculate_round_dates
from leaguesched.models import CourtId, ScheduledMatch, SlotTable, TeamId
from leaguesched.roundrobin import generate_pairings
from leaguesched.slots import assign_slots

logger = logging.getLogger(__name__)


def generate_schedule(teams: list[TeamId], number_of_weeks: int,
                      start_date: date, target_weekday: int,
                      courts: list[CourtId],
                      slot_table: SlotTable | None = None) -> list[ScheduledMatch]:
    """Generate a complete season schedule.

    Teams are assumed eligible (paid, rosters complete); only structural
    preconditions are checked. Identical arguments always produce an
    identical schedule.
    """
    rounds = generate_pairings(teams, number_of_weeks)
    dates = calculate_round_dates(start_date, target_weekday, number_of_weeks)

    logger.info("Generated %d rounds, first round on %s",
                len(rounds), dates[0].isoformat())

    matches = assign_slots(rounds, dates, courts, slot_table=slot_table)

    logger.info("Scheduled %d matches on %d courts", len(matches), len(courts))
    return matches


def schedule(config: dict) -> list[ScheduledMatch]:
    """Generate a schedule from a loaded season config (see config.load_config)."""
    season = config["season"]
    return generate_schedule(
        list(config["teams"].keys()),
        season["weeks"],
        season["start_date"],
        season["day"],
        config["courts"],
        slot_table=config.get("slot_table"),
    )
