"""Fair time-slot and court assignment.

Each team carries a slot debt: the running total of (average weight -
weight of the hour it was given). Teams that keep landing late hours build
up positive debt, and within each round the matchups are ordered by the
larger debt of their two teams so the most under-served team gets the
earliest free hour. Courts at one hour are filled before moving on to the
next hour.

Why the max and not the sum of the two debts:

    A (+3) vs B (+3): sum 6, max 3
    C (+5) vs D (0):  sum 5, max 5

Sorting by sum would give A-B the best hour even though C is the single
most under-served team. Sorting by max gives it to C-D.
"""

import logging
from datetime import date

from leaguesched.errors import (
    InvalidCourtsError, InvalidSlotTableError, RoundDateMismatchError,
)
from leaguesched.models import CourtId, Round, ScheduledMatch, SlotTable

logger = logging.getLogger(__name__)


DEFAULT_SLOT_TABLE = SlotTable(
    hours=[18, 19, 20, 21],
    weights={18: 4, 19: 3, 20: 2, 21: 1},
)


def validate_slot_table(slot_table: SlotTable) -> None:
    """Raise InvalidSlotTableError unless hours are usable best-first."""
    hours = slot_table.hours
    if not hours:
        raise InvalidSlotTableError("Slot table needs at least one hour")
    if len(set(hours)) != len(hours):
        raise InvalidSlotTableError(f"Slot hours repeat: {hours}")
    missing = [h for h in hours if h not in slot_table.weights]
    if missing:
        raise InvalidSlotTableError(f"No weight for slot hours {missing}")
    for h in hours:
        if not 0 <= h <= 23:
            raise InvalidSlotTableError(f"Slot hour {h} is not a valid hour")
    weights = [slot_table.weights[h] for h in hours]
    for earlier, later in zip(weights, weights[1:]):
        if later >= earlier:
            raise InvalidSlotTableError(
                f"Slot weights must strictly decrease in hour order, got {weights}"
            )


def _check_courts(courts: list[CourtId]) -> None:
    if not courts:
        raise InvalidCourtsError("At least one court is required")
    if len(set(courts)) != len(courts):
        raise InvalidCourtsError(f"Courts listed more than once: {courts}")


def _assign_round(rnd: Round, round_date: date, courts: list[CourtId],
                  slot_table: SlotTable,
                  debt: dict) -> list[ScheduledMatch]:
    """Place one round's matchups and update `debt` in place."""
    per_hour = len(courts)
    ordered = sorted(
        rnd.matchups,
        key=lambda m: -max(debt[m.home], debt[m.away]),
    )

    if len(ordered) > per_hour * len(slot_table):
        logger.warning(
            "Round %d has %d matchups but only %d court slots; "
            "hours will be reused",
            rnd.number, len(ordered), per_hour * len(slot_table),
        )

    average = slot_table.average_weight
    placed = []
    for idx, m in enumerate(ordered):
        hour = slot_table.hour_at(idx // per_hour)
        court = courts[idx % per_hour]
        placed.append(ScheduledMatch(
            home_team=m.home,
            away_team=m.away,
            round_number=rnd.number,
            date=round_date,
            start_hour=hour,
            court=court,
        ))
        change = average - slot_table.weight(hour)
        debt[m.home] += change
        debt[m.away] += change

    return placed


def assign_slots(rounds: list[Round], dates: list[date],
                 courts: list[CourtId],
                 slot_table: SlotTable | None = None) -> list[ScheduledMatch]:
    """Assign every matchup a start hour and court, round by round.

    Output is in round order, then in the order matchups were placed
    within the round (best hour first, courts in the given order).
    """
    _check_courts(courts)
    if len(rounds) != len(dates):
        raise RoundDateMismatchError(
            f"Got {len(rounds)} rounds but {len(dates)} round dates"
        )
    if slot_table is None:
        slot_table = DEFAULT_SLOT_TABLE
    validate_slot_table(slot_table)

    debt: dict = {}
    for rnd in rounds:
        for m in rnd.matchups:
            debt.setdefault(m.home, 0.0)
            debt.setdefault(m.away, 0.0)

    scheduled = []
    for rnd, round_date in zip(rounds, dates):
        scheduled.extend(_assign_round(rnd, round_date, courts, slot_table, debt))

    if debt:
        logger.debug("Final slot debt range: %.1f to %.1f",
                     min(debt.values()), max(debt.values()))
    return scheduled


def slot_debt(matches: list[ScheduledMatch],
              slot_table: SlotTable | None = None) -> dict:
    """Recompute each team's slot debt from an already-assigned schedule."""
    if slot_table is None:
        slot_table = DEFAULT_SLOT_TABLE
    average = slot_table.average_weight
    debt: dict = {}
    for m in matches:
        change = average - slot_table.weight(m.start_hour)
        for t in (m.home_team, m.away_team):
            debt[t] = debt.get(t, 0.0) + change
    return debt
