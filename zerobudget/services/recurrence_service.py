"""
Occurrence dates for recurring rules.

A rule is a projection over an open-ended timeline bounded by its start date and
optional (inclusive) end date. Nothing here creates transactions; callers decide
what to materialise from the dates returned.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

import structlog

from ..models import EntryType, Frequency, RecurringRule
from .dates import (
    add_days,
    clamp_day,
    format_iso,
    month_bounds,
    month_key,
    parse_date,
    shift_month,
    today as current_date,
)

logger = structlog.get_logger()

FREQUENCY_LABELS = {
    Frequency.WEEKLY: "Weekly",
    Frequency.BIWEEKLY: "Biweekly",
    Frequency.MONTHLY: "Monthly",
    Frequency.YEARLY: "Yearly",
}

STEP_DAYS = {
    Frequency.WEEKLY: 7,
    Frequency.BIWEEKLY: 14,
}

# How far ahead next_occurrence looks before giving up
SEARCH_HORIZON_MONTHS = 24


@dataclass(frozen=True)
class Occurrence:
    """A single date on which an active rule fires."""
    key: str  # "{rule_id}:{date}", stable across calls
    rule_id: str
    date: str
    label: str
    amount: Decimal
    type: EntryType
    category_id: str | None
    subcategory_id: str | None
    merchant: str | None


def _within_bounds(d: date, start: date, end: date | None) -> bool:
    return d >= start and (end is None or d <= end)


def _day_of_month_occurrence(
    year: int, month: int, day: int, start: date, end: date | None
) -> list[date]:
    occurrence = clamp_day(year, month, day)
    return [occurrence] if _within_bounds(occurrence, start, end) else []


def _stepped_occurrences(
    step: int, start: date, end: date | None, month_start: date, month_end: date
) -> list[date]:
    """
    Every ``step`` days from ``start`` that lands inside the month.

    The walk stays anchored on ``start``: the first candidate is the first whole
    number of steps from it on or after ``month_start``.
    """
    current = start
    if current < month_start:
        steps = -(-(month_start - start).days // step)
        current = add_days(start, steps * step)

    results = []
    while current <= month_end:
        if end is None or current <= end:
            results.append(current)
        current = add_days(current, step)
    return results


def occurrences_in_month(rule: RecurringRule, key: str) -> list[str]:
    """
    All dates (YYYY-MM-DD) on which ``rule`` fires within month ``key``.

    Results are ordered, always inside the month, and never before the rule's
    start date or after its end date.
    """
    month_start, month_end = month_bounds(key)

    rule_start = parse_date(rule.start_date)
    if rule_start > month_end:
        return []  # rule hasn't started yet

    rule_end = parse_date(rule.end_date) if rule.end_date else None
    if rule_end is not None and rule_end < month_start:
        return []  # rule already ended

    year, month = month_start.year, month_start.month

    if rule.frequency == Frequency.MONTHLY:
        dates = _day_of_month_occurrence(year, month, rule_start.day, rule_start, rule_end)
    elif rule.frequency == Frequency.YEARLY:
        if rule_start.month != month:
            return []
        dates = _day_of_month_occurrence(year, month, rule_start.day, rule_start, rule_end)
    elif rule.frequency in STEP_DAYS:
        dates = _stepped_occurrences(
            STEP_DAYS[rule.frequency], rule_start, rule_end, month_start, month_end
        )
    else:
        raise ValueError(f"Unknown frequency: {rule.frequency!r}")

    return [format_iso(d) for d in dates]


def next_occurrence(rule: RecurringRule, today: date | None = None) -> str | None:
    """
    First occurrence on or after ``today``, searching up to two years ahead.

    Returns None when the rule has ended or its next date lies beyond the
    search horizon.
    """
    today = today or current_date()
    today_str = format_iso(today)

    key = month_key(today)
    for _ in range(SEARCH_HORIZON_MONTHS):
        for d in occurrences_in_month(rule, key):
            if d >= today_str:
                return d
        key = shift_month(key, 1)

    logger.debug("no_next_occurrence", rule_id=rule.id, today=today_str)
    return None


def scheduled_occurrences(rules: Iterable[RecurringRule], key: str) -> list[Occurrence]:
    """Occurrences of every non-paused rule in a month, ordered by date then label."""
    occurrences = []
    for rule in rules:
        if rule.is_paused:
            continue
        for d in occurrences_in_month(rule, key):
            occurrences.append(Occurrence(
                key=f"{rule.id}:{d}",
                rule_id=rule.id,
                date=d,
                label=rule.label,
                amount=rule.amount,
                type=rule.type,
                category_id=rule.category_id,
                subcategory_id=rule.subcategory_id,
                merchant=rule.merchant,
            ))

    occurrences.sort(key=lambda o: (o.date, o.label))
    return occurrences


def sort_rules(
    rules: Iterable[RecurringRule], today: date | None = None
) -> list[tuple[RecurringRule, str | None]]:
    """
    Order rules for display, paired with their next occurrence.

    Paused rules go last. Active rules with an upcoming date come first, soonest
    first; active rules without one follow, by label. Rules sharing a next
    date keep their input order.
    """
    today = today or current_date()
    paired = [(rule, next_occurrence(rule, today)) for rule in rules]

    def sort_key(item):
        rule, next_date = item
        if next_date is None:
            return (rule.is_paused, True, "", rule.label)
        return (rule.is_paused, False, next_date, "")

    return sorted(paired, key=sort_key)
