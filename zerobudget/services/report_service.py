from collections import defaultdict
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal

from ..models import Category, EntryType, MonthBudget, Transaction
from .budget_service import month_transactions, total_by_type, total_planned_by_type
from .dates import month_bounds, parse_date, to_decimal


@dataclass(frozen=True)
class MonthSummary:
    month_key: str
    income: Decimal
    expenses: Decimal
    planned_expenses: Decimal
    net: Decimal
    transaction_count: int


@dataclass(frozen=True)
class CashFlowDay:
    date: str
    income: Decimal
    expenses: Decimal
    balance: Decimal


def monthly_summary(
    categories: Iterable[Category],
    transactions: Iterable[Transaction],
    budgets_by_month: Mapping[str, MonthBudget],
    month_keys: Iterable[str],
) -> list[MonthSummary]:
    """One summary row per requested month, in the order requested."""
    categories = list(categories)
    transactions = list(transactions)

    rows = []
    for key in month_keys:
        in_month = month_transactions(transactions, key)
        income = total_by_type(in_month, EntryType.INCOME)
        expenses = total_by_type(in_month, EntryType.EXPENSE)
        rows.append(MonthSummary(
            month_key=key,
            income=income,
            expenses=expenses,
            planned_expenses=total_planned_by_type(
                categories, budgets_by_month.get(key), EntryType.EXPENSE
            ),
            net=income - expenses,
            transaction_count=len(in_month),
        ))
    return rows


def daily_cash_flow(
    transactions: Iterable[Transaction],
    month_key: str,
    starting_balance=None,
) -> list[CashFlowDay]:
    """
    Running balance through a month, one row per day with activity.

    Income only counts when it came from a recurring rule (the expected
    paychecks). Expenses count when they came from a rule or have been
    confirmed.
    """
    month_bounds(month_key)  # rejects malformed keys
    by_day: dict[int, list[Transaction]] = defaultdict(list)
    for t in month_transactions(transactions, month_key):
        by_day[parse_date(t.date).day].append(t)

    balance = to_decimal(starting_balance)
    rows = []
    for day in sorted(by_day):
        day_txns = by_day[day]
        income = sum(
            (to_decimal(t.amount) for t in day_txns
             if t.type == EntryType.INCOME and t.recurring_rule_id is not None),
            Decimal(0),
        )
        expenses = sum(
            (to_decimal(t.amount) for t in day_txns
             if t.type == EntryType.EXPENSE
             and (t.recurring_rule_id is not None or not t.is_pending)),
            Decimal(0),
        )
        if income > 0 or expenses > 0:
            balance += income - expenses
            rows.append(CashFlowDay(
                date=f"{month_key}-{day:02d}",
                income=income,
                expenses=expenses,
                balance=balance,
            ))
    return rows
