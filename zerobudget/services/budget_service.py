import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP

import structlog

from ..models import (
    Category,
    EntryType,
    FlatAssignment,
    MonthBudget,
    SplitAssignment,
    Transaction,
)
from .dates import date_in_month, to_decimal

logger = structlog.get_logger()

ZERO = Decimal(0)

# Fixed thresholds, in percent of planned, for both income and expense
OVER_THRESHOLD = 100
WARNING_THRESHOLD = 80


class ProgressStatus(str, enum.Enum):
    NONE = "none"
    GOOD = "good"
    WARNING = "warning"
    OVER = "over"


@dataclass(frozen=True)
class SubcategoryLine:
    subcategory_id: str
    name: str
    planned: Decimal
    spent: Decimal
    remaining: Decimal
    percent: int
    status: ProgressStatus


@dataclass(frozen=True)
class CategoryLine:
    category_id: str
    name: str
    type: EntryType
    color: str | None
    planned: Decimal
    spent: Decimal
    remaining: Decimal
    percent: int
    status: ProgressStatus
    transaction_count: int
    subcategories: list[SubcategoryLine] = field(default_factory=list)


@dataclass(frozen=True)
class MonthOverview:
    month_key: str
    actual_income: Decimal
    actual_expenses: Decimal
    planned_income: Decimal
    planned_expenses: Decimal
    unbudgeted: Decimal
    fully_assigned: bool
    has_budget: bool
    income: list[CategoryLine]
    expenses: list[CategoryLine]


def _sum(amounts: Iterable) -> Decimal:
    return sum((to_decimal(a) for a in amounts), ZERO)


def _lookup(amounts: Mapping[str, Decimal] | None, key: str) -> Decimal:
    if not amounts:
        return ZERO
    return to_decimal(amounts.get(key))


# --- Spent ---

def category_spent(transactions: Iterable[Transaction], category_id: str) -> Decimal:
    """
    Sum of flat transactions booked against ``category_id``.

    Split transactions are not counted here; use ``category_total`` for a sum
    that covers both shapes.
    """
    return _sum(
        t.amount for t in transactions
        if isinstance(t.assignment, FlatAssignment)
        and t.assignment.category_id == category_id
    )


def subcategory_spent(transactions: Iterable[Transaction], subcategory_id: str) -> Decimal:
    """Sum of flat transactions booked against ``subcategory_id``."""
    return _sum(
        t.amount for t in transactions
        if isinstance(t.assignment, FlatAssignment)
        and t.assignment.subcategory_id == subcategory_id
    )


def _allocations(transaction: Transaction) -> list[tuple[str | None, str | None, Decimal | None]]:
    """(category_id, subcategory_id, amount) triples for either transaction shape."""
    assignment = transaction.assignment
    if isinstance(assignment, FlatAssignment):
        return [(assignment.category_id, assignment.subcategory_id, transaction.amount)]
    if isinstance(assignment, SplitAssignment):
        return [(s.category_id, s.subcategory_id, s.amount) for s in assignment.splits]
    raise TypeError(f"Unknown assignment: {assignment!r}")


def category_total(transactions: Iterable[Transaction], category_id: str) -> Decimal:
    """Amount assigned to a category, counting flat transactions and split shares."""
    return _sum(
        amount
        for t in transactions
        for cat_id, _, amount in _allocations(t)
        if cat_id == category_id
    )


def subcategory_total(transactions: Iterable[Transaction], subcategory_id: str) -> Decimal:
    """Amount assigned to a subcategory, counting flat transactions and split shares."""
    return _sum(
        amount
        for t in transactions
        for _, sub_id, amount in _allocations(t)
        if sub_id == subcategory_id
    )


def transactions_for_category(
    transactions: Iterable[Transaction], category_id: str
) -> list[Transaction]:
    """Transactions touching a category directly or through one of their splits."""
    return [
        t for t in transactions
        if any(cat_id == category_id for cat_id, _, _ in _allocations(t))
    ]


def month_transactions(transactions: Iterable[Transaction], month_key: str) -> list[Transaction]:
    """Transactions whose date falls in ``month_key``."""
    return [t for t in transactions if date_in_month(t.date, month_key)]


# --- Planned ---

def category_planned(month_budget: MonthBudget | None, category_id: str) -> Decimal:
    return _lookup(month_budget.planned if month_budget else None, category_id)


def subcategory_planned(month_budget: MonthBudget | None, subcategory_id: str) -> Decimal:
    return _lookup(month_budget.subcategory_planned if month_budget else None, subcategory_id)


def category_effective_planned(category: Category, month_budget: MonthBudget | None) -> Decimal:
    """
    Planned amount for a category after subcategory roll-up.

    * no subcategories: the category-level amount
    * at least one subcategory has an entry (even 0): sum of subcategory amounts
    * subcategories but none budgeted: the category-level amount, for months
      saved before subcategory budgeting existed
    """
    if not category.has_subcategories:
        return category_planned(month_budget, category.id)

    sub_planned = month_budget.subcategory_planned if month_budget else {}
    has_subcategory_data = any(sub.id in sub_planned for sub in category.subcategories)
    if has_subcategory_data:
        return _sum(
            subcategory_planned(month_budget, sub.id) for sub in category.subcategories
        )

    return category_planned(month_budget, category.id)


# --- Progress ---

def progress_percent(spent, planned) -> int:
    """Share of plan used, 0..100. Overspend is capped at 100."""
    planned = to_decimal(planned)
    if not planned:
        return 0
    pct = (to_decimal(spent) / planned * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return min(100, int(pct))


def progress_status(spent, planned, entry_type: EntryType = EntryType.EXPENSE) -> ProgressStatus:
    """
    Classify progress against plan.

    ``entry_type`` is accepted so callers can pass it through for labelling; the
    thresholds are the same for income and expense.
    """
    planned = to_decimal(planned)
    if not planned:
        return ProgressStatus.NONE
    pct = to_decimal(spent) / planned * 100
    if pct >= OVER_THRESHOLD:
        return ProgressStatus.OVER
    if pct >= WARNING_THRESHOLD:
        return ProgressStatus.WARNING
    return ProgressStatus.GOOD


def remaining(spent, planned) -> Decimal:
    """Planned minus spent; negative when over plan."""
    return to_decimal(planned) - to_decimal(spent)


# --- Totals ---

def total_by_type(transactions: Iterable[Transaction], entry_type: EntryType) -> Decimal:
    """Sum by the transaction's own declared type (splits do not change it)."""
    return _sum(t.amount for t in transactions if t.type == entry_type)


def total_planned_by_type(
    categories: Iterable[Category],
    month_budget: MonthBudget | None,
    entry_type: EntryType,
) -> Decimal:
    return _sum(
        category_effective_planned(c, month_budget)
        for c in categories
        if c.type == entry_type
    )


def unbudgeted_amount(categories: Iterable[Category], month_budget: MonthBudget | None) -> Decimal:
    """Planned income minus planned expenses; zero in a fully assigned budget."""
    categories = list(categories)
    planned_income = total_planned_by_type(categories, month_budget, EntryType.INCOME)
    planned_expenses = total_planned_by_type(categories, month_budget, EntryType.EXPENSE)
    return planned_income - planned_expenses


# --- Month-level views ---

def month_has_budget(month_budget: MonthBudget | None) -> bool:
    """A month counts as set up once any planned amount is above zero."""
    if month_budget is None:
        return False
    return any(to_decimal(v) > 0 for v in month_budget.planned.values()) or any(
        to_decimal(v) > 0 for v in month_budget.subcategory_planned.values()
    )


def adjacent_budget_months(
    budgets: Mapping[str, MonthBudget], month_key: str
) -> tuple[str | None, str | None]:
    """Nearest earlier and later month keys whose budget has data."""
    keys = sorted(k for k, b in budgets.items() if month_has_budget(b))
    previous = [k for k in keys if k < month_key]
    following = [k for k in keys if k > month_key]
    return (previous[-1] if previous else None, following[0] if following else None)


def copy_budget(
    budgets: Mapping[str, MonthBudget], from_key: str, to_key: str
) -> dict[str, MonthBudget]:
    """Return a new mapping where ``to_key`` holds a copy of ``from_key``'s plan."""
    source = budgets.get(from_key)
    copied = MonthBudget(
        planned=dict(source.planned) if source else {},
        subcategory_planned=dict(source.subcategory_planned) if source else {},
    )
    result = dict(budgets)
    result[to_key] = copied
    return result


def _category_line(
    category: Category,
    transactions: list[Transaction],
    month_budget: MonthBudget | None,
) -> CategoryLine:
    planned = category_effective_planned(category, month_budget)
    spent = category_total(transactions, category.id)

    sub_lines = []
    for sub in category.subcategories:
        sub_plan = subcategory_planned(month_budget, sub.id)
        sub_spent = subcategory_total(transactions, sub.id)
        sub_lines.append(SubcategoryLine(
            subcategory_id=sub.id,
            name=sub.name,
            planned=sub_plan,
            spent=sub_spent,
            remaining=remaining(sub_spent, sub_plan),
            percent=progress_percent(sub_spent, sub_plan),
            status=progress_status(sub_spent, sub_plan, category.type),
        ))

    return CategoryLine(
        category_id=category.id,
        name=category.name,
        type=category.type,
        color=category.color,
        planned=planned,
        spent=spent,
        remaining=remaining(spent, planned),
        percent=progress_percent(spent, planned),
        status=progress_status(spent, planned, category.type),
        transaction_count=len(transactions_for_category(transactions, category.id)),
        subcategories=sub_lines,
    )


def month_overview(
    categories: Iterable[Category],
    transactions: Iterable[Transaction],
    month_budget: MonthBudget | None,
    month_key: str,
) -> MonthOverview:
    """Everything the budget and dashboard screens show for one month."""
    categories = list(categories)
    in_month = month_transactions(transactions, month_key)

    planned_income = total_planned_by_type(categories, month_budget, EntryType.INCOME)
    planned_expenses = total_planned_by_type(categories, month_budget, EntryType.EXPENSE)
    unbudgeted = planned_income - planned_expenses

    lines = [_category_line(c, in_month, month_budget) for c in categories]

    logger.debug(
        "month_overview",
        month_key=month_key,
        categories=len(categories),
        transactions=len(in_month),
    )

    return MonthOverview(
        month_key=month_key,
        actual_income=total_by_type(in_month, EntryType.INCOME),
        actual_expenses=total_by_type(in_month, EntryType.EXPENSE),
        planned_income=planned_income,
        planned_expenses=planned_expenses,
        unbudgeted=unbudgeted,
        fully_assigned=unbudgeted == 0 and planned_income > 0,
        has_budget=month_has_budget(month_budget),
        income=[line for line in lines if line.type == EntryType.INCOME],
        expenses=[line for line in lines if line.type == EntryType.EXPENSE],
    )
