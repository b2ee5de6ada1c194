from decimal import Decimal

import pytest

from zerobudget.models import (
    Category,
    EntryType,
    FlatAssignment,
    MonthBudget,
    Split,
    SplitAssignment,
    Subcategory,
    Transaction,
)
from zerobudget.services.budget_service import (
    ProgressStatus,
    adjacent_budget_months,
    category_effective_planned,
    category_planned,
    category_spent,
    category_total,
    copy_budget,
    month_has_budget,
    month_overview,
    month_transactions,
    progress_percent,
    progress_status,
    remaining,
    subcategory_planned,
    subcategory_spent,
    subcategory_total,
    total_by_type,
    total_planned_by_type,
    transactions_for_category,
    unbudgeted_amount,
)

D = Decimal


def flat(txn_id, category_id, amount, subcategory_id=None, date="2024-03-10",
         entry_type=EntryType.EXPENSE):
    return Transaction(
        id=txn_id,
        date=date,
        amount=None if amount is None else D(amount),
        type=entry_type,
        assignment=FlatAssignment(category_id, subcategory_id),
    )


def split(txn_id, shares, date="2024-03-10", entry_type=EntryType.EXPENSE):
    splits = tuple(Split(category_id=c, subcategory_id=s, amount=D(a)) for c, s, a in shares)
    return Transaction(
        id=txn_id,
        date=date,
        amount=sum((s.amount for s in splits), D(0)),
        type=entry_type,
        assignment=SplitAssignment(splits),
    )


RENT = Category(id="rent", name="Rent", type=EntryType.EXPENSE)
SALARY = Category(id="salary", name="Salary", type=EntryType.INCOME)
FOOD = Category(
    id="food",
    name="Food",
    type=EntryType.EXPENSE,
    subcategories=(Subcategory("groceries", "Groceries"), Subcategory("dining", "Dining")),
)


# --- Spent ---

def test_rent_scenario_good():
    budget = MonthBudget(planned={"rent": D(1000)})
    transactions = [flat("t1", "rent", 400), flat("t2", "rent", 200)]

    spent = category_spent(transactions, "rent")
    planned = category_planned(budget, "rent")

    assert spent == D(600)
    assert progress_percent(spent, planned) == 60
    assert progress_status(spent, planned) == ProgressStatus.GOOD


@pytest.mark.parametrize("spent,expected", [
    (850, ProgressStatus.WARNING),
    (1000, ProgressStatus.OVER),
])
def test_rent_scenario_thresholds(spent, expected):
    budget = MonthBudget(planned={"rent": D(1000)})
    transactions = [flat("t1", "rent", spent)]
    assert progress_status(category_spent(transactions, "rent"), category_planned(budget, "rent")) == expected


def test_missing_amount_counts_as_zero():
    transactions = [flat("t1", "rent", None), flat("t2", "rent", 50)]
    assert category_spent(transactions, "rent") == D(50)


def test_subcategory_spent():
    transactions = [
        flat("t1", "food", 30, "groceries"),
        flat("t2", "food", 12, "dining"),
        flat("t3", "food", 8, "groceries"),
    ]
    assert subcategory_spent(transactions, "groceries") == D(38)
    assert subcategory_spent(transactions, "unknown") == D(0)


def test_spent_ignores_splits_but_total_includes_them():
    transactions = [
        flat("t1", "food", 20, "groceries"),
        split("t2", [("food", "dining", 15), ("rent", None, 100)]),
    ]
    assert category_spent(transactions, "food") == D(20)
    assert category_total(transactions, "food") == D(35)
    assert category_total(transactions, "rent") == D(100)
    assert subcategory_spent(transactions, "dining") == D(0)
    assert subcategory_total(transactions, "dining") == D(15)


def test_transactions_for_category_covers_both_shapes():
    transactions = [
        flat("t1", "food", 20),
        split("t2", [("food", None, 5), ("rent", None, 5)]),
        flat("t3", "rent", 10),
    ]
    assert [t.id for t in transactions_for_category(transactions, "food")] == ["t1", "t2"]


def test_month_transactions_filters_by_date_prefix():
    transactions = [
        flat("t1", "rent", 1, date="2024-02-29"),
        flat("t2", "rent", 1, date="2024-03-01"),
        flat("t3", "rent", 1, date="2024-03-31"),
    ]
    assert [t.id for t in month_transactions(transactions, "2024-03")] == ["t2", "t3"]


# --- Planned ---

def test_planned_lookups_default_to_zero():
    assert category_planned(None, "rent") == D(0)
    assert category_planned(MonthBudget(), "rent") == D(0)
    assert subcategory_planned(MonthBudget(subcategory_planned={"dining": D(40)}), "dining") == D(40)
    assert subcategory_planned(MonthBudget(), "dining") == D(0)


def test_effective_planned_without_subcategories_is_category_planned():
    budget = MonthBudget(planned={"rent": D(1200)})
    assert category_effective_planned(RENT, budget) == category_planned(budget, "rent")


def test_effective_planned_sums_subcategories_once_any_is_budgeted():
    budget = MonthBudget(
        planned={"food": D(999)},  # stale pre-subcategory value
        subcategory_planned={"groceries": D(300)},
    )
    assert category_effective_planned(FOOD, budget) == D(300)


def test_explicit_zero_subcategory_entry_switches_to_subcategory_sum():
    budget = MonthBudget(planned={"food": D(500)}, subcategory_planned={"dining": D(0)})
    assert category_effective_planned(FOOD, budget) == D(0)


def test_effective_planned_falls_back_to_category_level():
    budget = MonthBudget(planned={"food": D(500)}, subcategory_planned={"other": D(10)})
    assert category_effective_planned(FOOD, budget) == D(500)


# --- Progress ---

def test_progress_percent_is_zero_without_plan():
    assert progress_percent(50, 0) == 0
    assert progress_percent(50, None) == 0


def test_progress_percent_rounds_half_up_and_clamps():
    assert progress_percent(1, 3) == 33
    assert progress_percent(1, 200) == 1
    assert progress_percent(2, 3) == 67
    assert progress_percent(150, 100) == 100


def test_progress_percent_monotonic_in_spent():
    values = [progress_percent(spent, 250) for spent in range(0, 400, 7)]
    assert values == sorted(values)
    assert max(values) == 100


@pytest.mark.parametrize("spent,planned,expected", [
    (79, 100, ProgressStatus.GOOD),
    (80, 100, ProgressStatus.WARNING),
    (99, 100, ProgressStatus.WARNING),
    (100, 100, ProgressStatus.OVER),
    (140, 100, ProgressStatus.OVER),
    (0, 100, ProgressStatus.GOOD),
    (10, 0, ProgressStatus.NONE),
    (0, 0, ProgressStatus.NONE),
    (10, None, ProgressStatus.NONE),
])
def test_progress_status_thresholds(spent, planned, expected):
    assert progress_status(spent, planned) == expected


def test_progress_status_same_thresholds_for_income():
    assert progress_status(80, 100, EntryType.INCOME) == progress_status(80, 100, EntryType.EXPENSE)


def test_remaining_can_go_negative():
    assert remaining(120, 100) == D(-20)
    assert remaining(None, 100) == D(100)


# --- Totals ---

def test_total_by_type_uses_declared_type():
    transactions = [
        flat("t1", "salary", 3000, entry_type=EntryType.INCOME),
        flat("t2", "rent", 1000),
        split("t3", [("food", None, 40), ("rent", None, 10)]),
    ]
    assert total_by_type(transactions, EntryType.INCOME) == D(3000)
    assert total_by_type(transactions, EntryType.EXPENSE) == D(1050)


def test_total_planned_by_type_uses_effective_planned():
    budget = MonthBudget(
        planned={"rent": D(1000), "food": D(999), "salary": D(3000)},
        subcategory_planned={"groceries": D(400), "dining": D(100)},
    )
    categories = [RENT, FOOD, SALARY]
    assert total_planned_by_type(categories, budget, EntryType.EXPENSE) == D(1500)
    assert total_planned_by_type(categories, budget, EntryType.INCOME) == D(3000)


def test_unbudgeted_amount():
    categories = [RENT, SALARY]
    assert unbudgeted_amount(categories, MonthBudget(planned={"rent": D(1000), "salary": D(3000)})) == D(2000)
    assert unbudgeted_amount(categories, MonthBudget(planned={"rent": D(3000), "salary": D(3000)})) == D(0)
    assert unbudgeted_amount(categories, MonthBudget(planned={"rent": D(3500), "salary": D(3000)})) == D(-500)
    assert unbudgeted_amount(categories, None) == D(0)


# --- Month-level views ---

def test_month_has_budget_needs_a_positive_amount():
    assert not month_has_budget(None)
    assert not month_has_budget(MonthBudget(planned={"rent": D(0)}))
    assert month_has_budget(MonthBudget(subcategory_planned={"dining": D(5)}))


def test_adjacent_budget_months():
    budgets = {
        "2023-11": MonthBudget(planned={"rent": D(1)}),
        "2024-01": MonthBudget(planned={"rent": D(1)}),
        "2024-02": MonthBudget(planned={"rent": D(0)}),
        "2024-05": MonthBudget(subcategory_planned={"dining": D(3)}),
        "2024-07": MonthBudget(planned={"rent": D(1)}),
    }
    assert adjacent_budget_months(budgets, "2024-03") == ("2024-01", "2024-05")
    assert adjacent_budget_months(budgets, "2023-01") == (None, "2023-11")
    assert adjacent_budget_months(budgets, "2025-01") == ("2024-07", None)
    assert adjacent_budget_months({}, "2024-03") == (None, None)


def test_copy_budget_leaves_source_untouched():
    source = MonthBudget(planned={"rent": D(1000)}, subcategory_planned={"dining": D(80)})
    budgets = {"2024-02": source}

    result = copy_budget(budgets, "2024-02", "2024-03")

    assert result["2024-03"] == source
    assert result["2024-03"].planned is not source.planned
    assert "2024-03" not in budgets


def test_copy_budget_from_missing_month_gives_empty_plan():
    result = copy_budget({}, "2024-02", "2024-03")
    assert result["2024-03"] == MonthBudget()


def test_month_overview():
    categories = [SALARY, RENT, FOOD]
    budget = MonthBudget(
        planned={"salary": D(2000), "rent": D(1000)},
        subcategory_planned={"groceries": D(800), "dining": D(200)},
    )
    transactions = [
        flat("t1", "salary", 2000, entry_type=EntryType.INCOME, date="2024-03-01"),
        flat("t2", "rent", 1000, date="2024-03-02"),
        split("t3", [("food", "groceries", 60), ("food", "dining", 190)], date="2024-03-05"),
        flat("t4", "rent", 999, date="2024-04-02"),
    ]

    overview = month_overview(categories, transactions, budget, "2024-03")

    assert overview.actual_income == D(2000)
    assert overview.actual_expenses == D(1250)
    assert overview.planned_expenses == D(2000)
    assert overview.unbudgeted == D(0)
    assert overview.fully_assigned
    assert overview.has_budget
    assert [line.category_id for line in overview.income] == ["salary"]
    assert [line.category_id for line in overview.expenses] == ["rent", "food"]

    rent, food = overview.expenses
    assert rent.status == ProgressStatus.OVER
    assert rent.transaction_count == 1
    assert food.spent == D(250)
    assert food.percent == 25
    dining = food.subcategories[1]
    assert dining.subcategory_id == "dining"
    assert dining.status == ProgressStatus.WARNING
    assert dining.remaining == D(10)


def test_month_overview_not_fully_assigned_without_income():
    overview = month_overview([RENT], [], MonthBudget(), "2024-03")
    assert overview.unbudgeted == D(0)
    assert not overview.fully_assigned
    assert not overview.has_budget
