from __future__ import annotations
from decimal import Decimal

from pydantic import BaseModel

from ..models import EntryType, MonthBudget
from ..services.budget_service import ProgressStatus
from .category import CategoryInput
from .common import MonthKey
from .transaction import TransactionInput


class MonthBudgetInput(BaseModel):
    planned: dict[str, Decimal] = {}
    subcategory_planned: dict[str, Decimal] = {}

    def to_model(self) -> MonthBudget:
        return MonthBudget(
            planned=dict(self.planned),
            subcategory_planned=dict(self.subcategory_planned),
        )


def budgets_to_model(budgets: dict[str, MonthBudgetInput]) -> dict[str, MonthBudget]:
    return {key: b.to_model() for key, b in budgets.items()}


# --- Input schemas ---

class OverviewRequest(BaseModel):
    month_key: MonthKey
    categories: list[CategoryInput] = []
    transactions: list[TransactionInput] = []
    budget: MonthBudgetInput | None = None


class AdjacentMonthsRequest(BaseModel):
    month_key: MonthKey
    budgets: dict[str, MonthBudgetInput] = {}


class CopyBudgetRequest(BaseModel):
    from_month: MonthKey
    to_month: MonthKey
    budgets: dict[str, MonthBudgetInput] = {}


# --- Response schemas ---

class MonthBudgetResponse(BaseModel):
    planned: dict[str, Decimal]
    subcategory_planned: dict[str, Decimal]


class SubcategoryLineResponse(BaseModel):
    subcategory_id: str
    name: str
    planned: Decimal
    spent: Decimal
    remaining: Decimal
    percent: int
    status: ProgressStatus


class CategoryLineResponse(BaseModel):
    category_id: str
    name: str
    type: EntryType
    color: str | None = None
    planned: Decimal
    spent: Decimal
    remaining: Decimal
    percent: int
    status: ProgressStatus
    transaction_count: int
    subcategories: list[SubcategoryLineResponse]


class MonthOverviewResponse(BaseModel):
    month_key: str
    month_label: str
    actual_income: Decimal
    actual_expenses: Decimal
    planned_income: Decimal
    planned_expenses: Decimal
    unbudgeted: Decimal
    unbudgeted_display: str
    fully_assigned: bool
    has_budget: bool
    income: list[CategoryLineResponse]
    expenses: list[CategoryLineResponse]


class AdjacentMonthsResponse(BaseModel):
    month_key: str
    previous: str | None
    next: str | None


class CopyBudgetResponse(BaseModel):
    budgets: dict[str, MonthBudgetResponse]
