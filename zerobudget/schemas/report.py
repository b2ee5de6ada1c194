from decimal import Decimal

from pydantic import BaseModel, Field

from .budget import MonthBudgetInput
from .category import CategoryInput
from .common import MonthKey
from .transaction import TransactionInput


class MonthlySummaryRequest(BaseModel):
    """
    Either list ``month_keys`` explicitly, or give ``end_month`` and ``months``
    for a trailing window (``end_month`` defaults to the current month).
    """
    categories: list[CategoryInput] = []
    transactions: list[TransactionInput] = []
    budgets: dict[str, MonthBudgetInput] = {}
    month_keys: list[MonthKey] | None = None
    end_month: MonthKey | None = None
    months: int = Field(default=6, ge=1, le=120)


class CashFlowRequest(BaseModel):
    month_key: MonthKey
    transactions: list[TransactionInput] = []
    starting_balance: Decimal = Decimal(0)


class MonthSummaryResponse(BaseModel):
    month_key: str
    income: Decimal
    expenses: Decimal
    planned_expenses: Decimal
    net: Decimal
    transaction_count: int


class CashFlowDayResponse(BaseModel):
    date: str
    income: Decimal
    expenses: Decimal
    balance: Decimal
