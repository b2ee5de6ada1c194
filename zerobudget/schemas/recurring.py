from decimal import Decimal

from pydantic import BaseModel, Field

from ..models import EntryType, Frequency, RecurringRule
from .common import DateStr, MonthKey


class RecurringRuleInput(BaseModel):
    id: str
    label: str
    frequency: Frequency
    start_date: DateStr
    end_date: DateStr | None = None
    type: EntryType = EntryType.EXPENSE
    category_id: str | None = None
    subcategory_id: str | None = None
    amount: Decimal = Field(ge=0)
    merchant: str | None = None
    notes: str | None = None
    is_paused: bool = False

    def to_model(self) -> RecurringRule:
        return RecurringRule(
            id=self.id,
            label=self.label,
            frequency=self.frequency,
            start_date=self.start_date,
            end_date=self.end_date,
            type=self.type,
            category_id=self.category_id,
            subcategory_id=self.subcategory_id,
            amount=self.amount,
            merchant=self.merchant,
            notes=self.notes,
            is_paused=self.is_paused,
        )


# --- Input schemas ---

class OccurrencesRequest(BaseModel):
    month_key: MonthKey
    rules: list[RecurringRuleInput] = []


class NextOccurrencesRequest(BaseModel):
    rules: list[RecurringRuleInput] = []
    today: DateStr | None = None  # defaults to the server's date


# --- Response schemas ---

class OccurrenceResponse(BaseModel):
    key: str
    rule_id: str
    date: str
    label: str
    amount: Decimal
    type: EntryType
    category_id: str | None
    subcategory_id: str | None
    merchant: str | None


class RuleScheduleResponse(BaseModel):
    rule_id: str
    label: str
    frequency: Frequency
    frequency_label: str
    is_paused: bool
    next_date: str | None
    next_date_label: str
