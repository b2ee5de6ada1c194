from decimal import Decimal

from pydantic import BaseModel, Field

from ..models import EntryType, FlatAssignment, Split, SplitAssignment, Transaction
from .common import DateStr


class SplitInput(BaseModel):
    category_id: str
    subcategory_id: str | None = None
    amount: Decimal | None = Field(default=None, ge=0)

    def to_model(self) -> Split:
        return Split(
            category_id=self.category_id,
            subcategory_id=self.subcategory_id,
            amount=self.amount,
        )


class TransactionInput(BaseModel):
    """
    Transaction in either shape.

    Flat: ``category_id`` (and optional ``subcategory_id``) set.
    Split: ``category_id`` null and ``splits`` given.
    """
    id: str
    date: DateStr
    amount: Decimal | None = Field(default=None, ge=0)
    type: EntryType
    category_id: str | None = None
    subcategory_id: str | None = None
    splits: list[SplitInput] | None = None
    merchant: str | None = None
    notes: str | None = None
    recurring_rule_id: str | None = None
    is_pending: bool = False

    def to_model(self) -> Transaction:
        if self.category_id is None and self.splits is not None:
            assignment = SplitAssignment(splits=tuple(s.to_model() for s in self.splits))
        else:
            assignment = FlatAssignment(
                category_id=self.category_id,
                subcategory_id=self.subcategory_id,
            )
        return Transaction(
            id=self.id,
            date=self.date,
            amount=self.amount,
            type=self.type,
            assignment=assignment,
            merchant=self.merchant,
            notes=self.notes,
            recurring_rule_id=self.recurring_rule_id,
            is_pending=self.is_pending,
        )
