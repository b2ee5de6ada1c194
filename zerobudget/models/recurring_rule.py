import enum
from dataclasses import dataclass
from decimal import Decimal

from .category import EntryType


class Frequency(enum.Enum):
    """How often the recurring transaction occurs."""
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


@dataclass(frozen=True)
class RecurringRule:
    """
    Schedule for a transaction that repeats.

    Day-of-month overflow: a monthly or yearly rule starting on the 31st fires on
    the last day of shorter months. ``end_date`` is inclusive; ``None`` means the
    rule never ends. Pausing keeps the rule but stops it being scheduled.
    """
    id: str
    label: str
    frequency: Frequency
    start_date: str  # YYYY-MM-DD
    type: EntryType
    category_id: str | None
    amount: Decimal
    end_date: str | None = None
    subcategory_id: str | None = None
    merchant: str | None = None
    notes: str | None = None
    is_paused: bool = False
