from dataclasses import dataclass, field
from decimal import Decimal

from .category import EntryType


@dataclass(frozen=True)
class Split:
    """One share of a split transaction."""
    category_id: str
    amount: Decimal | None
    subcategory_id: str | None = None


@dataclass(frozen=True)
class FlatAssignment:
    """Transaction booked against a single category (and optional subcategory)."""
    category_id: str | None
    subcategory_id: str | None = None


@dataclass(frozen=True)
class SplitAssignment:
    """
    Transaction spread across several categories.

    The split amounts are expected to add up to the transaction amount; that is
    checked when the transaction is written, not here.
    """
    splits: tuple[Split, ...] = field(default_factory=tuple)


Assignment = FlatAssignment | SplitAssignment


@dataclass(frozen=True)
class Transaction:
    """
    An income or expense entry.

    The month a transaction belongs to is the YYYY-MM prefix of its date.
    Amounts are non-negative; a missing amount counts as zero.
    """
    id: str
    date: str  # YYYY-MM-DD
    amount: Decimal | None
    type: EntryType
    assignment: Assignment = field(default_factory=lambda: FlatAssignment(None))
    merchant: str | None = None
    notes: str | None = None

    # Set when the transaction was materialised from a recurring rule
    recurring_rule_id: str | None = None
    # Materialised but not yet confirmed by the user
    is_pending: bool = False
