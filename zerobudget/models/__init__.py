from .category import Category, Subcategory, EntryType
from .transaction import (
    Transaction,
    Split,
    FlatAssignment,
    SplitAssignment,
    Assignment,
)
from .budget import MonthBudget
from .recurring_rule import RecurringRule, Frequency

__all__ = [
    "Category",
    "Subcategory",
    "EntryType",
    "Transaction",
    "Split",
    "FlatAssignment",
    "SplitAssignment",
    "Assignment",
    "MonthBudget",
    "RecurringRule",
    "Frequency",
]
