from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class MonthBudget:
    """
    Planned amounts for one month, keyed elsewhere by its YYYY-MM month key.

    A subcategory id present in ``subcategory_planned`` counts as budgeted even
    when its amount is zero; that presence decides how the parent category's
    effective planned amount is computed.
    """
    planned: dict[str, Decimal] = field(default_factory=dict)
    subcategory_planned: dict[str, Decimal] = field(default_factory=dict)
