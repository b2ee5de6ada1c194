import enum
from dataclasses import dataclass, field


class EntryType(enum.Enum):
    """Whether money flows in or out. Shared by categories, transactions and rules."""
    INCOME = "income"
    EXPENSE = "expense"


@dataclass(frozen=True)
class Subcategory:
    id: str
    name: str


@dataclass(frozen=True)
class Category:
    """
    Budget category.

    A category exclusively owns its subcategories; their order is user-controlled
    and preserved everywhere derived values are listed.
    """
    id: str
    name: str
    type: EntryType
    color: str | None = None
    subcategories: tuple[Subcategory, ...] = field(default_factory=tuple)

    @property
    def has_subcategories(self) -> bool:
        return len(self.subcategories) > 0
