from .category import CategoryInput, SubcategoryInput
from .transaction import TransactionInput, SplitInput
from .budget import (
    MonthBudgetInput,
    OverviewRequest,
    AdjacentMonthsRequest,
    CopyBudgetRequest,
    MonthBudgetResponse,
    SubcategoryLineResponse,
    CategoryLineResponse,
    MonthOverviewResponse,
    AdjacentMonthsResponse,
    CopyBudgetResponse,
)
from .recurring import (
    RecurringRuleInput,
    OccurrencesRequest,
    NextOccurrencesRequest,
    OccurrenceResponse,
    RuleScheduleResponse,
)
from .report import (
    MonthlySummaryRequest,
    CashFlowRequest,
    MonthSummaryResponse,
    CashFlowDayResponse,
)

__all__ = [
    "CategoryInput",
    "SubcategoryInput",
    "TransactionInput",
    "SplitInput",
    "MonthBudgetInput",
    "OverviewRequest",
    "AdjacentMonthsRequest",
    "CopyBudgetRequest",
    "MonthBudgetResponse",
    "SubcategoryLineResponse",
    "CategoryLineResponse",
    "MonthOverviewResponse",
    "AdjacentMonthsResponse",
    "CopyBudgetResponse",
    "RecurringRuleInput",
    "OccurrencesRequest",
    "NextOccurrencesRequest",
    "OccurrenceResponse",
    "RuleScheduleResponse",
    "MonthlySummaryRequest",
    "CashFlowRequest",
    "MonthSummaryResponse",
    "CashFlowDayResponse",
]
