from .budget_service import (
    ProgressStatus,
    category_spent,
    subcategory_spent,
    category_total,
    subcategory_total,
    category_planned,
    subcategory_planned,
    category_effective_planned,
    progress_percent,
    progress_status,
    remaining,
    total_by_type,
    total_planned_by_type,
    unbudgeted_amount,
    transactions_for_category,
    month_transactions,
    month_has_budget,
    adjacent_budget_months,
    copy_budget,
    month_overview,
)
from .recurrence_service import (
    FREQUENCY_LABELS,
    Occurrence,
    occurrences_in_month,
    next_occurrence,
    scheduled_occurrences,
    sort_rules,
)
from .report_service import MonthSummary, CashFlowDay, monthly_summary, daily_cash_flow
from .formatting import format_currency, format_month_label, format_date

__all__ = [
    "ProgressStatus",
    "category_spent",
    "subcategory_spent",
    "category_total",
    "subcategory_total",
    "category_planned",
    "subcategory_planned",
    "category_effective_planned",
    "progress_percent",
    "progress_status",
    "remaining",
    "total_by_type",
    "total_planned_by_type",
    "unbudgeted_amount",
    "transactions_for_category",
    "month_transactions",
    "month_has_budget",
    "adjacent_budget_months",
    "copy_budget",
    "month_overview",
    "FREQUENCY_LABELS",
    "Occurrence",
    "occurrences_in_month",
    "next_occurrence",
    "scheduled_occurrences",
    "sort_rules",
    "MonthSummary",
    "CashFlowDay",
    "monthly_summary",
    "daily_cash_flow",
    "format_currency",
    "format_month_label",
    "format_date",
]
