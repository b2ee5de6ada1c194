from fastapi import APIRouter, HTTPException

from ..schemas.budget import budgets_to_model
from ..schemas.report import (
    MonthlySummaryRequest,
    CashFlowRequest,
    MonthSummaryResponse,
    CashFlowDayResponse,
)
from ..services.dates import current_month_key, trailing_month_keys
from ..services.report_service import daily_cash_flow, monthly_summary

router = APIRouter()


@router.post("/monthly", response_model=list[MonthSummaryResponse])
def get_monthly_summary(data: MonthlySummaryRequest):
    """Income, expenses and planned expenses per month for trend charts."""
    if data.month_keys is not None:
        month_keys = data.month_keys
    else:
        month_keys = trailing_month_keys(data.end_month or current_month_key(), data.months)

    try:
        return monthly_summary(
            categories=[c.to_model() for c in data.categories],
            transactions=[t.to_model() for t in data.transactions],
            budgets_by_month=budgets_to_model(data.budgets),
            month_keys=month_keys,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@router.post("/cash-flow", response_model=list[CashFlowDayResponse])
def get_cash_flow(data: CashFlowRequest):
    """Day-by-day running balance for a month."""
    try:
        return daily_cash_flow(
            [t.to_model() for t in data.transactions],
            data.month_key,
            data.starting_balance,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
