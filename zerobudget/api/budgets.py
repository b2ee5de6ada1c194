from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException

from ..config import Preferences
from ..schemas.budget import (
    OverviewRequest,
    AdjacentMonthsRequest,
    CopyBudgetRequest,
    MonthOverviewResponse,
    AdjacentMonthsResponse,
    CopyBudgetResponse,
    budgets_to_model,
)
from ..services.budget_service import adjacent_budget_months, copy_budget, month_overview
from ..services.formatting import format_currency, format_month_label
from .deps import get_preferences

router = APIRouter()


@router.post("/overview", response_model=MonthOverviewResponse)
def get_overview(
    data: OverviewRequest,
    preferences: Preferences = Depends(get_preferences),
):
    """Planned vs actual for every category in a month, plus zero-based totals."""
    try:
        overview = month_overview(
            categories=[c.to_model() for c in data.categories],
            transactions=[t.to_model() for t in data.transactions],
            month_budget=data.budget.to_model() if data.budget else None,
            month_key=data.month_key,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    return {
        **asdict(overview),
        "month_label": format_month_label(overview.month_key),
        "unbudgeted_display": format_currency(overview.unbudgeted, preferences),
    }


@router.post("/adjacent", response_model=AdjacentMonthsResponse)
def get_adjacent_months(data: AdjacentMonthsRequest):
    """Nearest months before and after ``month_key`` that have a budget to copy."""
    previous, following = adjacent_budget_months(budgets_to_model(data.budgets), data.month_key)
    return {"month_key": data.month_key, "previous": previous, "next": following}


@router.post("/copy", response_model=CopyBudgetResponse)
def copy_month_budget(data: CopyBudgetRequest):
    """Copy one month's planned amounts into another month."""
    if data.from_month == data.to_month:
        raise HTTPException(status_code=400, detail="Source and target month are the same")
    budgets = copy_budget(budgets_to_model(data.budgets), data.from_month, data.to_month)
    return {"budgets": {key: asdict(b) for key, b in budgets.items()}}
