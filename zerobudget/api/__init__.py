from fastapi import APIRouter

from .budgets import router as budgets_router
from .recurring import router as recurring_router
from .reports import router as reports_router
from .preferences import router as preferences_router

api_router = APIRouter()

api_router.include_router(budgets_router, prefix="/budgets", tags=["budgets"])
api_router.include_router(recurring_router, prefix="/recurring", tags=["recurring"])
api_router.include_router(reports_router, prefix="/reports", tags=["reports"])
api_router.include_router(preferences_router, prefix="/preferences", tags=["preferences"])
