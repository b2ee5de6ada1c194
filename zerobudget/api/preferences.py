from fastapi import APIRouter, Depends

from ..config import Preferences, save_preferences
from .deps import get_preferences

router = APIRouter()


@router.get("/", response_model=Preferences)
def read_preferences(preferences: Preferences = Depends(get_preferences)):
    return preferences


@router.put("/", response_model=Preferences)
def update_preferences(data: Preferences):
    """Store display preferences (currently just the currency)."""
    return save_preferences(data)
