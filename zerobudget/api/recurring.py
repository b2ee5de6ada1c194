from datetime import date

from fastapi import APIRouter, HTTPException

from ..schemas.recurring import (
    OccurrencesRequest,
    NextOccurrencesRequest,
    OccurrenceResponse,
    RuleScheduleResponse,
)
from ..services.formatting import format_date
from ..services.recurrence_service import FREQUENCY_LABELS, scheduled_occurrences, sort_rules

router = APIRouter()


@router.post("/occurrences", response_model=list[OccurrenceResponse])
def get_occurrences(data: OccurrencesRequest):
    """Dates on which active rules fire within a month."""
    try:
        return scheduled_occurrences([r.to_model() for r in data.rules], data.month_key)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@router.post("/next", response_model=list[RuleScheduleResponse])
def get_next_occurrences(data: NextOccurrencesRequest):
    """Rules in display order, each with its next occurrence."""
    try:
        today = date.fromisoformat(data.today) if data.today else None
        ordered = sort_rules([r.to_model() for r in data.rules], today)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    return [
        {
            "rule_id": rule.id,
            "label": rule.label,
            "frequency": rule.frequency,
            "frequency_label": FREQUENCY_LABELS[rule.frequency],
            "is_paused": rule.is_paused,
            "next_date": next_date,
            "next_date_label": format_date(next_date),
        }
        for rule, next_date in ordered
    ]
