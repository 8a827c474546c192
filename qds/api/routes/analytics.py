"""
Analytics endpoints
Tracking calls are fire-and-forget: they always answer 200 and report
whether the count was recorded
"""
import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from qds.core.database import get_db
from qds.core.errors import ValidationFailed
from qds.core.security import require_admin
from qds.models.analytics import Counter
from qds.schemas.analytics import AnalyticsResponse, AnalyticsSummary, TrackResponse
from qds.services.analytics import analytics_recorder

router = APIRouter(prefix="/analytics", tags=["Analytics"])
admin_router = APIRouter(
    prefix="/admin/analytics", tags=["Admin"], dependencies=[Depends(require_admin)]
)


# ============== TRACKING ENDPOINTS ==============

@router.post("/pageview", response_model=TrackResponse)
def track_page_view(db: Session = Depends(get_db)):
    return TrackResponse(success=analytics_recorder.record(db, Counter.PAGE_VIEWS))


@router.post("/whatsapp", response_model=TrackResponse)
def track_whatsapp_click(db: Session = Depends(get_db)):
    return TrackResponse(success=analytics_recorder.record(db, Counter.WHATSAPP_CLICKS))


@router.post("/contact", response_model=TrackResponse)
def track_contact_submission(db: Session = Depends(get_db)):
    return TrackResponse(success=analytics_recorder.record(db, Counter.CONTACT_SUBMISSIONS))


# ============== ADMIN ENDPOINTS ==============

def _check_range(start: Optional[datetime.date], end: Optional[datetime.date]) -> None:
    if start and end and start > end:
        raise ValidationFailed(
            "Validation failed",
            [{"field": "start", "message": "Start date must not be after end date"}],
        )


@admin_router.get("", response_model=List[AnalyticsResponse])
def list_analytics(
    start: Optional[datetime.date] = None,
    end: Optional[datetime.date] = None,
    db: Session = Depends(get_db),
):
    """Daily counters, most recent day first"""
    _check_range(start, end)
    return analytics_recorder.list_days(db, start, end)


@admin_router.get("/summary", response_model=AnalyticsSummary)
def analytics_summary(
    start: Optional[datetime.date] = None,
    end: Optional[datetime.date] = None,
    db: Session = Depends(get_db),
):
    """Totals for each counter over the selected days"""
    _check_range(start, end)
    return analytics_recorder.totals(db, start, end)
