"""
Pydantic schemas for analytics counters
"""
import datetime

from pydantic import BaseModel

from qds.schemas.common import CamelModel


class AnalyticsResponse(CamelModel):
    date: datetime.date
    page_views: int
    whatsapp_clicks: int
    contact_submissions: int


class AnalyticsSummary(CamelModel):
    days: int
    page_views: int
    whatsapp_clicks: int
    contact_submissions: int


class TrackResponse(BaseModel):
    success: bool
