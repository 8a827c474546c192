"""
Pydantic schemas for careers (job openings)
"""
from typing import Optional

from qds.schemas.common import (
    CareerStatusValue, CreateModel, LocalizedList, LocalizedText, RecordResponse, UpdateModel,
)


class CareerCreate(CreateModel):
    title: LocalizedText
    department: LocalizedText
    location: LocalizedText
    type: LocalizedText  # "Full-time" / "دوام كامل"
    description: LocalizedText
    requirements: LocalizedList
    responsibilities: LocalizedList
    status: CareerStatusValue = "open"


class CareerUpdate(UpdateModel):
    title: Optional[LocalizedText] = None
    department: Optional[LocalizedText] = None
    location: Optional[LocalizedText] = None
    type: Optional[LocalizedText] = None
    description: Optional[LocalizedText] = None
    requirements: Optional[LocalizedList] = None
    responsibilities: Optional[LocalizedList] = None
    status: Optional[CareerStatusValue] = None


class CareerResponse(RecordResponse):
    title: LocalizedText
    department: LocalizedText
    location: LocalizedText
    type: LocalizedText
    description: LocalizedText
    requirements: LocalizedList
    responsibilities: LocalizedList
    status: str
