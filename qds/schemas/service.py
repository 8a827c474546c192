"""
Pydantic schemas for priced service packages
"""
from typing import Optional

from qds.schemas.common import (
    CreateModel, LocalizedList, LocalizedText, RecordResponse, ServiceCategory, UpdateModel,
)


class ServiceCreate(CreateModel):
    name: LocalizedText
    description: LocalizedText
    price: LocalizedText  # Display string, not a number
    category: ServiceCategory
    features: LocalizedList
    is_active: bool = True
    display_order: int = 0


class ServiceUpdate(UpdateModel):
    name: Optional[LocalizedText] = None
    description: Optional[LocalizedText] = None
    price: Optional[LocalizedText] = None
    category: Optional[ServiceCategory] = None
    features: Optional[LocalizedList] = None
    is_active: Optional[bool] = None
    display_order: Optional[int] = None


class ServiceResponse(RecordResponse):
    name: LocalizedText
    description: LocalizedText
    price: LocalizedText
    category: str
    features: LocalizedList
    is_active: bool
    display_order: int
