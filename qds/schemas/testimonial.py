"""
Pydantic schemas for client testimonials
"""
from typing import ClassVar, FrozenSet, Optional

from qds.schemas.common import (
    CreateModel, LocalizedText, OptionalText, ProjectType, Rating, RecordResponse, UpdateModel,
)


class TestimonialCreate(CreateModel):
    client_name: LocalizedText
    client_position: LocalizedText
    client_company: LocalizedText
    rating: Rating
    testimonial: LocalizedText
    project_type: ProjectType
    avatar_url: OptionalText = None


class TestimonialUpdate(UpdateModel):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"avatar_url"})

    client_name: Optional[LocalizedText] = None
    client_position: Optional[LocalizedText] = None
    client_company: Optional[LocalizedText] = None
    rating: Optional[Rating] = None
    testimonial: Optional[LocalizedText] = None
    project_type: Optional[ProjectType] = None
    avatar_url: OptionalText = None


class TestimonialResponse(RecordResponse):
    client_name: LocalizedText
    client_position: LocalizedText
    client_company: LocalizedText
    rating: str
    testimonial: LocalizedText
    project_type: str
    avatar_url: Optional[str] = None
