"""
Pydantic schemas for portfolio projects
"""
from typing import List, Optional

from qds.schemas.common import (
    CreateModel, LocalizedText, ProjectType, RecordResponse, RequiredText, UpdateModel,
)


class PortfolioProjectCreate(CreateModel):
    title: LocalizedText
    category: LocalizedText
    description: LocalizedText
    type: ProjectType
    client: LocalizedText
    challenge: LocalizedText
    solution: LocalizedText
    results: LocalizedText
    technologies: List[RequiredText]
    image_url: RequiredText


class PortfolioProjectUpdate(UpdateModel):
    title: Optional[LocalizedText] = None
    category: Optional[LocalizedText] = None
    description: Optional[LocalizedText] = None
    type: Optional[ProjectType] = None
    client: Optional[LocalizedText] = None
    challenge: Optional[LocalizedText] = None
    solution: Optional[LocalizedText] = None
    results: Optional[LocalizedText] = None
    technologies: Optional[List[RequiredText]] = None
    image_url: Optional[RequiredText] = None


class PortfolioProjectResponse(RecordResponse):
    title: LocalizedText
    category: LocalizedText
    description: LocalizedText
    type: str
    client: LocalizedText
    challenge: LocalizedText
    solution: LocalizedText
    results: LocalizedText
    technologies: List[str]
    image_url: str
