"""
Pydantic schemas for job applications
Candidates cannot set the status; admins can change nothing else
"""
from typing import Optional

from pydantic import BaseModel

from qds.schemas.common import (
    ApplicationStatusValue, CoverLetter, CreateModel, Email, OptionalUrl, PersonName, Phone,
    RecordResponse, RequiredText, YearsOfExperience,
)


class JobApplicationCreate(CreateModel):
    career_id: RequiredText
    full_name: PersonName
    email: Email
    phone: Phone
    cover_letter: CoverLetter
    resume_url: OptionalUrl = None
    linkedin_url: OptionalUrl = None
    portfolio_url: OptionalUrl = None
    years_of_experience: YearsOfExperience


class JobApplicationStatusUpdate(BaseModel):
    status: ApplicationStatusValue


class JobApplicationResponse(RecordResponse):
    career_id: str
    full_name: str
    email: str
    phone: str
    cover_letter: str
    resume_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    portfolio_url: Optional[str] = None
    years_of_experience: str
    status: str
