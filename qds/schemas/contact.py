"""
Pydantic schemas for the contact form
"""
from qds.schemas.common import (
    CompanyName, CreateModel, Email, PersonName, Phone, ProjectDescription, RecordResponse,
    RequiredText,
)


class ContactSubmissionCreate(CreateModel):
    name: PersonName
    company: CompanyName
    email: Email
    phone: Phone
    service_needed: RequiredText
    project_description: ProjectDescription


class ContactSubmissionResponse(RecordResponse):
    name: str
    company: str
    email: str
    phone: str
    service_needed: str
    project_description: str
