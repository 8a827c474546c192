"""
Shared schema building blocks
One validator per field kind (localized text, email, URL, enum, minimum
length) so every entity schema applies the same rules
"""
from datetime import datetime
from typing import Annotated, Any, ClassVar, FrozenSet, List, Literal, Optional

from pydantic import (
    AfterValidator, BaseModel, BeforeValidator, ConfigDict, EmailStr, HttpUrl, TypeAdapter,
    ValidationError,
)
from pydantic.alias_generators import to_camel


# ============== FIELD KINDS ==============

def min_length(n: int, message: Optional[str] = None):
    """String type that is stripped and must keep at least ``n`` characters"""
    def check(value: str) -> str:
        value = value.strip()
        if len(value) < n:
            raise ValueError(message or f"Must be at least {n} characters")
        return value
    return Annotated[str, AfterValidator(check)]


def empty_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def coerce_str(value: Any) -> Any:
    """Accept plain integers where a short numeric string is stored"""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


_http_url = TypeAdapter(HttpUrl)


def check_url(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    try:
        _http_url.validate_python(value)
    except ValidationError:
        raise ValueError("Must be a valid absolute URL") from None
    return value


def check_slug(value: str) -> str:
    value = value.strip().lower()
    parts = value.split("-")
    if not all(part and part.isascii() and part.isalnum() for part in parts):
        raise ValueError("Slug may only contain lowercase letters, digits and single hyphens")
    return value


RequiredText = min_length(1, "This field is required")
OptionalText = Annotated[Optional[str], BeforeValidator(empty_to_none)]
PersonName = min_length(2, "Name must be at least 2 characters")
CompanyName = min_length(2, "Company name must be at least 2 characters")
Phone = min_length(8, "Please enter a valid phone number")
ProjectDescription = min_length(10, "Please provide more details about your project")
CoverLetter = min_length(50, "Cover letter must be at least 50 characters")
YearsOfExperience = Annotated[RequiredText, BeforeValidator(coerce_str)]

Email = EmailStr

# Optional absolute URL: blank input means "not supplied"
OptionalUrl = Annotated[Optional[str], BeforeValidator(empty_to_none), AfterValidator(check_url)]

Slug = Annotated[str, AfterValidator(check_slug)]

ProjectType = Literal["mobile", "website"]
ServiceCategory = Literal["mobile", "website"]
CareerStatusValue = Literal["open", "closed"]
ApplicationStatusValue = Literal["pending", "reviewing", "interview", "hired", "rejected"]
Rating = Annotated[Literal["1", "2", "3", "4", "5"], BeforeValidator(coerce_str)]


# ============== BASE MODELS ==============

class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python; both accepted on input"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class LocalizedText(BaseModel):
    """A text value with an English and an Arabic variant; both are required"""
    model_config = ConfigDict(from_attributes=True)

    en: RequiredText
    ar: RequiredText


class LocalizedList(BaseModel):
    """An ordered list of strings per language"""
    model_config = ConfigDict(from_attributes=True)

    en: List[RequiredText]
    ar: List[RequiredText]


class CreateModel(CamelModel):
    """
    Inbound payload for creating a record.
    Unknown keys (id, createdAt, ...) are ignored, so server-owned
    fields can never be supplied by a client.
    """

    def values(self) -> dict:
        return self.model_dump(exclude_none=True)


class UpdateModel(CamelModel):
    """Partial update; only keys the client sent are applied"""
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    def changes(self) -> dict:
        data = self.model_dump(exclude_unset=True)
        return {
            key: value for key, value in data.items()
            if value is not None or key in self.nullable_fields
        }


class RecordResponse(CamelModel):
    id: str
    created_at: datetime
