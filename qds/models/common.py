"""
Shared column helpers for the content models
"""
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


@dataclass
class Localized:
    """
    A bilingual value stored as two parallel columns (``title`` / ``title_ar``).
    Mapped onto the models with ``sqlalchemy.orm.composite``.
    """
    en: Any
    ar: Any


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    # Naive UTC keeps SQLite and PostgreSQL "timestamp" columns comparable
    return datetime.now(timezone.utc).replace(tzinfo=None)
