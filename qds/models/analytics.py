"""
Per-day analytics counters
"""
import enum

from sqlalchemy import Column, String, Integer, Date, DateTime
from qds.core.database import Base
from qds.models.common import new_id, utcnow


class Counter(str, enum.Enum):
    """Counter columns that can be incremented; value is the column name"""
    PAGE_VIEWS = "page_views"
    WHATSAPP_CLICKS = "whatsapp_clicks"
    CONTACT_SUBMISSIONS = "contact_submissions"


class Analytics(Base):
    __tablename__ = "analytics"

    id = Column(String(50), primary_key=True, default=new_id)
    date = Column(Date, nullable=False, unique=True, index=True)
    page_views = Column(Integer, nullable=False, default=0)
    whatsapp_clicks = Column(Integer, nullable=False, default=0)
    contact_submissions = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    def __repr__(self):
        return f"<Analytics {self.date}: {self.page_views} views>"
