"""
Career (job opening) database model
"""
import enum

from sqlalchemy import Column, String, Text, DateTime, JSON
from sqlalchemy.orm import composite, relationship
from qds.core.database import Base
from qds.models.common import Localized, new_id, utcnow


class CareerStatus(str, enum.Enum):
    OPEN = "open"
    CLOSED = "closed"


class Career(Base):
    __tablename__ = "careers"

    id = Column(String(50), primary_key=True, default=new_id)

    title_en = Column("title", Text, nullable=False)
    title_ar = Column(Text, nullable=False)
    department_en = Column("department", Text, nullable=False)
    department_ar = Column(Text, nullable=False)
    location_en = Column("location", Text, nullable=False)
    location_ar = Column(Text, nullable=False)
    type_en = Column("type", Text, nullable=False)  # Full-time, Part-time, Contract
    type_ar = Column(Text, nullable=False)
    description_en = Column("description", Text, nullable=False)
    description_ar = Column(Text, nullable=False)
    requirements_en = Column("requirements", JSON, nullable=False, default=list)
    requirements_ar = Column(JSON, nullable=False, default=list)
    responsibilities_en = Column("responsibilities", JSON, nullable=False, default=list)
    responsibilities_ar = Column(JSON, nullable=False, default=list)

    status = Column(String(20), nullable=False, default=CareerStatus.OPEN.value, index=True)
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)

    title = composite(Localized, title_en, title_ar)
    department = composite(Localized, department_en, department_ar)
    location = composite(Localized, location_en, location_ar)
    type = composite(Localized, type_en, type_ar)
    description = composite(Localized, description_en, description_ar)
    requirements = composite(Localized, requirements_en, requirements_ar)
    responsibilities = composite(Localized, responsibilities_en, responsibilities_ar)

    # Relationships
    applications = relationship("JobApplication", back_populates="career", passive_deletes=True)

    def __repr__(self):
        return f"<Career {self.title_en} [{self.status}]>"
