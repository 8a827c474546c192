"""
Job application database model
Only the status column changes after a candidate submits
"""
import enum

from sqlalchemy import Column, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from qds.core.database import Base
from qds.models.common import new_id, utcnow


class ApplicationStatus(str, enum.Enum):
    PENDING = "pending"        # Just applied
    REVIEWING = "reviewing"    # Being read by the team
    INTERVIEW = "interview"    # Invited to interview
    HIRED = "hired"
    REJECTED = "rejected"


class JobApplication(Base):
    __tablename__ = "job_applications"

    id = Column(String(50), primary_key=True, default=new_id)
    career_id = Column(String(50), ForeignKey("careers.id", ondelete="CASCADE"), nullable=False, index=True)

    full_name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    phone = Column(Text, nullable=False)
    cover_letter = Column(Text, nullable=False)
    resume_url = Column(Text, nullable=True)
    linkedin_url = Column(Text, nullable=True)
    portfolio_url = Column(Text, nullable=True)
    years_of_experience = Column(String(50), nullable=False)

    status = Column(String(20), nullable=False, default=ApplicationStatus.PENDING.value, index=True)
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)

    # Relationships
    career = relationship("Career", back_populates="applications")

    def __repr__(self):
        return f"<JobApplication {self.full_name} for Career #{self.career_id}>"
