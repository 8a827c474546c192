"""
Contact form submission database model
"""
from sqlalchemy import Column, String, Text, DateTime
from qds.core.database import Base
from qds.models.common import new_id, utcnow


class ContactSubmission(Base):
    """Lead captured from the public contact form; never edited after insert"""
    __tablename__ = "contact_submissions"

    id = Column(String(50), primary_key=True, default=new_id)
    name = Column(Text, nullable=False)
    company = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    phone = Column(Text, nullable=False)
    service_needed = Column(Text, nullable=False)
    project_description = Column(Text, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)

    def __repr__(self):
        return f"<ContactSubmission {self.name} ({self.company})>"
