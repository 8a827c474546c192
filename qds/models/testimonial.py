"""
Client testimonial database model
"""
from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import composite
from qds.core.database import Base
from qds.models.common import Localized, new_id, utcnow


class Testimonial(Base):
    __tablename__ = "testimonials"

    id = Column(String(50), primary_key=True, default=new_id)

    client_name_en = Column("client_name", Text, nullable=False)
    client_name_ar = Column(Text, nullable=False)
    client_position_en = Column("client_position", Text, nullable=False)
    client_position_ar = Column(Text, nullable=False)
    client_company_en = Column("client_company", Text, nullable=False)
    client_company_ar = Column(Text, nullable=False)
    testimonial_en = Column("testimonial", Text, nullable=False)
    testimonial_ar = Column(Text, nullable=False)

    rating = Column(String(1), nullable=False)  # "1".."5"
    project_type = Column(String(20), nullable=False, index=True)
    avatar_url = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)

    client_name = composite(Localized, client_name_en, client_name_ar)
    client_position = composite(Localized, client_position_en, client_position_ar)
    client_company = composite(Localized, client_company_en, client_company_ar)
    testimonial = composite(Localized, testimonial_en, testimonial_ar)

    def __repr__(self):
        return f"<Testimonial {self.client_name_en} ({self.rating})>"
