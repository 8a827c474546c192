"""
Priced service package database model
"""
from sqlalchemy import Column, String, Text, DateTime, Boolean, Integer, JSON
from sqlalchemy.orm import composite
from qds.core.database import Base
from qds.models.common import Localized, new_id, utcnow


class Service(Base):
    __tablename__ = "services"

    id = Column(String(50), primary_key=True, default=new_id)

    name_en = Column("name", Text, nullable=False)
    name_ar = Column(Text, nullable=False)
    description_en = Column("description", Text, nullable=False)
    description_ar = Column(Text, nullable=False)
    price_en = Column("price", Text, nullable=False)  # Display string, e.g. "Starting from 8,000 QAR"
    price_ar = Column(Text, nullable=False)
    features_en = Column("features", JSON, nullable=False, default=list)
    features_ar = Column(JSON, nullable=False, default=list)

    category = Column(String(20), nullable=False, index=True)  # "mobile" or "website"
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    display_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    name = composite(Localized, name_en, name_ar)
    description = composite(Localized, description_en, description_ar)
    price = composite(Localized, price_en, price_ar)
    features = composite(Localized, features_en, features_ar)

    def __repr__(self):
        return f"<Service {self.name_en}>"
