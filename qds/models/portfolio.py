"""
Portfolio project (case study) database model
"""
from sqlalchemy import Column, String, Text, DateTime, JSON
from sqlalchemy.orm import composite
from qds.core.database import Base
from qds.models.common import Localized, new_id, utcnow


class PortfolioProject(Base):
    __tablename__ = "portfolio_projects"

    id = Column(String(50), primary_key=True, default=new_id)

    title_en = Column("title", Text, nullable=False)
    title_ar = Column(Text, nullable=False)
    category_en = Column("category", Text, nullable=False)
    category_ar = Column(Text, nullable=False)
    description_en = Column("description", Text, nullable=False)
    description_ar = Column(Text, nullable=False)
    client_en = Column("client", Text, nullable=False)
    client_ar = Column(Text, nullable=False)
    challenge_en = Column("challenge", Text, nullable=False)
    challenge_ar = Column(Text, nullable=False)
    solution_en = Column("solution", Text, nullable=False)
    solution_ar = Column(Text, nullable=False)
    results_en = Column("results", Text, nullable=False)
    results_ar = Column(Text, nullable=False)

    type = Column(String(20), nullable=False, index=True)  # "mobile" or "website"
    technologies = Column(JSON, nullable=False, default=list)
    image_url = Column(Text, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)

    title = composite(Localized, title_en, title_ar)
    category = composite(Localized, category_en, category_ar)
    description = composite(Localized, description_en, description_ar)
    client = composite(Localized, client_en, client_ar)
    challenge = composite(Localized, challenge_en, challenge_ar)
    solution = composite(Localized, solution_en, solution_ar)
    results = composite(Localized, results_en, results_ar)

    def __repr__(self):
        return f"<PortfolioProject {self.title_en} ({self.type})>"
