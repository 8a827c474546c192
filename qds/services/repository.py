"""
Persistence layer
One Repository per entity exposing create / list / get / update / delete.
Every operation is a single statement; nothing spans entities.
"""
import logging
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from qds.core.database import Base
from qds.core.errors import ConflictError, StoreError
from qds.models import (
    BlogPost, Career, ContactSubmission, JobApplication, Localized, PortfolioProject, Service,
    Testimonial,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


def to_columns(data: Dict[str, Any]) -> Dict[str, Any]:
    """Turn {"en": ..., "ar": ...} payload values into Localized composites"""
    columns = {}
    for key, value in data.items():
        if isinstance(value, dict) and set(value) == {"en", "ar"}:
            value = Localized(value["en"], value["ar"])
        columns[key] = value
    return columns


class Repository(Generic[ModelT]):
    def __init__(self, model: Type[ModelT], order_by: Sequence = ()):
        self.model = model
        self.order_by = tuple(order_by)
        self.name = model.__name__

    def _commit(self, db: Session, action: str) -> None:
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            logger.info("%s %s rejected by a constraint: %s", action, self.name, e.orig)
            raise ConflictError(f"{self.name} conflicts with an existing record") from e
        except SQLAlchemyError as e:
            db.rollback()
            raise StoreError(f"Failed to {action} {self.name}") from e

    def create(self, db: Session, data: Dict[str, Any]) -> ModelT:
        record = self.model(**to_columns(data))
        db.add(record)
        self._commit(db, "create")
        db.refresh(record)
        return record

    def list(self, db: Session, **filters) -> List[ModelT]:
        """List records in the entity's default order; None-valued filters are ignored"""
        query = db.query(self.model)
        active = {key: value for key, value in filters.items() if value is not None}
        if active:
            query = query.filter_by(**active)
        try:
            return query.order_by(*self.order_by).all()
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to list {self.name}") from e

    def get(self, db: Session, record_id: str) -> Optional[ModelT]:
        try:
            return db.get(self.model, record_id)
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to fetch {self.name}") from e

    def get_by(self, db: Session, **filters) -> Optional[ModelT]:
        try:
            return db.query(self.model).filter_by(**filters).first()
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to fetch {self.name}") from e

    def update(self, db: Session, record_id: str, data: Dict[str, Any]) -> Optional[ModelT]:
        record = self.get(db, record_id)
        if record is None:
            return None
        for field, value in to_columns(data).items():
            setattr(record, field, value)
        self._commit(db, "update")
        db.refresh(record)
        return record

    def delete(self, db: Session, record_id: str) -> bool:
        record = self.get(db, record_id)
        if record is None:
            return False
        db.delete(record)
        self._commit(db, "delete")
        return True

    def count(self, db: Session) -> int:
        try:
            return db.query(self.model).count()
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to count {self.name}") from e


# ============== ENTITY REPOSITORIES ==============

contact_submissions = Repository(ContactSubmission, order_by=[ContactSubmission.created_at.desc()])
portfolio_projects = Repository(PortfolioProject, order_by=[PortfolioProject.created_at.desc()])
services = Repository(Service, order_by=[Service.display_order.asc(), Service.created_at.desc()])
testimonials = Repository(Testimonial, order_by=[Testimonial.created_at.desc()])
blog_posts = Repository(BlogPost, order_by=[BlogPost.published_at.desc()])
careers = Repository(Career, order_by=[Career.created_at.desc()])
job_applications = Repository(JobApplication, order_by=[JobApplication.created_at.desc()])
