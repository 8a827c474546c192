"""
Analytics counters
Increments are a single INSERT ... ON CONFLICT (date) DO UPDATE statement,
so simultaneous requests for the same day never lose a count.
"""
import logging
from datetime import date
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from qds.core.errors import StoreError
from qds.models.analytics import Analytics, Counter
from qds.models.common import new_id, utcnow

logger = logging.getLogger(__name__)

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class AnalyticsRecorder:
    """Per-day counters keyed by calendar date"""

    def increment(self, db: Session, counter: Counter, day: Optional[date] = None) -> None:
        """Add one to ``counter`` for ``day`` (today, UTC, by default)"""
        day = day or utcnow().date()
        column = counter.value
        insert = _DIALECT_INSERTS.get(db.get_bind().dialect.name)
        if insert is None:
            raise StoreError(f"Atomic upsert not supported on {db.get_bind().dialect.name}")

        table = Analytics.__table__
        row = {
            "id": new_id(),
            "date": day,
            "page_views": 0,
            "whatsapp_clicks": 0,
            "contact_submissions": 0,
            "created_at": utcnow(),
        }
        row[column] = 1  # A new day starts at one for the counter being bumped
        stmt = insert(table).values(**row).on_conflict_do_update(
            index_elements=[table.c.date],
            set_={column: table.c[column] + 1},
        )
        try:
            db.execute(stmt)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            raise StoreError(f"Failed to increment {column}") from e

    def record(self, db: Session, counter: Counter) -> bool:
        """
        Fire-and-forget increment used by the tracking endpoints.
        Failures are logged and reported as False, never raised.
        """
        try:
            self.increment(db, counter)
            return True
        except Exception:
            logger.warning("Could not record analytics counter %s", counter.value, exc_info=True)
            return False

    def list_days(
        self, db: Session, start: Optional[date] = None, end: Optional[date] = None
    ) -> List[Analytics]:
        query = db.query(Analytics)
        if start is not None:
            query = query.filter(Analytics.date >= start)
        if end is not None:
            query = query.filter(Analytics.date <= end)
        try:
            return query.order_by(Analytics.date.desc()).all()
        except SQLAlchemyError as e:
            raise StoreError("Failed to list analytics") from e

    def totals(self, db: Session, start: Optional[date] = None, end: Optional[date] = None) -> dict:
        query = db.query(
            func.count(Analytics.id),
            func.coalesce(func.sum(Analytics.page_views), 0),
            func.coalesce(func.sum(Analytics.whatsapp_clicks), 0),
            func.coalesce(func.sum(Analytics.contact_submissions), 0),
        )
        if start is not None:
            query = query.filter(Analytics.date >= start)
        if end is not None:
            query = query.filter(Analytics.date <= end)
        try:
            days, page_views, whatsapp_clicks, contact_submissions = query.one()
        except SQLAlchemyError as e:
            raise StoreError("Failed to total analytics") from e
        return {
            "days": days,
            "page_views": int(page_views),
            "whatsapp_clicks": int(whatsapp_clicks),
            "contact_submissions": int(contact_submissions),
        }


analytics_recorder = AnalyticsRecorder()
