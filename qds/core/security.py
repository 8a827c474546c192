"""
Admin authentication
A single shared admin password unlocks a server-side session. The signed
session cookie (Starlette SessionMiddleware) only carries the session id;
the AdminSession row is what makes a request "admin".
"""
import hashlib
import hmac
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from qds.core.config import settings
from qds.core.database import get_db
from qds.core.errors import AuthorizationError, StoreError
from qds.models.admin_session import AdminSession
from qds.models.common import utcnow

logger = logging.getLogger(__name__)

SESSION_KEY = "admin_session_id"


@dataclass(frozen=True)
class AdminContext:
    """Request-scoped authentication state; ``session`` is None for anonymous callers"""
    session: Optional[AdminSession] = None

    @property
    def is_admin(self) -> bool:
        return self.session is not None


def password_matches(candidate: str, secret: str) -> bool:
    """Constant-time comparison; hashing first hides the secret's length"""
    return hmac.compare_digest(
        hashlib.sha256(candidate.encode("utf-8")).digest(),
        hashlib.sha256(secret.encode("utf-8")).digest(),
    )


def resolve_admin_session(
    db: Session, session_id: Optional[str], now: Optional[datetime] = None
) -> Optional[AdminSession]:
    """Return the live session for ``session_id``; expired rows are removed"""
    if not session_id:
        return None
    try:
        record = db.get(AdminSession, session_id)
        if record is None:
            return None
        if record.is_expired(now):
            db.delete(record)
            db.commit()
            return None
        return record
    except SQLAlchemyError as e:
        db.rollback()
        raise StoreError("Failed to load admin session") from e


def open_admin_session(db: Session, request: Request) -> AdminSession:
    # A fresh id on every login; never reuse whatever the cookie carried before
    close_admin_session(db, request)
    record = AdminSession(expires_at=utcnow() + timedelta(seconds=settings.SESSION_MAX_AGE_SECONDS))
    db.add(record)
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise StoreError("Failed to create admin session") from e
    db.refresh(record)
    request.session[SESSION_KEY] = record.id
    return record


def close_admin_session(db: Session, request: Request) -> None:
    """Destroy the server-side record and clear the cookie; safe to call twice"""
    session_id = request.session.get(SESSION_KEY)
    request.session.clear()
    if not session_id:
        return
    try:
        record = db.get(AdminSession, session_id)
        if record is not None:
            db.delete(record)
            db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise StoreError("Failed to delete admin session") from e


def purge_expired_sessions(db: Session) -> int:
    try:
        removed = db.query(AdminSession).filter(AdminSession.expires_at <= utcnow()).delete()
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise StoreError("Failed to purge admin sessions") from e
    if removed:
        logger.info("Purged %d expired admin sessions", removed)
    return removed


# ============== DEPENDENCIES ==============

def get_admin_context(request: Request, db: Session = Depends(get_db)) -> AdminContext:
    return AdminContext(session=resolve_admin_session(db, request.session.get(SESSION_KEY)))


def require_admin(context: AdminContext = Depends(get_admin_context)) -> AdminContext:
    """Guard for admin routes; the handler never runs without a live session"""
    if not context.is_admin:
        raise AuthorizationError("Unauthorized. Admin access required.")
    return context
