"""
Server-side admin session records
The signed session cookie only carries the id of a row in this table
"""
from sqlalchemy import Column, String, DateTime
from qds.core.database import Base
from qds.models.common import new_id, utcnow


class AdminSession(Base):
    __tablename__ = "admin_sessions"

    id = Column(String(50), primary_key=True, default=new_id)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    expires_at = Column(DateTime, nullable=False, index=True)

    def is_expired(self, now=None) -> bool:
        return (now or utcnow()) >= self.expires_at

    def __repr__(self):
        return f"<AdminSession {self.id} until {self.expires_at}>"
