"""
Job application endpoints
Candidates apply to open positions; admins review and move applications
through the hiring pipeline
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from qds.api.deps import found_or_404
from qds.core.database import get_db
from qds.core.security import require_admin
from qds.models.application import ApplicationStatus
from qds.models.career import CareerStatus
from qds.schemas.application import (
    JobApplicationCreate, JobApplicationResponse, JobApplicationStatusUpdate,
)
from qds.schemas.common import ApplicationStatusValue
from qds.services import repository

router = APIRouter(prefix="/job-applications", tags=["Job Applications"])
admin_router = APIRouter(
    prefix="/admin/job-applications", tags=["Admin"], dependencies=[Depends(require_admin)]
)


# ============== PUBLIC ENDPOINTS ==============

@router.post("", response_model=JobApplicationResponse, status_code=status.HTTP_201_CREATED)
def submit_application(payload: JobApplicationCreate, db: Session = Depends(get_db)):
    """
    Apply for an open position

    The career must exist and still be open. Every new application
    starts as pending; a status sent by the client is ignored.
    """
    career = repository.careers.get_by(
        db, id=payload.career_id, status=CareerStatus.OPEN.value
    )
    found_or_404(career, "Career not found")

    data = payload.values()
    data["status"] = ApplicationStatus.PENDING.value
    return repository.job_applications.create(db, data)


# ============== ADMIN ENDPOINTS ==============

@admin_router.get("", response_model=List[JobApplicationResponse])
def list_applications(
    career_id: Optional[str] = Query(None, alias="careerId"),
    application_status: Optional[ApplicationStatusValue] = Query(None, alias="status"),
    db: Session = Depends(get_db),
):
    """All applications, newest first, optionally for one career or status"""
    return repository.job_applications.list(
        db, career_id=career_id, status=application_status
    )


@admin_router.get("/{application_id}", response_model=JobApplicationResponse)
def get_application(application_id: str, db: Session = Depends(get_db)):
    return found_or_404(
        repository.job_applications.get(db, application_id), "Application not found"
    )


@admin_router.patch("/{application_id}/status", response_model=JobApplicationResponse)
def update_application_status(
    application_id: str, payload: JobApplicationStatusUpdate, db: Session = Depends(get_db)
):
    """Move an application to a new status; no other field can change"""
    return found_or_404(
        repository.job_applications.update(db, application_id, {"status": payload.status}),
        "Application not found",
    )
