"""
Contact form endpoints
Submissions are write-once: there is no update or delete route
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from qds.api.deps import found_or_404
from qds.core.database import get_db
from qds.core.security import require_admin
from qds.schemas.contact import ContactSubmissionCreate, ContactSubmissionResponse
from qds.services import repository

router = APIRouter(prefix="/contact", tags=["Contact"])
admin_router = APIRouter(
    prefix="/admin/contact", tags=["Admin"], dependencies=[Depends(require_admin)]
)


# ============== PUBLIC ENDPOINTS ==============

@router.post("", response_model=ContactSubmissionResponse, status_code=status.HTTP_201_CREATED)
def submit_contact_form(payload: ContactSubmissionCreate, db: Session = Depends(get_db)):
    """Store a lead from the public contact form"""
    return repository.contact_submissions.create(db, payload.values())


# ============== ADMIN ENDPOINTS ==============

@admin_router.get("", response_model=List[ContactSubmissionResponse])
def list_contact_submissions(db: Session = Depends(get_db)):
    """All submissions, newest first"""
    return repository.contact_submissions.list(db)


@admin_router.get("/{submission_id}", response_model=ContactSubmissionResponse)
def get_contact_submission(submission_id: str, db: Session = Depends(get_db)):
    return found_or_404(
        repository.contact_submissions.get(db, submission_id), "Submission not found"
    )
