"""
Testimonial endpoints
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from qds.api.deps import found_or_404
from qds.core.database import get_db
from qds.core.errors import NotFoundError
from qds.core.security import require_admin
from qds.schemas.common import ProjectType
from qds.schemas.testimonial import TestimonialCreate, TestimonialResponse, TestimonialUpdate
from qds.services import repository

router = APIRouter(prefix="/testimonials", tags=["Testimonials"])
admin_router = APIRouter(
    prefix="/admin/testimonials", tags=["Admin"], dependencies=[Depends(require_admin)]
)


# ============== PUBLIC ENDPOINTS ==============

@router.get("", response_model=List[TestimonialResponse])
def list_testimonials(
    project_type: Optional[ProjectType] = Query(None, alias="projectType"),
    db: Session = Depends(get_db),
):
    return repository.testimonials.list(db, project_type=project_type)


@router.get("/{testimonial_id}", response_model=TestimonialResponse)
def get_testimonial(testimonial_id: str, db: Session = Depends(get_db)):
    return found_or_404(repository.testimonials.get(db, testimonial_id), "Testimonial not found")


@router.post("", response_model=TestimonialResponse, status_code=status.HTTP_201_CREATED)
def create_testimonial(payload: TestimonialCreate, db: Session = Depends(get_db)):
    return repository.testimonials.create(db, payload.values())


# ============== ADMIN ENDPOINTS ==============

@admin_router.put("/{testimonial_id}", response_model=TestimonialResponse)
def update_testimonial(
    testimonial_id: str, payload: TestimonialUpdate, db: Session = Depends(get_db)
):
    return found_or_404(
        repository.testimonials.update(db, testimonial_id, payload.changes()),
        "Testimonial not found",
    )


@admin_router.delete("/{testimonial_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_testimonial(testimonial_id: str, db: Session = Depends(get_db)):
    if not repository.testimonials.delete(db, testimonial_id):
        raise NotFoundError("Testimonial not found")
