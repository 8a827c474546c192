"""
Careers page endpoints
Closed positions are filtered out server-side for every public route
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from qds.api.deps import found_or_404
from qds.core.database import get_db
from qds.core.errors import NotFoundError
from qds.core.security import require_admin
from qds.models.career import CareerStatus
from qds.schemas.career import CareerCreate, CareerResponse, CareerUpdate
from qds.schemas.common import CareerStatusValue
from qds.services import repository

router = APIRouter(prefix="/careers", tags=["Careers"])
admin_router = APIRouter(
    prefix="/admin/careers", tags=["Admin"], dependencies=[Depends(require_admin)]
)


# ============== PUBLIC CAREERS PAGE ENDPOINTS ==============

@router.get("", response_model=List[CareerResponse])
def list_open_careers(db: Session = Depends(get_db)):
    """Open positions for the public careers page"""
    return repository.careers.list(db, status=CareerStatus.OPEN.value)


@router.get("/{career_id}", response_model=CareerResponse)
def get_open_career(career_id: str, db: Session = Depends(get_db)):
    career = repository.careers.get_by(db, id=career_id, status=CareerStatus.OPEN.value)
    return found_or_404(career, "Career not found")


@router.post("", response_model=CareerResponse, status_code=status.HTTP_201_CREATED)
def create_career(payload: CareerCreate, db: Session = Depends(get_db)):
    return repository.careers.create(db, payload.values())


# ============== ADMIN ENDPOINTS ==============

@admin_router.get("", response_model=List[CareerResponse])
def admin_list_careers(
    career_status: Optional[CareerStatusValue] = Query(None, alias="status"),
    db: Session = Depends(get_db),
):
    """Every career regardless of status"""
    return repository.careers.list(db, status=career_status)


@admin_router.post("", response_model=CareerResponse, status_code=status.HTTP_201_CREATED)
def admin_create_career(payload: CareerCreate, db: Session = Depends(get_db)):
    return repository.careers.create(db, payload.values())


@admin_router.put("/{career_id}", response_model=CareerResponse)
def update_career(career_id: str, payload: CareerUpdate, db: Session = Depends(get_db)):
    """Edit a position or open/close it"""
    return found_or_404(
        repository.careers.update(db, career_id, payload.changes()), "Career not found"
    )


@admin_router.delete("/{career_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_career(career_id: str, db: Session = Depends(get_db)):
    """Delete a position together with its applications"""
    if not repository.careers.delete(db, career_id):
        raise NotFoundError("Career not found")
