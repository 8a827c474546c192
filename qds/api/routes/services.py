"""
Service package (pricing) endpoints
The public list only ever contains active services
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from qds.api.deps import found_or_404
from qds.core.database import get_db
from qds.core.errors import NotFoundError
from qds.core.security import require_admin
from qds.schemas.common import ServiceCategory
from qds.schemas.service import ServiceCreate, ServiceResponse, ServiceUpdate
from qds.services import repository

router = APIRouter(prefix="/services", tags=["Services"])
admin_router = APIRouter(
    prefix="/admin/services", tags=["Admin"], dependencies=[Depends(require_admin)]
)


# ============== PUBLIC ENDPOINTS ==============

@router.get("", response_model=List[ServiceResponse])
def list_active_services(category: Optional[ServiceCategory] = None, db: Session = Depends(get_db)):
    """Active services in display order"""
    return repository.services.list(db, is_active=True, category=category)


@router.get("/{service_id}", response_model=ServiceResponse)
def get_active_service(service_id: str, db: Session = Depends(get_db)):
    service = repository.services.get_by(db, id=service_id, is_active=True)
    return found_or_404(service, "Service not found")


# ============== ADMIN ENDPOINTS ==============

@admin_router.get("", response_model=List[ServiceResponse])
def admin_list_services(category: Optional[ServiceCategory] = None, db: Session = Depends(get_db)):
    """Every service, including inactive ones"""
    return repository.services.list(db, category=category)


@admin_router.post("", response_model=ServiceResponse, status_code=status.HTTP_201_CREATED)
def create_service(payload: ServiceCreate, db: Session = Depends(get_db)):
    return repository.services.create(db, payload.values())


@admin_router.put("/{service_id}", response_model=ServiceResponse)
def update_service(service_id: str, payload: ServiceUpdate, db: Session = Depends(get_db)):
    """Update fields, toggle isActive or move displayOrder"""
    return found_or_404(
        repository.services.update(db, service_id, payload.changes()), "Service not found"
    )


@admin_router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_service(service_id: str, db: Session = Depends(get_db)):
    if not repository.services.delete(db, service_id):
        raise NotFoundError("Service not found")
