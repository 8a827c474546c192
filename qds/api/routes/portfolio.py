"""
Portfolio project endpoints
The public gallery reads these; admins edit and remove them
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from qds.api.deps import found_or_404
from qds.core.database import get_db
from qds.core.errors import NotFoundError
from qds.core.security import require_admin
from qds.schemas.common import ProjectType
from qds.schemas.portfolio import (
    PortfolioProjectCreate, PortfolioProjectResponse, PortfolioProjectUpdate,
)
from qds.services import repository

router = APIRouter(prefix="/portfolio", tags=["Portfolio"])
admin_router = APIRouter(
    prefix="/admin/portfolio", tags=["Admin"], dependencies=[Depends(require_admin)]
)


# ============== PUBLIC ENDPOINTS ==============

@router.get("", response_model=List[PortfolioProjectResponse])
def list_projects(type: Optional[ProjectType] = None, db: Session = Depends(get_db)):
    """
    List portfolio projects, newest first
    Pass ?type=mobile or ?type=website for a single gallery tab
    """
    return repository.portfolio_projects.list(db, type=type)


@router.get("/{project_id}", response_model=PortfolioProjectResponse)
def get_project(project_id: str, db: Session = Depends(get_db)):
    return found_or_404(repository.portfolio_projects.get(db, project_id), "Project not found")


@router.post("", response_model=PortfolioProjectResponse, status_code=status.HTTP_201_CREATED)
def create_project(payload: PortfolioProjectCreate, db: Session = Depends(get_db)):
    return repository.portfolio_projects.create(db, payload.values())


# ============== ADMIN ENDPOINTS ==============

@admin_router.get("", response_model=List[PortfolioProjectResponse])
def admin_list_projects(db: Session = Depends(get_db)):
    return repository.portfolio_projects.list(db)


@admin_router.put("/{project_id}", response_model=PortfolioProjectResponse)
def update_project(project_id: str, payload: PortfolioProjectUpdate, db: Session = Depends(get_db)):
    """Update any subset of a project's fields"""
    return found_or_404(
        repository.portfolio_projects.update(db, project_id, payload.changes()),
        "Project not found",
    )


@admin_router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_project(project_id: str, db: Session = Depends(get_db)):
    if not repository.portfolio_projects.delete(db, project_id):
        raise NotFoundError("Project not found")
