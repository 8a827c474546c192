"""
Blog endpoints
Posts are looked up publicly by slug, and by id in the admin area
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from qds.api.deps import found_or_404
from qds.core.database import get_db
from qds.core.errors import NotFoundError
from qds.core.security import require_admin
from qds.schemas.blog import BlogPostCreate, BlogPostResponse, BlogPostUpdate
from qds.services import repository

router = APIRouter(prefix="/blog", tags=["Blog"])
admin_router = APIRouter(
    prefix="/admin/blog", tags=["Admin"], dependencies=[Depends(require_admin)]
)


# ============== PUBLIC ENDPOINTS ==============

@router.get("", response_model=List[BlogPostResponse])
def list_posts(category: Optional[str] = None, db: Session = Depends(get_db)):
    """
    Posts by publication date, newest first
    ?category= matches the English category name
    """
    return repository.blog_posts.list(db, category_en=category)


@router.get("/{slug}", response_model=BlogPostResponse)
def get_post(slug: str, db: Session = Depends(get_db)):
    return found_or_404(repository.blog_posts.get_by(db, slug=slug.lower()), "Blog post not found")


@router.post("", response_model=BlogPostResponse, status_code=status.HTTP_201_CREATED)
def create_post(payload: BlogPostCreate, db: Session = Depends(get_db)):
    """Create a post; a slug that is already taken is rejected with 409"""
    return repository.blog_posts.create(db, payload.values())


# ============== ADMIN ENDPOINTS ==============

@admin_router.get("", response_model=List[BlogPostResponse])
def admin_list_posts(db: Session = Depends(get_db)):
    return repository.blog_posts.list(db)


@admin_router.put("/{post_id}", response_model=BlogPostResponse)
def update_post(post_id: str, payload: BlogPostUpdate, db: Session = Depends(get_db)):
    return found_or_404(
        repository.blog_posts.update(db, post_id, payload.changes()), "Blog post not found"
    )


@admin_router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(post_id: str, db: Session = Depends(get_db)):
    if not repository.blog_posts.delete(db, post_id):
        raise NotFoundError("Blog post not found")
