"""
Startup seeding
Fills empty content tables with the default set. A table that already has
rows is left alone, so restarting the process never duplicates content.
"""
import logging
from typing import Dict, Iterable, Type

from sqlalchemy.orm import Session

from qds.schemas.blog import BlogPostCreate
from qds.schemas.career import CareerCreate
from qds.schemas.common import CreateModel
from qds.schemas.portfolio import PortfolioProjectCreate
from qds.schemas.service import ServiceCreate
from qds.schemas.testimonial import TestimonialCreate
from qds.services import repository
from qds.services.repository import Repository
from qds.services.seed_data import (
    DEFAULT_BLOG_POSTS, DEFAULT_CAREERS, DEFAULT_SERVICES,
    SAMPLE_PORTFOLIO_PROJECTS, SAMPLE_TESTIMONIALS,
)

logger = logging.getLogger(__name__)


def seed_table(
    db: Session, repo: Repository, schema: Type[CreateModel], items: Iterable[dict]
) -> int:
    """Insert ``items`` if ``repo``'s table is empty; returns rows inserted"""
    if repo.count(db) > 0:
        return 0
    inserted = 0
    for item in items:
        repo.create(db, schema.model_validate(item).values())
        inserted += 1
    logger.info("Seeded %d %s rows", inserted, repo.name)
    return inserted


def seed_default_content(db: Session) -> Dict[str, int]:
    """Blog posts, careers and services, each checked independently"""
    return {
        "blog_posts": seed_table(db, repository.blog_posts, BlogPostCreate, DEFAULT_BLOG_POSTS),
        "careers": seed_table(db, repository.careers, CareerCreate, DEFAULT_CAREERS),
        "services": seed_table(db, repository.services, ServiceCreate, DEFAULT_SERVICES),
    }


def seed_sample_content(db: Session) -> Dict[str, int]:
    """Demo portfolio projects and testimonials"""
    return {
        "portfolio_projects": seed_table(
            db, repository.portfolio_projects, PortfolioProjectCreate, SAMPLE_PORTFOLIO_PROJECTS
        ),
        "testimonials": seed_table(
            db, repository.testimonials, TestimonialCreate, SAMPLE_TESTIMONIALS
        ),
    }
