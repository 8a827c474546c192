"""
Pydantic schemas for blog posts
"""
from datetime import datetime
from typing import Optional

from qds.schemas.common import (
    CreateModel, LocalizedText, RecordResponse, RequiredText, Slug, UpdateModel,
)


class BlogPostCreate(CreateModel):
    title: LocalizedText
    slug: Slug
    excerpt: LocalizedText
    content: LocalizedText
    category: LocalizedText
    author: LocalizedText
    image_url: RequiredText
    published_at: Optional[datetime] = None  # Defaults to now; set to backdate


class BlogPostUpdate(UpdateModel):
    title: Optional[LocalizedText] = None
    slug: Optional[Slug] = None
    excerpt: Optional[LocalizedText] = None
    content: Optional[LocalizedText] = None
    category: Optional[LocalizedText] = None
    author: Optional[LocalizedText] = None
    image_url: Optional[RequiredText] = None
    published_at: Optional[datetime] = None


class BlogPostResponse(RecordResponse):
    title: LocalizedText
    slug: str
    excerpt: LocalizedText
    content: LocalizedText
    category: LocalizedText
    author: LocalizedText
    image_url: str
    published_at: datetime
