"""
Blog post database model
"""
from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import composite
from qds.core.database import Base
from qds.models.common import Localized, new_id, utcnow


class BlogPost(Base):
    __tablename__ = "blog_posts"

    id = Column(String(50), primary_key=True, default=new_id)
    slug = Column(String(200), nullable=False, unique=True, index=True)

    title_en = Column("title", Text, nullable=False)
    title_ar = Column(Text, nullable=False)
    excerpt_en = Column("excerpt", Text, nullable=False)
    excerpt_ar = Column(Text, nullable=False)
    content_en = Column("content", Text, nullable=False)
    content_ar = Column(Text, nullable=False)
    category_en = Column("category", Text, nullable=False)
    category_ar = Column(Text, nullable=False)
    author_en = Column("author", Text, nullable=False)
    author_ar = Column(Text, nullable=False)

    image_url = Column(Text, nullable=False)
    published_at = Column(DateTime, default=utcnow, nullable=False, index=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    title = composite(Localized, title_en, title_ar)
    excerpt = composite(Localized, excerpt_en, excerpt_ar)
    content = composite(Localized, content_en, content_ar)
    category = composite(Localized, category_en, category_ar)
    author = composite(Localized, author_en, author_ar)

    def __repr__(self):
        return f"<BlogPost {self.slug}>"
