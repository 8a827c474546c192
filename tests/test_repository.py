from datetime import datetime

import pytest

from qds.core.errors import ConflictError
from qds.models import Localized
from qds.services import repository
from qds.services.repository import to_columns
from qds.services.seed_data import loc


def blog_values(slug, published_at):
    return {
        "title": loc("Title", "العنوان"),
        "slug": slug,
        "excerpt": loc("Excerpt", "مقتطف"),
        "content": loc("Content", "المحتوى"),
        "category": loc("News", "أخبار"),
        "author": loc("Team", "الفريق"),
        "image_url": "/images/post.jpg",
        "published_at": published_at,
    }


def service_values(order, active=True):
    return {
        "name": loc(f"Service {order}", f"خدمة {order}"),
        "description": loc("Description", "الوصف"),
        "price": loc("On request", "عند الطلب"),
        "category": "mobile",
        "features": {"en": ["One"], "ar": ["واحد"]},
        "is_active": active,
        "display_order": order,
    }


def test_to_columns_wraps_language_pairs():
    columns = to_columns({"title": {"en": "A", "ar": "ب"}, "type": "mobile"})
    assert columns == {"title": Localized("A", "ب"), "type": "mobile"}


def test_localized_composite_persists_both_columns(db):
    post = repository.blog_posts.create(db, blog_values("composite", datetime(2024, 1, 1)))
    assert post.title_en == "Title"
    assert post.title_ar == "العنوان"
    assert post.title == Localized("Title", "العنوان")


def test_services_ordered_by_display_order(db):
    for order in (3, 1, 2):
        repository.services.create(db, service_values(order))
    assert [s.display_order for s in repository.services.list(db)] == [1, 2, 3]


def test_none_filters_are_ignored(db):
    repository.services.create(db, service_values(1, active=False))
    assert len(repository.services.list(db, is_active=None)) == 1
    assert repository.services.list(db, is_active=True) == []


def test_blog_posts_ordered_by_publication_date(db):
    repository.blog_posts.create(db, blog_values("middle", datetime(2024, 3, 1)))
    repository.blog_posts.create(db, blog_values("oldest", datetime(2024, 1, 1)))
    repository.blog_posts.create(db, blog_values("newest", datetime(2024, 6, 1)))
    slugs = [p.slug for p in repository.blog_posts.list(db)]
    assert slugs == ["newest", "middle", "oldest"]


def test_unique_violation_raises_conflict_and_rolls_back(db):
    repository.blog_posts.create(db, blog_values("same", datetime(2024, 1, 1)))
    with pytest.raises(ConflictError):
        repository.blog_posts.create(db, blog_values("same", datetime(2024, 2, 1)))
    # The session is usable again after the rollback
    assert repository.blog_posts.count(db) == 1


def test_update_and_delete_missing_records(db):
    assert repository.careers.update(db, "missing", {"status": "closed"}) is None
    assert repository.careers.delete(db, "missing") is False


def test_get_by(db):
    repository.blog_posts.create(db, blog_values("find-me", datetime(2024, 1, 1)))
    assert repository.blog_posts.get_by(db, slug="find-me").slug == "find-me"
    assert repository.blog_posts.get_by(db, slug="nope") is None
