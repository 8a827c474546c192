import os

# Configure the app before anything from qds is imported
os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_ON_STARTUP"] = "false"
os.environ["ADMIN_PASSWORD"] = "test-admin-password"
os.environ["SESSION_SECRET"] = "test-session-secret"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from qds.core.database import Base, SessionLocal, engine, init_db  # noqa: E402
from qds.main import app  # noqa: E402
from qds.services.seed_data import loc  # noqa: E402

ADMIN_PASSWORD = os.environ["ADMIN_PASSWORD"]


@pytest.fixture(autouse=True)
def fresh_schema():
    Base.metadata.drop_all(bind=engine)
    init_db()
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def admin_client():
    client = TestClient(app)
    response = client.post("/api/admin/login", json={"password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return client


# ============== PAYLOAD FACTORIES ==============

@pytest.fixture
def contact_payload():
    return {
        "name": "Mariam Al-Thani",
        "company": "Doha Trading",
        "email": "mariam@example.com",
        "phone": "+974 5555 1234",
        "serviceNeeded": "Mobile App",
        "projectDescription": "We need a delivery app for our stores in Doha.",
    }


@pytest.fixture
def portfolio_payload():
    return {
        "title": loc("Delivery App", "تطبيق توصيل"),
        "category": loc("E-Commerce", "التجارة الإلكترونية"),
        "description": loc("Same-day delivery", "توصيل في نفس اليوم"),
        "type": "mobile",
        "client": loc("Doha Trading", "الدوحة للتجارة"),
        "challenge": loc("Slow ordering", "طلبات بطيئة"),
        "solution": loc("A native app", "تطبيق أصلي"),
        "results": loc("2x orders", "ضعف الطلبات"),
        "technologies": ["React Native", "Node.js"],
        "imageUrl": "/images/delivery.png",
    }


@pytest.fixture
def service_payload():
    def make(**overrides):
        payload = {
            "name": loc("Starter Website", "موقع أساسي"),
            "description": loc("A simple company site", "موقع بسيط للشركة"),
            "price": loc("From 5,000 QAR", "من 5,000 ريال"),
            "category": "website",
            "features": {"en": ["5 pages", "Contact form"], "ar": ["5 صفحات", "نموذج تواصل"]},
            "isActive": True,
            "displayOrder": 1,
        }
        payload.update(overrides)
        return payload
    return make


@pytest.fixture
def testimonial_payload():
    return {
        "clientName": loc("Ahmed", "أحمد"),
        "clientPosition": loc("CEO", "الرئيس التنفيذي"),
        "clientCompany": loc("Pearl Foods", "بيرل للأغذية"),
        "rating": "5",
        "testimonial": loc("Excellent work", "عمل ممتاز"),
        "projectType": "website",
    }


@pytest.fixture
def blog_payload():
    def make(slug="first-post", **overrides):
        payload = {
            "title": loc("First Post", "المقال الأول"),
            "slug": slug,
            "excerpt": loc("Short intro", "مقدمة قصيرة"),
            "content": loc("Full body text", "النص الكامل"),
            "category": loc("Web Development", "تطوير المواقع"),
            "author": loc("QDS Team", "فريق الشركة"),
            "imageUrl": "/images/post.jpg",
        }
        payload.update(overrides)
        return payload
    return make


@pytest.fixture
def career_payload():
    def make(**overrides):
        payload = {
            "title": loc("Backend Developer", "مطور خلفية"),
            "department": loc("Engineering", "الهندسة"),
            "location": loc("Doha, Qatar", "الدوحة، قطر"),
            "type": loc("Full-time", "دوام كامل"),
            "description": loc("Build APIs", "بناء واجهات برمجية"),
            "requirements": {"en": ["Python"], "ar": ["بايثون"]},
            "responsibilities": {"en": ["Ship features"], "ar": ["إطلاق الميزات"]},
        }
        payload.update(overrides)
        return payload
    return make


@pytest.fixture
def application_payload():
    def make(career_id, **overrides):
        payload = {
            "careerId": career_id,
            "fullName": "Khalid Hassan",
            "email": "khalid@example.com",
            "phone": "+974 6666 7777",
            "coverLetter": "I have five years of experience building Python web services and APIs.",
            "linkedinUrl": "https://www.linkedin.com/in/khalid",
            "yearsOfExperience": "5",
        }
        payload.update(overrides)
        return payload
    return make
