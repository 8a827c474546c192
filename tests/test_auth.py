from datetime import timedelta

import pytest

from qds.core.config import Settings, settings
from qds.core.security import password_matches, resolve_admin_session
from qds.models import AdminSession, Service
from qds.models.common import utcnow


def is_admin(client):
    return client.get("/api/admin/status").json()["isAdmin"]


class TestLogin:
    def test_login_status_logout_cycle(self, client):
        assert is_admin(client) is False

        response = client.post("/api/admin/login", json={"password": settings.ADMIN_PASSWORD})
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Login successful"}
        assert is_admin(client) is True

        response = client.post("/api/admin/logout")
        assert response.json() == {"success": True, "message": "Logout successful"}
        assert is_admin(client) is False

    def test_logout_twice_is_harmless(self, admin_client):
        assert admin_client.post("/api/admin/logout").status_code == 200
        assert admin_client.post("/api/admin/logout").status_code == 200

    def test_wrong_password(self, client, db):
        response = client.post("/api/admin/login", json={"password": "guess"})
        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Invalid password"}
        assert is_admin(client) is False
        assert db.query(AdminSession).count() == 0

    def test_missing_admin_password_is_a_server_error(self, client, monkeypatch):
        monkeypatch.setattr(settings, "ADMIN_PASSWORD", None)
        response = client.post("/api/admin/login", json={"password": "anything"})
        assert response.status_code == 500
        assert response.json()["message"] == "Server configuration error"

    def test_relogin_replaces_the_session(self, admin_client, db):
        admin_client.post("/api/admin/login", json={"password": settings.ADMIN_PASSWORD})
        assert db.query(AdminSession).count() == 1

    def test_logout_removes_the_server_side_session(self, admin_client, db):
        admin_client.post("/api/admin/logout")
        assert db.query(AdminSession).count() == 0

    def test_expired_session_is_anonymous(self, admin_client, db):
        record = db.query(AdminSession).one()
        record.expires_at = utcnow() - timedelta(minutes=1)
        db.commit()

        assert is_admin(admin_client) is False
        assert admin_client.get("/api/admin/contact").status_code == 401
        assert db.query(AdminSession).count() == 0


class TestAdminGuard:
    @pytest.mark.parametrize("method, path", [
        ("get", "/api/admin/contact"),
        ("get", "/api/admin/contact/some-id"),
        ("get", "/api/admin/portfolio"),
        ("put", "/api/admin/portfolio/some-id"),
        ("delete", "/api/admin/portfolio/some-id"),
        ("get", "/api/admin/services"),
        ("post", "/api/admin/services"),
        ("put", "/api/admin/testimonials/some-id"),
        ("delete", "/api/admin/testimonials/some-id"),
        ("get", "/api/admin/blog"),
        ("delete", "/api/admin/blog/some-id"),
        ("get", "/api/admin/careers"),
        ("post", "/api/admin/careers"),
        ("get", "/api/admin/job-applications"),
        ("patch", "/api/admin/job-applications/some-id/status"),
        ("get", "/api/admin/analytics"),
        ("get", "/api/admin/analytics/summary"),
    ])
    def test_requires_login(self, client, method, path):
        kwargs = {"json": {}} if method in ("post", "put", "patch") else {}
        response = getattr(client, method)(path, **kwargs)
        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized. Admin access required."}

    def test_anonymous_calls_change_nothing(self, admin_client, client, db, service_payload):
        service = admin_client.post("/api/admin/services", json=service_payload()).json()

        assert client.post("/api/admin/services", json=service_payload()).status_code == 401
        assert client.put(
            f"/api/admin/services/{service['id']}", json={"isActive": False}
        ).status_code == 401
        assert client.delete(f"/api/admin/services/{service['id']}").status_code == 401

        rows = db.query(Service).all()
        assert len(rows) == 1
        assert rows[0].is_active is True


class TestSecurityHelpers:
    def test_password_matches(self):
        assert password_matches("s3cret", "s3cret")
        assert not password_matches("s3cret", "s3cret ")
        assert not password_matches("", "s3cret")

    def test_resolve_unknown_or_empty_session(self, db):
        assert resolve_admin_session(db, None) is None
        assert resolve_admin_session(db, "missing") is None

    def test_resolve_honours_expiry(self, db):
        record = AdminSession(expires_at=utcnow() + timedelta(hours=1))
        db.add(record)
        db.commit()

        assert resolve_admin_session(db, record.id) is not None
        later = utcnow() + timedelta(hours=2)
        assert resolve_admin_session(db, record.id, now=later) is None
        assert db.query(AdminSession).count() == 0


class TestSettings:
    def test_production_requires_secrets(self):
        config = Settings(_env_file=None, APP_ENV="production", ADMIN_PASSWORD=None,
                          SESSION_SECRET=None)
        with pytest.raises(RuntimeError) as exc:
            config.validate_security()
        assert "ADMIN_PASSWORD" in str(exc.value)
        assert "SESSION_SECRET" in str(exc.value)

    def test_production_with_secrets(self):
        config = Settings(_env_file=None, APP_ENV="production", ADMIN_PASSWORD="pw",
                          SESSION_SECRET="secret")
        assert config.is_production
        config.validate_security()

    def test_development_tolerates_missing_secrets(self):
        config = Settings(_env_file=None, APP_ENV="development", ADMIN_PASSWORD=None,
                          SESSION_SECRET=None)
        config.validate_security()
