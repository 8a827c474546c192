from concurrent.futures import ThreadPoolExecutor
from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from qds.core.database import Base
from qds.core.errors import StoreError
from qds.models import Analytics, Counter
from qds.services.analytics import analytics_recorder


class TestAnalyticsRecorder:
    def test_increments_add_up(self, db):
        day = date(2024, 5, 1)
        for _ in range(5):
            analytics_recorder.increment(db, Counter.PAGE_VIEWS, day)

        row = db.query(Analytics).filter_by(date=day).one()
        assert row.page_views == 5
        assert row.whatsapp_clicks == 0
        assert row.contact_submissions == 0

    def test_concurrent_increments_are_not_lost(self, tmp_path):
        engine = create_engine(
            f"sqlite:///{tmp_path / 'analytics.db'}",
            connect_args={"check_same_thread": False, "timeout": 30},
        )
        Base.metadata.create_all(bind=engine)
        make_session = sessionmaker(bind=engine)

        def bump(_):
            session = make_session()
            try:
                return analytics_recorder.record(session, Counter.PAGE_VIEWS)
            finally:
                session.close()

        try:
            with ThreadPoolExecutor(max_workers=8) as pool:
                results = list(pool.map(bump, range(100)))

            assert all(results)
            session = make_session()
            try:
                assert session.query(Analytics).one().page_views == 100
            finally:
                session.close()
        finally:
            engine.dispose()

    def test_one_row_per_day(self, db):
        analytics_recorder.increment(db, Counter.WHATSAPP_CLICKS, date(2024, 5, 1))
        analytics_recorder.increment(db, Counter.CONTACT_SUBMISSIONS, date(2024, 5, 1))
        analytics_recorder.increment(db, Counter.PAGE_VIEWS, date(2024, 5, 2))

        assert db.query(Analytics).count() == 2
        first = db.query(Analytics).filter_by(date=date(2024, 5, 1)).one()
        assert (first.whatsapp_clicks, first.contact_submissions) == (1, 1)

    def test_list_days_newest_first_within_range(self, db):
        for day in (1, 2, 3):
            analytics_recorder.increment(db, Counter.PAGE_VIEWS, date(2024, 5, day))

        days = analytics_recorder.list_days(db, start=date(2024, 5, 2))
        assert [row.date for row in days] == [date(2024, 5, 3), date(2024, 5, 2)]

    def test_totals(self, db):
        analytics_recorder.increment(db, Counter.PAGE_VIEWS, date(2024, 5, 1))
        analytics_recorder.increment(db, Counter.PAGE_VIEWS, date(2024, 5, 2))
        analytics_recorder.increment(db, Counter.WHATSAPP_CLICKS, date(2024, 5, 2))

        assert analytics_recorder.totals(db) == {
            "days": 2,
            "page_views": 2,
            "whatsapp_clicks": 1,
            "contact_submissions": 0,
        }

    def test_totals_on_empty_table(self, db):
        assert analytics_recorder.totals(db)["page_views"] == 0

    def test_record_swallows_failures(self, db, monkeypatch):
        def broken(*args, **kwargs):
            raise StoreError("database unavailable")

        monkeypatch.setattr(analytics_recorder, "increment", broken)
        assert analytics_recorder.record(db, Counter.PAGE_VIEWS) is False


class TestTrackingEndpoints:
    @pytest.mark.parametrize("path, column", [
        ("/api/analytics/pageview", "page_views"),
        ("/api/analytics/whatsapp", "whatsapp_clicks"),
        ("/api/analytics/contact", "contact_submissions"),
    ])
    def test_each_endpoint_bumps_its_counter(self, client, db, path, column):
        for _ in range(3):
            response = client.post(path)
            assert response.status_code == 200
            assert response.json() == {"success": True}

        row = db.query(Analytics).one()
        assert getattr(row, column) == 3

    def test_failure_still_answers_200(self, client, monkeypatch):
        def broken(*args, **kwargs):
            raise StoreError("database unavailable")

        monkeypatch.setattr(analytics_recorder, "increment", broken)
        response = client.post("/api/analytics/pageview")
        assert response.status_code == 200
        assert response.json() == {"success": False}

    def test_admin_views(self, admin_client, client):
        client.post("/api/analytics/pageview")
        client.post("/api/analytics/pageview")
        client.post("/api/analytics/whatsapp")

        days = admin_client.get("/api/admin/analytics").json()
        assert len(days) == 1
        assert days[0]["pageViews"] == 2
        assert days[0]["whatsappClicks"] == 1

        summary = admin_client.get("/api/admin/analytics/summary").json()
        assert summary == {
            "days": 1,
            "pageViews": 2,
            "whatsappClicks": 1,
            "contactSubmissions": 0,
        }

    def test_reversed_range_is_rejected(self, admin_client):
        response = admin_client.get(
            "/api/admin/analytics", params={"start": "2024-06-01", "end": "2024-05-01"}
        )
        assert response.status_code == 400
