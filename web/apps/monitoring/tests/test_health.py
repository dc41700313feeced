import pytest
from django.db import DatabaseError


@pytest.mark.django_db
def test_health_reports_db_ok(client):
    r = client.get("/health/")
    assert r.status_code == 200
    assert r.json() == {"ok": True, "components": {"db": {"ok": True}}}


def test_health_returns_503_when_db_fails(client, monkeypatch):
    class BrokenConnection:
        def cursor(self):
            raise DatabaseError("down")

    monkeypatch.setattr("apps.monitoring.api.connection", BrokenConnection())
    r = client.get("/health/")
    assert r.status_code == 503
    assert r.json()["components"]["db"]["ok"] is False
