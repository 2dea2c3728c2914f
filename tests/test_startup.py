import asyncio
from functools import partial

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

import qcheck.main
from qcheck.core.config import settings
from qcheck.db.init_db import seed_demo_data
from qcheck.main import app


def test_startup_survives_unreachable_storage_when_seeding(monkeypatch, tmp_path):
    broken = create_engine(f"sqlite:///{tmp_path / 'missing' / 'db.sqlite'}")
    monkeypatch.setattr(settings, "env", "dev")
    monkeypatch.setattr(settings, "seed_demo_data", True)
    monkeypatch.setattr(settings, "startup_db_check", False)
    monkeypatch.setattr(qcheck.main, "seed_demo_data", partial(seed_demo_data, sessionmaker(bind=broken)))

    with TestClient(app) as client:
        assert client.get("/health/").status_code == 200
    broken.dispose()


def test_startup_schedules_diagnostic_once(monkeypatch):
    calls = []

    def fake_task(delay):
        calls.append(delay)
        return asyncio.sleep(0)

    monkeypatch.setattr(settings, "startup_db_check", True)
    monkeypatch.setattr(settings, "startup_db_check_delay", 0.0)
    monkeypatch.setattr(qcheck.main, "startup_diagnostic_task", fake_task)

    with TestClient(app) as client:
        assert client.get("/health/").status_code == 200
    assert calls == [0.0]


def test_startup_skips_diagnostic_when_disabled(monkeypatch):
    calls = []
    monkeypatch.setattr(settings, "startup_db_check", False)
    monkeypatch.setattr(qcheck.main, "startup_diagnostic_task", lambda delay: calls.append(delay))

    with TestClient(app):
        pass
    assert calls == []
