import os
import tempfile
from pathlib import Path

# Must be set before anything imports qcheck.db.session
_TMP_DIR = tempfile.mkdtemp(prefix="qcheck-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{Path(_TMP_DIR) / 'test.db'}"
os.environ["STARTUP_DB_CHECK"] = "false"
os.environ["ENV"] = "test"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import delete

from qcheck.db.init_db import create_tables
from qcheck.db.session import SessionLocal, engine
from qcheck.main import app
from qcheck.models.company import Company, CompanyStatus

create_tables(engine)


@pytest.fixture
def db():
    session = SessionLocal()
    session.execute(delete(Company))
    session.commit()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db):
    return TestClient(app)


@pytest.fixture
def seed(db):
    def _seed(*rows):
        companies = [Company(name=name, status=status) for name, status in rows]
        db.add_all(companies)
        db.commit()
        for c in companies:
            db.refresh(c)
        return companies
    return _seed


@pytest.fixture
def acme(seed):
    return seed(("Acme", CompanyStatus.ACTIVE), ("acme Labs", CompanyStatus.INACTIVE))
