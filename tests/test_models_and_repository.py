import pytest
from sqlalchemy.exc import IntegrityError

from qcheck.core.config import Settings
from qcheck.db.init_db import DEMO_COMPANIES, seed_demo_data
from qcheck.db.session import SessionLocal, normalize_database_url
from qcheck.models.company import Company, CompanyStatus
from qcheck.repositories import company as company_repo


def test_company_equality_is_by_id():
    assert Company(id=1, name="A", status=CompanyStatus.ACTIVE) == Company(id=1, name="B", status=CompanyStatus.SUSPENDED)
    assert Company(id=1, name="A", status=CompanyStatus.ACTIVE) != Company(id=2, name="A", status=CompanyStatus.ACTIVE)
    unsaved = Company(name="A", status=CompanyStatus.ACTIVE)
    assert unsaved != Company(name="A", status=CompanyStatus.ACTIVE)
    assert unsaved == unsaved
    assert hash(unsaved) == 0
    assert hash(Company(id=7, name="A", status=CompanyStatus.ACTIVE)) == hash(7)


def test_company_repr():
    c = Company(id=3, name="Acme", status=CompanyStatus.INACTIVE)
    assert repr(c) == "Company(id=3, name='Acme', status=INACTIVE)"


def test_status_stored_as_name(db, seed):
    (c,) = seed(("Acme", CompanyStatus.SUSPENDED))
    raw = db.connection().exec_driver_sql("SELECT status FROM company WHERE id = ?", (c.id,)).scalar()
    assert raw == "SUSPENDED"


def test_id_assigned_by_storage(seed):
    a, b = seed(("A", CompanyStatus.ACTIVE), ("B", CompanyStatus.ACTIVE))
    assert a.id is not None and b.id is not None
    assert a.id != b.id


def test_repository_acme_scenario(db, acme):
    assert company_repo.find_by_name_containing(db, "ACME") == []
    assert set(company_repo.find_by_name_ignore_case(db, "ACME")) == set(acme)
    assert company_repo.count_by_status(db, CompanyStatus.ACTIVE) == 1
    assert company_repo.count_by_status(db, CompanyStatus.SUSPENDED) == 0
    assert company_repo.exists_by_name(db, "Acme") is True
    assert company_repo.exists_by_name(db, "ACME") is False
    assert company_repo.find_by_name(db, "acme Labs") == acme[1]


def test_repository_count_sums(db, seed):
    seed(("A", CompanyStatus.ACTIVE), ("B", CompanyStatus.INACTIVE), ("C", CompanyStatus.INACTIVE))
    total = company_repo.count(db)
    assert total == 3
    assert sum(company_repo.count_by_status(db, s) for s in CompanyStatus) == total
    assert company_repo.count_active(db) == 1


def test_repository_empty(db):
    assert company_repo.find_all(db) == []
    assert company_repo.count(db) == 0
    assert company_repo.find_by_id(db, 1) is None
    assert company_repo.find_by_name(db, "x") is None
    assert company_repo.exists_by_name(db, "x") is False


def test_seed_demo_data_is_idempotent(db):
    assert seed_demo_data(SessionLocal) == len(DEMO_COMPANIES)
    assert seed_demo_data(SessionLocal) == 0
    assert company_repo.count(db) == len(DEMO_COMPANIES)


@pytest.mark.parametrize(
    "url,expected",
    [
        ("postgres://u:p@h/db", "postgresql+psycopg://u:p@h/db"),
        ("postgresql://u:p@h/db", "postgresql+psycopg://u:p@h/db"),
        ("postgresql+psycopg://u:p@h/db", "postgresql+psycopg://u:p@h/db"),
        ("sqlite:///x.db", "sqlite:///x.db"),
    ],
)
def test_normalize_database_url(monkeypatch, url, expected):
    monkeypatch.setattr("importlib.util.find_spec", lambda name: None)
    assert normalize_database_url(url) == expected


def test_settings_cors_origins():
    s = Settings(CORS_ORIGINS="http://localhost:4200, https://qcheck.example.com")
    assert set(s.cors_origins) == {
        "http://localhost:4200",
        "http://127.0.0.1:4200",
        "https://qcheck.example.com",
    }
    assert Settings(CORS_ORIGINS='["http://a.example"]').cors_origins == ["http://a.example"]
    assert Settings(DB_NAME="warehouse").db_name == "warehouse"


def test_status_check_constraint_in_created_schema(db):
    with pytest.raises(IntegrityError):
        db.connection().exec_driver_sql("INSERT INTO company (name, status) VALUES ('X', 'DELETED')")
    db.rollback()


@pytest.mark.parametrize("company_id", [2**31, -(2**31) - 1, 2**63, 10**20])
def test_find_by_id_outside_column_range(db, seed, company_id):
    seed(("A", CompanyStatus.ACTIVE))
    assert company_repo.find_by_id(db, company_id) is None
