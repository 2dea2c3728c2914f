from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
import importlib.util
from qcheck.core.config import settings

SQLALCHEMY_DATABASE_URL = settings.database_url
if not SQLALCHEMY_DATABASE_URL:
    raise RuntimeError("DATABASE_URL environment variable must be set")


def normalize_database_url(url: str) -> str:
    """Point plain Postgres URLs at the psycopg (v3) driver when psycopg2 is absent.

    SQLAlchemy loads psycopg2 for 'postgresql://' (and legacy 'postgres://'),
    but only psycopg[binary] is a dependency of this project.
    """
    try:
        psycopg2_present = importlib.util.find_spec("psycopg2") is not None  # type: ignore
    except (ImportError, ValueError):  # pragma: no cover
        psycopg2_present = False
    if psycopg2_present or not url.startswith(("postgres://", "postgresql://")) or "+psycopg" in url:
        return url
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://"):]
    return url.replace("postgresql://", "postgresql+psycopg://", 1)


def build_engine(url: str, echo: bool = False) -> Engine:
    url = normalize_database_url(url)
    if not url.startswith("sqlite"):
        return create_engine(url, echo=echo, pool_pre_ping=True)

    # SQLite is used for tests and local runs. Connections cross FastAPI's
    # threadpool, and LIKE must stay case-sensitive as it is on Postgres.
    sqlite_engine = create_engine(url, echo=echo, connect_args={"check_same_thread": False})

    @event.listens_for(sqlite_engine, "connect")
    def _sqlite_pragmas(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA case_sensitive_like = ON")
        cursor.close()

    return sqlite_engine


engine = build_engine(SQLALCHEMY_DATABASE_URL, echo=settings.sql_echo)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
