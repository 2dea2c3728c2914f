import logging

from sqlalchemy import select, func

from qcheck.db.session import engine, SessionLocal
from qcheck.models import company  # noqa: F401
from qcheck.models.base import Base
from qcheck.models.company import Company, CompanyStatus

logger = logging.getLogger(__name__)

DEMO_COMPANIES = [
    ("Acme", CompanyStatus.ACTIVE),
    ("acme Labs", CompanyStatus.INACTIVE),
    ("Globex", CompanyStatus.ACTIVE),
    ("Initech", CompanyStatus.SUSPENDED),
    ("Umbrella", CompanyStatus.INACTIVE),
]

def create_tables(bind=None):
    Base.metadata.create_all(bind=bind or engine)

def seed_demo_data(session_factory=SessionLocal) -> int:
    """Insert the demo companies if the table is empty. Returns the number inserted."""
    db = session_factory()
    try:
        if db.scalar(select(func.count(Company.id))):
            return 0
        db.add_all([Company(name=name, status=status) for name, status in DEMO_COMPANIES])
        db.commit()
        logger.info("Seeded %d demo companies", len(DEMO_COMPANIES))
        return len(DEMO_COMPANIES)
    finally:
        db.close()
