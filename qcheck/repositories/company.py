"""Read-only queries over the ``company`` table.

Every function takes a request-scoped :class:`~sqlalchemy.orm.Session` and
issues exactly one statement. Substring searches match the keyword literally
(``%`` and ``_`` are escaped), so an empty keyword matches every row.
"""
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from qcheck.models.company import Company, CompanyStatus

# Signed range of the INTEGER id column
ID_MIN = -(2**31)
ID_MAX = 2**31 - 1


def find_all(db: Session) -> List[Company]:
    return list(db.scalars(select(Company)))


def find_by_id(db: Session, company_id: int) -> Optional[Company]:
    # Ids the column cannot hold can never match
    if not ID_MIN <= company_id <= ID_MAX:
        return None
    return db.get(Company, company_id)


def find_by_status(db: Session, status: CompanyStatus) -> List[Company]:
    return list(db.scalars(select(Company).where(Company.status == status)))


def find_by_status_not(db: Session, status: CompanyStatus) -> List[Company]:
    return list(db.scalars(select(Company).where(Company.status != status)))


def find_by_name(db: Session, name: str) -> Optional[Company]:
    """Exact, case-sensitive name match. Names are not unique; the lowest id wins."""
    return db.scalars(select(Company).where(Company.name == name).order_by(Company.id).limit(1)).first()


def find_by_name_containing(db: Session, keyword: str) -> List[Company]:
    return list(db.scalars(select(Company).where(Company.name.contains(keyword, autoescape=True))))


def find_by_name_containing_and_status(db: Session, keyword: str, status: CompanyStatus) -> List[Company]:
    q = select(Company).where(Company.name.contains(keyword, autoescape=True), Company.status == status)
    return list(db.scalars(q))


def find_by_name_ignore_case(db: Session, keyword: str) -> List[Company]:
    return list(db.scalars(select(Company).where(Company.name.icontains(keyword, autoescape=True))))


def find_all_order_by_name(db: Session) -> List[Company]:
    return list(db.scalars(select(Company).order_by(Company.name.asc(), Company.id.asc())))


def find_by_status_order_by_name(db: Session, status: CompanyStatus) -> List[Company]:
    q = select(Company).where(Company.status == status).order_by(Company.name.asc(), Company.id.asc())
    return list(db.scalars(q))


def find_active(db: Session) -> List[Company]:
    return find_by_status(db, CompanyStatus.ACTIVE)


def count(db: Session) -> int:
    return db.scalar(select(func.count(Company.id))) or 0


def count_by_status(db: Session, status: CompanyStatus) -> int:
    return db.scalar(select(func.count(Company.id)).where(Company.status == status)) or 0


def count_by_name_containing(db: Session, keyword: str) -> int:
    q = select(func.count(Company.id)).where(Company.name.contains(keyword, autoescape=True))
    return db.scalar(q) or 0


def count_active(db: Session) -> int:
    return count_by_status(db, CompanyStatus.ACTIVE)


def exists_by_name(db: Session, name: str) -> bool:
    return bool(db.scalar(select(select(Company.id).where(Company.name == name).exists())))
