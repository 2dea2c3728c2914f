import enum

from sqlalchemy import String, Integer, Enum
from sqlalchemy.orm import Mapped, mapped_column

from qcheck.models.base import Base

class CompanyStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    SUSPENDED = "SUSPENDED"

class Company(Base):
    __tablename__ = "company"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    # Stored as the member name (VARCHAR), not a native DB enum
    status: Mapped[CompanyStatus] = mapped_column(
        Enum(
            CompanyStatus,
            native_enum=False,
            length=20,
            validate_strings=True,
            create_constraint=True,
            name="ck_company_status",
        ),
        nullable=False,
    )

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Company):
            return NotImplemented
        return self.id is not None and self.id == other.id

    def __hash__(self):
        return hash(self.id) if self.id is not None else 0

    def __repr__(self):
        return f"Company(id={self.id}, name={self.name!r}, status={self.status.value if self.status else None})"
