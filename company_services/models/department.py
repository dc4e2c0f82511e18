"""Department ORM — persists a department of a company.

Invariants:
    - id is an autoincrement integer primary key (assigned on insert, never reused;
      sqlite_autoincrement so SQLite does not recycle the highest deleted id)
    - dept_no is unique across ALL companies (DB constraint mirrors the business rule)

Design Decisions:
    - company stored on every row: one table serves every tenant
"""

from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column

from company_services.db.base import Base


class DepartmentRecord(Base):
    """Department row."""
    __tablename__ = "departments"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    company: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    dept_name: Mapped[str] = mapped_column(String(100), nullable=False)
    dept_no: Mapped[str] = mapped_column(String(20), nullable=False, unique=True)
    location: Mapped[str] = mapped_column(String(100), nullable=False)
