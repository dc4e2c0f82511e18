"""Timecard ORM — persists one worked interval of an employee.

Invariants:
    - emp_id references employees.id (ON DELETE CASCADE)
    - start_time/end_time are naive UTC timestamps; end_time > start_time is a
      business rule, enforced before insert
"""

from datetime import datetime

from sqlalchemy import String, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from company_services.db.base import Base


class TimecardRecord(Base):
    """Timecard row."""
    __tablename__ = "timecards"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    company: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    emp_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("employees.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    start_time: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_time: Mapped[datetime] = mapped_column(DateTime, nullable=False)
