"""Initial schema — departments, employees, timecards.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "departments",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("company", sa.String(50), nullable=False, index=True),
        sa.Column("dept_name", sa.String(100), nullable=False),
        sa.Column("dept_no", sa.String(20), nullable=False, unique=True),
        sa.Column("location", sa.String(100), nullable=False),
        sqlite_autoincrement=True,
    )

    op.create_table(
        "employees",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("company", sa.String(50), nullable=False, index=True),
        sa.Column("emp_name", sa.String(100), nullable=False),
        sa.Column("emp_no", sa.String(20), nullable=False, unique=True),
        sa.Column("hire_date", sa.Date, nullable=False),
        sa.Column("job", sa.String(100), nullable=False),
        sa.Column("salary", sa.Float, nullable=False),
        sa.Column("dept_id", sa.Integer, sa.ForeignKey("departments.id"), nullable=False),
        sa.Column("mng_id", sa.Integer, nullable=False, server_default="0"),
        sqlite_autoincrement=True,
    )

    op.create_table(
        "timecards",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("company", sa.String(50), nullable=False, index=True),
        sa.Column(
            "emp_id", sa.Integer,
            sa.ForeignKey("employees.id", ondelete="CASCADE"),
            nullable=False, index=True,
        ),
        sa.Column("start_time", sa.DateTime, nullable=False),
        sa.Column("end_time", sa.DateTime, nullable=False),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    op.drop_table("timecards")
    op.drop_table("employees")
    op.drop_table("departments")
