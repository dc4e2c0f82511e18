"""Field Rules — pure input checks shared by every create/update/delete pipeline.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Each rule raises ValidationError on violation and returns None (or the parsed
      value) on success
    - Timestamps come back timezone-naive in UTC so start/end always compare

Design Decisions:
    - Exceptions over error dicts: the orchestration layer aborts on the first failure
      and the HTTP layer renders the error unchanged
    - Parsers return the parsed value: callers store exactly what was validated
"""

import math
import re
from datetime import date, datetime, timezone

from company_services.core.errors import ValidationError

WEEKEND_DAYS = (5, 6)  # date.weekday(): Saturday, Sunday

# Mirrors the String(n) column sizes in models/
MAX_LENGTHS = {
    "dept_name": 100,
    "dept_no": 20,
    "location": 100,
    "emp_name": 100,
    "emp_no": 20,
    "job": 100,
}


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def require_fields(values: dict[str, object]) -> None:
    """Rule: every named field is present and non-blank. Reports all missing at once."""
    missing = [name for name, value in values.items() if _is_blank(value)]
    if missing:
        raise ValidationError(
            f"Missing required fields: {', '.join(missing)}", field=missing[0],
        )


def check_tenant(company: str, tenant: str) -> None:
    """Rule: writes and reads are gated on the single configured company."""
    if company != tenant:
        raise ValidationError(
            f"Invalid company '{company}'. Must be '{tenant}'.", field="company",
        )


def check_max_lengths(values: dict[str, str]) -> None:
    """Rule: text fields fit their storage columns. Reports the first one too long."""
    for name, value in values.items():
        limit = MAX_LENGTHS[name]
        if isinstance(value, str) and len(value) > limit:
            raise ValidationError(
                f"{name} must be at most {limit} characters, got {len(value)}",
                field=name,
            )


def check_positive_id(value: object, field: str) -> None:
    """Rule: ids are positive integers."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(
            f"{field} must be a positive integer, got {value!r}", field=field,
        )


def check_salary(value: object) -> None:
    """Rule: salary is a finite, non-negative number."""
    if (
        isinstance(value, bool)
        or not isinstance(value, (int, float))
        or not math.isfinite(value)
        or value < 0
    ):
        raise ValidationError(
            f"salary must be a non-negative number, got {value!r}", field="salary",
        )


def check_emp_no_format(emp_no: str, pattern: str) -> None:
    """Rule: emp_no matches the configured pattern."""
    if not isinstance(emp_no, str) or not re.fullmatch(pattern, emp_no):
        raise ValidationError(
            f"emp_no '{emp_no}' has an invalid format", field="emp_no",
        )


def parse_hire_date(value: object) -> date:
    """Rule: hire_date is a calendar date (YYYY-MM-DD) falling Monday-Friday."""
    if isinstance(value, datetime):
        parsed = value.date()
    elif isinstance(value, date):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = date.fromisoformat(value.strip())
        except ValueError:
            raise ValidationError(
                f"hire_date '{value}' is not a valid date (expected YYYY-MM-DD)",
                field="hire_date",
            )
    else:
        raise ValidationError(
            f"hire_date must be a date string, got {value!r}", field="hire_date",
        )
    if parsed.weekday() in WEEKEND_DAYS:
        raise ValidationError(
            f"hire_date {parsed.isoformat()} falls on a "
            f"{parsed.strftime('%A')}; hire dates must be Monday-Friday",
            field="hire_date",
        )
    return parsed


def parse_timestamp(value: object, field: str) -> datetime:
    """Rule: timestamp is present and ISO 8601 (YYYY-MM-DD HH:MM[:SS])."""
    if _is_blank(value):
        raise ValidationError(f"{field} is required", field=field)
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            raise ValidationError(
                f"{field} '{value}' is not a valid timestamp "
                f"(expected YYYY-MM-DD HH:MM:SS)",
                field=field,
            )
    else:
        raise ValidationError(
            f"{field} must be a timestamp string, got {value!r}", field=field,
        )
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def check_end_after_start(start: datetime, end: datetime) -> None:
    """Rule: end_time is strictly after start_time."""
    if end <= start:
        raise ValidationError(
            f"end_time {end.isoformat(sep=' ')} must be after "
            f"start_time {start.isoformat(sep=' ')}",
            field="end_time",
        )
