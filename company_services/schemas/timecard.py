"""Timecard Schemas — Pydantic models for the /timecard API boundary.

Invariants:
    - start_time/end_time travel as ISO 8601 strings; responses render them as
      "YYYY-MM-DD HH:MM:SS"
    - Responses name the id `timecard_id`
"""

from datetime import datetime

from pydantic import BaseModel, field_serializer

from company_services.core.entities import Timecard


class TimecardCreate(BaseModel):
    """POST /timecard body."""
    company: str | None = None
    emp_id: int | None = None
    start_time: str | None = None
    end_time: str | None = None


class TimecardUpdate(TimecardCreate):
    """PUT /timecard body — full record, replaces every field."""
    timecard_id: int | None = None


class TimecardResponse(BaseModel):
    timecard_id: int
    company: str
    emp_id: int
    start_time: datetime
    end_time: datetime

    @field_serializer("start_time", "end_time")
    def _format_timestamp(self, value: datetime) -> str:
        return value.isoformat(sep=" ", timespec="seconds")

    @classmethod
    def from_entity(cls, timecard: Timecard) -> "TimecardResponse":
        return cls(
            timecard_id=timecard.id,
            company=timecard.company,
            emp_id=timecard.emp_id,
            start_time=timecard.start_time,
            end_time=timecard.end_time,
        )
