"""Timecard Routes — /CompanyServices/timecard(s)."""

from fastapi import APIRouter, Depends, Query, status

from company_services.api.dependencies import get_timecard_service
from company_services.schemas.timecard import (
    TimecardCreate, TimecardResponse, TimecardUpdate,
)
from company_services.services.timecard_service import TimecardService

router = APIRouter(prefix="/CompanyServices", tags=["timecards"])


@router.get("/timecard")
async def get_timecard(
    company: str | None = Query(None),
    timecard_id: int | None = Query(None),
    service: TimecardService = Depends(get_timecard_service),
):
    timecard = await service.get_timecard(company, timecard_id)
    return {"success": TimecardResponse.from_entity(timecard).model_dump()}


@router.get("/timecards")
async def list_timecards(
    company: str | None = Query(None),
    emp_id: int | None = Query(None),
    service: TimecardService = Depends(get_timecard_service),
):
    timecards = await service.list_timecards(company, emp_id)
    return {
        "success": [TimecardResponse.from_entity(t).model_dump() for t in timecards],
    }


@router.post("/timecard", status_code=status.HTTP_201_CREATED)
async def create_timecard(
    body: TimecardCreate,
    service: TimecardService = Depends(get_timecard_service),
):
    timecard = await service.create_timecard(**body.model_dump())
    return {"success": TimecardResponse.from_entity(timecard).model_dump()}


@router.put("/timecard")
async def update_timecard(
    body: TimecardUpdate,
    service: TimecardService = Depends(get_timecard_service),
):
    timecard = await service.update_timecard(**body.model_dump())
    return {"success": TimecardResponse.from_entity(timecard).model_dump()}


@router.delete("/timecard")
async def delete_timecard(
    company: str | None = Query(None),
    timecard_id: int | None = Query(None),
    service: TimecardService = Depends(get_timecard_service),
):
    return {"success": await service.delete_timecard(company, timecard_id)}
