# api/v1/records.py
from __future__ import annotations
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from config import settings
from core import history
from core.models.meal import MealRecord, MealSlot, RiskLevel
from services import store
from services.db import get_session
from api.v1.schemas import BulkDeleteIn, BulkDeleteOut, RecordCreate, RecordUpdate

router = APIRouter()


@router.get(
    "",
    response_model=list[MealRecord],
    summary="List saved meal records, newest first",
)
async def list_records(
    risk: RiskLevel | None = Query(None, description="exact risk label"),
    meal_type: MealSlot | None = None,
    q: str | None = Query(None, description="matches food, result text or date"),
    db: AsyncSession = Depends(get_session),
) -> list[MealRecord]:
    records = await store.load_history(db)
    if risk is not None:
        records = history.filter_by_risk(records, risk)
    if meal_type is not None:
        records = history.filter_by_meal_type(records, meal_type)
    if q:
        records = history.search(records, q, settings.tz)
    return records


@router.post(
    "",
    response_model=MealRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Save one analysed food item as a meal record",
)
async def create_record(
    body: RecordCreate,
    db: AsyncSession = Depends(get_session),
) -> MealRecord:
    record = history.build_record(body.item, body.meal_type, body.date, tz=settings.tz)
    records = await store.load_history(db)
    await store.save_history(db, history.prepend(records, record))
    return record


@router.post(
    "/bulk-delete",
    response_model=BulkDeleteOut,
    summary="Delete several records by id",
)
async def bulk_delete(
    body: BulkDeleteIn,
    db: AsyncSession = Depends(get_session),
) -> BulkDeleteOut:
    records = await store.load_history(db)
    kept = history.delete_records(records, body.ids)
    if len(kept) != len(records):
        await store.save_history(db, kept)
    return BulkDeleteOut(deleted=len(records) - len(kept))


@router.delete(
    "",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Clear the whole history",
)
async def clear_records(db: AsyncSession = Depends(get_session)) -> Response:
    await store.clear_history(db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{record_id}", response_model=MealRecord)
async def fetch_record(
    record_id: str,
    db: AsyncSession = Depends(get_session),
) -> MealRecord:
    rec = history.find_record(await store.load_history(db), record_id)
    if rec is None:
        raise HTTPException(status_code=404, detail="Record not found")
    return rec


@router.patch("/{record_id}", response_model=MealRecord)
async def update_record(
    record_id: str,
    body: RecordUpdate,
    db: AsyncSession = Depends(get_session),
) -> MealRecord:
    records = await store.load_history(db)
    if history.find_record(records, record_id) is None:
        raise HTTPException(status_code=404, detail="Record not found")

    merged = history.merge_record(records, record_id, body.model_dump(exclude_unset=True))
    await store.save_history(db, merged)
    return history.find_record(merged, record_id)


@router.delete(
    "/{record_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a meal record by its ID",
)
async def delete_record(
    record_id: str,
    db: AsyncSession = Depends(get_session),
) -> Response:
    records = await store.load_history(db)
    kept = history.delete_record(records, record_id)
    if len(kept) == len(records):
        raise HTTPException(status_code=404, detail="Record not found")
    await store.save_history(db, kept)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
