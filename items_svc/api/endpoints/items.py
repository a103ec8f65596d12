import time
from typing import Sequence

from fastapi import APIRouter, BackgroundTasks, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from items_svc.core.exceptions import NotFoundError, RequestValidationFailed
from items_svc.crud.crud_item import crud_item
from items_svc.db.session import get_db
from items_svc.schemas.item import Item, ItemCreated, ItemPayload, Message
from items_svc.services.metrics import MetricsEmitter, get_metrics_emitter, record_latency

router = APIRouter()


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


@router.get("", response_model=list[Item])
async def read_items(
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
    metrics: MetricsEmitter = Depends(get_metrics_emitter),
) -> Sequence[Item]:
    """Retrieve all items in store order."""
    start = time.perf_counter()
    items = await crud_item.get_multi(db)
    await record_latency(metrics, background_tasks, "SELECT", _elapsed_ms(start))
    return items


@router.post("", response_model=ItemCreated, status_code=status.HTTP_201_CREATED)
async def create_item(
    *,
    item_in: ItemPayload,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
    metrics: MetricsEmitter = Depends(get_metrics_emitter),
) -> ItemCreated:
    """Create new item."""
    if not item_in.has_required_fields():
        raise RequestValidationFailed()
    start = time.perf_counter()
    item_id = await crud_item.create(db, obj_in=item_in)
    await record_latency(metrics, background_tasks, "INSERT", _elapsed_ms(start))
    return ItemCreated(message="Item created successfully", id=item_id)


@router.put("/{item_id}", response_model=Message)
async def update_item(
    *,
    item_id: int,
    item_in: ItemPayload,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
    metrics: MetricsEmitter = Depends(get_metrics_emitter),
) -> Message:
    """Replace every field of an item."""
    if not item_in.has_required_fields():
        raise RequestValidationFailed()
    start = time.perf_counter()
    updated = await crud_item.update(db, item_id=item_id, obj_in=item_in)
    await record_latency(metrics, background_tasks, "UPDATE", _elapsed_ms(start))
    if updated == 0:
        raise NotFoundError()
    return Message(message="Item updated successfully")


@router.delete("/{item_id}", response_model=Message)
async def delete_item(
    *,
    item_id: int,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
    metrics: MetricsEmitter = Depends(get_metrics_emitter),
) -> Message:
    """Delete an item."""
    start = time.perf_counter()
    deleted = await crud_item.remove(db, item_id=item_id)
    await record_latency(metrics, background_tasks, "DELETE", _elapsed_ms(start))
    if deleted == 0:
        raise NotFoundError()
    return Message(message="Item deleted successfully")
