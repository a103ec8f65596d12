import asyncio
from typing import Any, Sequence

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from items_svc.core.config import get_settings
from items_svc.models.item import Item
from items_svc.schemas.item import ItemPayload

settings = get_settings()


class CRUDItem:
    """Single-statement data access for the items table.

    Every method runs exactly one parameterized statement under the
    configured statement deadline. Errors propagate to the caller.
    """

    async def _execute(self, db: AsyncSession, stmt: Any) -> Any:
        return await asyncio.wait_for(db.execute(stmt), timeout=settings.DATABASE_STATEMENT_TIMEOUT)

    async def get_multi(self, db: AsyncSession) -> Sequence[Item]:
        res = await self._execute(db, select(Item))
        return res.scalars().all()

    async def create(self, db: AsyncSession, *, obj_in: ItemPayload) -> int:
        stmt = insert(Item.__table__).values(**obj_in.model_dump())
        res = await self._execute(db, stmt)
        await db.commit()
        return int(res.inserted_primary_key[0])

    async def update(self, db: AsyncSession, *, item_id: int, obj_in: ItemPayload) -> int:
        """Overwrite all fields of the item; returns the number of matched rows."""
        stmt = update(Item.__table__).where(Item.__table__.c.id == item_id).values(**obj_in.model_dump())
        res = await self._execute(db, stmt)
        await db.commit()
        return res.rowcount

    async def remove(self, db: AsyncSession, *, item_id: int) -> int:
        res = await self._execute(db, delete(Item.__table__).where(Item.__table__.c.id == item_id))
        await db.commit()
        return res.rowcount


crud_item = CRUDItem()
