import logging

from sqlalchemy import delete, text

from items_svc.db.base import Base
from items_svc.db.session import engine
from items_svc.models.item import Item


LOG = logging.getLogger(__name__)


async def init_db() -> None:
    """Create the items table if absent and empty it.

    Runs on every process start: any rows left from a previous run are
    discarded. Failures are logged and re-raised so startup aborts.
    """

    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
            if conn.dialect.name == "postgresql":
                await conn.execute(text(f"TRUNCATE TABLE {Item.__tablename__}"))
            else:
                await conn.execute(delete(Item.__table__))
        LOG.info("database initialized: items table ready and empty")
    except Exception as exc:
        LOG.error("database initialization failed err=%s", exc)
        raise
