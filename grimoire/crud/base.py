import logging
from typing import List, Optional
from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession
from grimoire.errors import BackendUnavailable

logger = logging.getLogger(__name__)

class CrudBase:
    """Single-table operations for one model, keyed by id and by parent id.

    ``db`` is None when the database is unavailable: reads degrade to empty
    results, writes raise ``BackendUnavailable``.
    """

    model = None
    parent_key: str = None

    @classmethod
    def _require(cls, db: Optional[AsyncSession], action: str) -> AsyncSession:
        if db is None:
            logger.warning("Cannot %s %s: database not available", action, cls.model.__tablename__)
            raise BackendUnavailable()
        return db

    @classmethod
    async def list_by_parent(cls, parent_id: int, db: Optional[AsyncSession]) -> List:
        if db is None:
            return []
        column = getattr(cls.model, cls.parent_key)
        result = await db.execute(select(cls.model).where(column == parent_id))
        return list(result.scalars().all())

    @classmethod
    async def get(cls, id: int, db: Optional[AsyncSession]):
        if db is None:
            return None
        return await db.get(cls.model, id)

    @classmethod
    async def create(cls, fields: dict, db: Optional[AsyncSession]):
        db = cls._require(db, "create")
        row = cls.model(**fields)
        db.add(row)
        await db.commit()
        await db.refresh(row)
        return row

    @classmethod
    async def update(cls, id: int, fields: dict, db: Optional[AsyncSession]):
        """Apply only the supplied fields. A missing id is a silent no-op."""
        db = cls._require(db, "update")
        if not fields:
            return
        await db.execute(update(cls.model).where(cls.model.id == id).values(**fields))
        await db.commit()

    @classmethod
    async def delete(cls, id: int, db: Optional[AsyncSession]):
        # Children keep their parent key; nothing cascades
        db = cls._require(db, "delete")
        await db.execute(delete(cls.model).where(cls.model.id == id))
        await db.commit()
