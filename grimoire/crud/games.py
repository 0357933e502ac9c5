from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from grimoire.crud.base import CrudBase
from grimoire.models import Game

class GameCrud(CrudBase):
    model = Game
    parent_key = "user_id"

    @classmethod
    async def update_cover_url(cls, id: int, image_url: str, db: Optional[AsyncSession]):
        await cls.update(id, {"image_url": image_url}, db)
