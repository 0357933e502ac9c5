import logging
from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from grimoire.auth import require_user
from grimoire.crud.characters import CharacterCrud
from grimoire.crud.stats import AttributeCrud, SkillCrud
from grimoire.database import get_db
from grimoire.models import User
from grimoire.policy import ensure_admin
from grimoire.schemas import (
    Ack, AttributeResponse, CharacterCreate, CharacterResponse, CharacterUpdate, SkillResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/characters", tags=["characters"])


@router.get("/{character_id}", response_model=Optional[CharacterResponse], name="characters.get")
async def get_character(character_id: int, db: Optional[AsyncSession] = Depends(get_db)):
    return await CharacterCrud.get(character_id, db)


@router.post("", response_model=CharacterResponse, name="characters.create")
async def create_character(data: CharacterCreate, user: User = Depends(require_user),
                           db: Optional[AsyncSession] = Depends(get_db)):
    ensure_admin(user, "characters.create")
    char = await CharacterCrud.create(data.model_dump(), db)
    logger.info("User %s created character %s in game %s", user.id, char.id, char.game_id)
    return char


@router.patch("/{character_id}", response_model=Ack, name="characters.update")
async def update_character(character_id: int, data: CharacterUpdate, user: User = Depends(require_user),
                           db: Optional[AsyncSession] = Depends(get_db)):
    ensure_admin(user, "characters.update")
    await CharacterCrud.update(character_id, data.changes(), db)
    return Ack()


@router.delete("/{character_id}", response_model=Ack, name="characters.delete")
async def delete_character(character_id: int, user: User = Depends(require_user),
                           db: Optional[AsyncSession] = Depends(get_db)):
    ensure_admin(user, "characters.delete")
    await CharacterCrud.delete(character_id, db)
    logger.info("User %s deleted character %s", user.id, character_id)
    return Ack()


@router.get("/{character_id}/attributes", response_model=List[AttributeResponse], name="attributes.listByCharacter")
async def list_attributes(character_id: int, db: Optional[AsyncSession] = Depends(get_db)):
    return await AttributeCrud.list_by_parent(character_id, db)


@router.get("/{character_id}/skills", response_model=List[SkillResponse], name="skills.listByCharacter")
async def list_skills(character_id: int, db: Optional[AsyncSession] = Depends(get_db)):
    return await SkillCrud.list_by_parent(character_id, db)
