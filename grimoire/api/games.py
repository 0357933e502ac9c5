import logging
from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from grimoire.auth import require_user
from grimoire.crud.characters import CharacterCrud
from grimoire.crud.games import GameCrud
from grimoire.database import get_db
from grimoire.models import User
from grimoire.policy import ensure_admin
from grimoire.schemas import Ack, CharacterResponse, GameCreate, GameResponse, GameUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/games", tags=["games"])


@router.get("", response_model=List[GameResponse], name="games.list")
async def list_games(user: User = Depends(require_user), db: Optional[AsyncSession] = Depends(get_db)):
    """Games owned by the caller."""
    return await GameCrud.list_by_parent(user.id, db)


@router.get("/{game_id}", response_model=Optional[GameResponse], name="games.get")
async def get_game(game_id: int, user: User = Depends(require_user), db: Optional[AsyncSession] = Depends(get_db)):
    # Not scoped to the owner: any signed-in caller can read any game
    return await GameCrud.get(game_id, db)


@router.post("", response_model=GameResponse, name="games.create")
async def create_game(data: GameCreate, user: User = Depends(require_user), db: Optional[AsyncSession] = Depends(get_db)):
    ensure_admin(user, "games.create")
    game = await GameCrud.create({"user_id": user.id, **data.model_dump()}, db)
    logger.info("User %s created game %s", user.id, game.id)
    return game


@router.patch("/{game_id}", response_model=Ack, name="games.update")
async def update_game(game_id: int, data: GameUpdate, user: User = Depends(require_user),
                      db: Optional[AsyncSession] = Depends(get_db)):
    ensure_admin(user, "games.update")
    await GameCrud.update(game_id, data.changes(), db)
    return Ack()


@router.delete("/{game_id}", response_model=Ack, name="games.delete")
async def delete_game(game_id: int, user: User = Depends(require_user), db: Optional[AsyncSession] = Depends(get_db)):
    ensure_admin(user, "games.delete")
    await GameCrud.delete(game_id, db)
    logger.info("User %s deleted game %s", user.id, game_id)
    return Ack()


@router.get("/{game_id}/characters", response_model=List[CharacterResponse], name="characters.listByGame")
async def list_characters(game_id: int, db: Optional[AsyncSession] = Depends(get_db)):
    return await CharacterCrud.list_by_parent(game_id, db)
