import base64
import binascii
import logging
import mimetypes
import time
from pathlib import PurePosixPath
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession
from grimoire.auth import require_user
from grimoire.crud.games import GameCrud
from grimoire.database import get_db
from grimoire.models import User
from grimoire.policy import ensure_admin
from grimoire.schemas import GameCoverUpload, UploadResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/upload", tags=["upload"])


def cover_key(game_id: int, file_name: str) -> str:
    name = PurePosixPath(file_name.replace("\\", "/")).name
    return f"games/{game_id}/cover-{int(time.time() * 1000)}-{name}"


@router.post("/game-cover", response_model=UploadResponse, name="upload.gameCover")
async def upload_game_cover(data: GameCoverUpload, request: Request, user: User = Depends(require_user),
                            db: Optional[AsyncSession] = Depends(get_db)):
    """Store a cover image, then point the game at it.

    The two steps are not atomic: if the game update fails the stored file
    stays behind.
    """
    try:
        payload = base64.b64decode(data.file_data, validate=True)
    except (binascii.Error, ValueError):
        raise HTTPException(status.HTTP_422_UNPROCESSABLE_ENTITY, "fileData is not valid base64")
    if not PurePosixPath(data.file_name.replace("\\", "/")).name:
        raise HTTPException(status.HTTP_422_UNPROCESSABLE_ENTITY, "fileName is empty")
    ensure_admin(user, "upload.gameCover")

    key = cover_key(data.game_id, data.file_name)
    content_type = mimetypes.guess_type(key)[0] or "image/jpeg"
    url = await request.app.state.storage.put(key, payload, content_type)
    await GameCrud.update_cover_url(data.game_id, url, db)
    logger.info("User %s uploaded cover for game %s", user.id, data.game_id)
    return UploadResponse(url=url, key=key)
