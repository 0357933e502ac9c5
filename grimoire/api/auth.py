from datetime import datetime
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from grimoire.auth import create_token, get_optional_user, get_settings
from grimoire.config import Settings
from grimoire.crud.users import UserCrud
from grimoire.database import get_db
from grimoire.models import User
from grimoire.schemas import Ack, DevLogin, UserResponse, UserUpsert

router = APIRouter(prefix="/api/auth", tags=["auth"])


def set_session_cookie(response: Response, token: str, settings: Settings):
    response.set_cookie(
        settings.COOKIE_NAME, token,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True, secure=settings.COOKIE_SECURE, samesite="lax", path="/",
    )


@router.get("/me", response_model=Optional[UserResponse], name="auth.me")
async def me(user: Optional[User] = Depends(get_optional_user)):
    return user


@router.post("/logout", response_model=Ack, name="auth.logout")
async def logout(response: Response, settings: Settings = Depends(get_settings)):
    response.delete_cookie(
        settings.COOKIE_NAME, path="/", httponly=True, secure=settings.COOKIE_SECURE, samesite="lax"
    )
    return Ack()


@router.post("/dev-login", response_model=UserResponse, name="auth.devLogin")
async def dev_login(data: DevLogin, response: Response, settings: Settings = Depends(get_settings),
                    db: Optional[AsyncSession] = Depends(get_db)):
    """Sign in as an arbitrary identity. Local development only."""
    if not settings.DEV_LOGIN_ENABLED:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Not Found")
    upsert = UserUpsert(login_method="dev", last_signed_in=datetime.utcnow(), **data.model_dump(exclude_none=True))
    user = await UserCrud.upsert(upsert, db, owner_open_id=settings.OWNER_OPEN_ID)
    set_session_cookie(response, create_token(user.open_id, settings), settings)
    return user
