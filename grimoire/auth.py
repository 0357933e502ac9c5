from datetime import datetime, timedelta
from typing import Optional
from fastapi import Depends, HTTPException, Request, status
from jose import jwt, JWTError
from sqlalchemy.ext.asyncio import AsyncSession
from grimoire.config import Settings
from grimoire.crud.users import UserCrud
from grimoire.database import get_db
from grimoire.models import User

def create_token(open_id: str, settings: Settings) -> str:
    expire = datetime.utcnow() + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    return jwt.encode({"sub": open_id, "exp": expire}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def decode_token(token: str, settings: Settings) -> Optional[str]:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
    return payload.get("sub")

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def _extract_token(request: Request, settings: Settings) -> Optional[str]:
    auth = request.headers.get("Authorization", "")
    if auth.lower().startswith("bearer "):
        return auth.split(" ", 1)[1].strip()
    return request.cookies.get(settings.COOKIE_NAME)

async def get_optional_user(
    request: Request,
    settings: Settings = Depends(get_settings),
    db: Optional[AsyncSession] = Depends(get_db),
) -> Optional[User]:
    """Caller's User, or None for anonymous and unresolvable sessions."""
    token = _extract_token(request, settings)
    if not token:
        return None
    open_id = decode_token(token, settings)
    if not open_id:
        return None
    return await UserCrud.get_by_open_id(open_id, db)

async def require_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    if user is None:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "UNAUTHORIZED")
    return user
