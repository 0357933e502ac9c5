import logging
from datetime import datetime
from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from grimoire.crud.base import CrudBase
from grimoire.models import User, UserRole
from grimoire.schemas import UserUpsert

logger = logging.getLogger(__name__)

class UserCrud(CrudBase):
    model = User

    # Fields an upsert may overwrite on an existing user
    MUTABLE_FIELDS = ("name", "email", "login_method", "role", "last_signed_in")

    @classmethod
    async def get_by_open_id(cls, open_id: str, db: Optional[AsyncSession]) -> Optional[User]:
        if db is None:
            logger.warning("Cannot get user: database not available")
            return None
        result = await db.execute(select(User).where(User.open_id == open_id).limit(1))
        return result.scalar_one_or_none()

    @classmethod
    async def upsert(cls, data: UserUpsert, db: Optional[AsyncSession], owner_open_id: str = None) -> User:
        """Insert a user by external identity, or update the one that exists.

        The owner identity is promoted to admin unless a role is given. When
        nothing changes, ``last_signed_in`` is still touched to record the visit.
        """
        db = cls._require(db, "upsert")
        values = data.model_dump(exclude_unset=True, exclude={"open_id"})
        if values.get("role") is None:
            values.pop("role", None)
            if owner_open_id and data.open_id == owner_open_id:
                values["role"] = UserRole.ADMIN
        if values.get("last_signed_in") is None:
            values.pop("last_signed_in", None)

        user = await cls.get_by_open_id(data.open_id, db)
        if user is None:
            user = User(open_id=data.open_id, **values)
            user.last_signed_in = values.get("last_signed_in") or datetime.utcnow()
            db.add(user)
            logger.info("Created user %s", data.open_id)
        else:
            changed = {k: v for k, v in values.items() if k in cls.MUTABLE_FIELDS and getattr(user, k) != v}
            if not changed:
                changed = {"last_signed_in": datetime.utcnow()}
            for field, value in changed.items():
                setattr(user, field, value)
        await db.commit()
        await db.refresh(user)
        return user
