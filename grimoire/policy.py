"""Role checks applied in front of mutating procedures.

Only admins may create, update or delete games, characters and skills, and
create or delete attributes. Attribute updates are deliberately left open to
any signed-in user so players can adjust stats during live play; that path
does not restrict which fields change or check value against the bounds.
"""
import logging
from fastapi import HTTPException, status
from grimoire.models import User, UserRole

logger = logging.getLogger(__name__)

def is_admin(user: User) -> bool:
    return user is not None and user.role == UserRole.ADMIN

def ensure_admin(user: User, procedure: str):
    if not is_admin(user):
        logger.warning("Forbidden %s for user %s", procedure, getattr(user, "id", None))
        raise HTTPException(status.HTTP_403_FORBIDDEN, "FORBIDDEN")
