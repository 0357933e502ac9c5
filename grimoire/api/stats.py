import logging
from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from grimoire.auth import require_user
from grimoire.crud.stats import AttributeCrud, SkillCrud
from grimoire.database import get_db
from grimoire.models import User
from grimoire.policy import ensure_admin
from grimoire.schemas import (
    Ack, AttributeCreate, AttributeResponse, AttributeUpdate, SkillCreate, SkillResponse, SkillUpdate
)

logger = logging.getLogger(__name__)

attributes_router = APIRouter(prefix="/api/attributes", tags=["attributes"])
skills_router = APIRouter(prefix="/api/skills", tags=["skills"])

# ============ Attributes ============
@attributes_router.get("/{attribute_id}", response_model=Optional[AttributeResponse], name="attributes.get")
async def get_attribute(attribute_id: int, db: Optional[AsyncSession] = Depends(get_db)):
    return await AttributeCrud.get(attribute_id, db)


@attributes_router.post("", response_model=AttributeResponse, name="attributes.create")
async def create_attribute(data: AttributeCreate, user: User = Depends(require_user),
                           db: Optional[AsyncSession] = Depends(get_db)):
    ensure_admin(user, "attributes.create")
    return await AttributeCrud.create(data.model_dump(), db)


@attributes_router.patch("/{attribute_id}", response_model=Ack, name="attributes.update")
async def update_attribute(attribute_id: int, data: AttributeUpdate, user: User = Depends(require_user),
                           db: Optional[AsyncSession] = Depends(get_db)):
    """Open to any signed-in user, for any field, with no bounds check."""
    await AttributeCrud.update(attribute_id, data.changes(), db)
    return Ack()


@attributes_router.delete("/{attribute_id}", response_model=Ack, name="attributes.delete")
async def delete_attribute(attribute_id: int, user: User = Depends(require_user),
                           db: Optional[AsyncSession] = Depends(get_db)):
    ensure_admin(user, "attributes.delete")
    await AttributeCrud.delete(attribute_id, db)
    return Ack()

# ============ Skills ============
@skills_router.get("/{skill_id}", response_model=Optional[SkillResponse], name="skills.get")
async def get_skill(skill_id: int, db: Optional[AsyncSession] = Depends(get_db)):
    return await SkillCrud.get(skill_id, db)


@skills_router.post("", response_model=SkillResponse, name="skills.create")
async def create_skill(data: SkillCreate, user: User = Depends(require_user),
                       db: Optional[AsyncSession] = Depends(get_db)):
    ensure_admin(user, "skills.create")
    return await SkillCrud.create(data.model_dump(), db)


@skills_router.patch("/{skill_id}", response_model=Ack, name="skills.update")
async def update_skill(skill_id: int, data: SkillUpdate, user: User = Depends(require_user),
                       db: Optional[AsyncSession] = Depends(get_db)):
    ensure_admin(user, "skills.update")
    await SkillCrud.update(skill_id, data.changes(), db)
    return Ack()


@skills_router.delete("/{skill_id}", response_model=Ack, name="skills.delete")
async def delete_skill(skill_id: int, user: User = Depends(require_user),
                       db: Optional[AsyncSession] = Depends(get_db)):
    ensure_admin(user, "skills.delete")
    await SkillCrud.delete(skill_id, db)
    return Ack()
