from datetime import datetime
from typing import ClassVar, Optional
from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from grimoire.models.user import UserRole

class ApiModel(BaseModel):
    """Snake_case attributes, camelCase on the wire."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class PartialUpdate(ApiModel):
    """Update payload where only the fields actually sent are applied."""

    # Columns that are NOT NULL may be omitted but not cleared
    non_nullable: ClassVar[tuple] = ()

    @field_validator("*")
    @classmethod
    def reject_null(cls, v, info):
        if v is None and info.field_name in cls.non_nullable:
            raise ValueError(f"{info.field_name} cannot be null")
        return v

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True, by_alias=False)


class Ack(BaseModel):
    success: bool = True

# ============ Users ============
class UserResponse(ApiModel):
    id: int
    open_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    login_method: Optional[str] = None
    role: UserRole
    created_at: datetime
    updated_at: datetime
    last_signed_in: datetime

class UserUpsert(ApiModel):
    open_id: str = Field(min_length=1)
    name: Optional[str] = None
    email: Optional[str] = None
    login_method: Optional[str] = None
    role: Optional[UserRole] = None
    last_signed_in: Optional[datetime] = None

class DevLogin(ApiModel):
    open_id: str = Field(min_length=1, max_length=64)
    name: Optional[str] = None
    email: Optional[str] = None

# ============ Games ============
class GameCreate(ApiModel):
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    image_url: Optional[str] = None
    genre: Optional[str] = Field(None, max_length=100)

class GameUpdate(PartialUpdate):
    non_nullable = ("name",)

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    image_url: Optional[str] = None
    genre: Optional[str] = Field(None, max_length=100)

class GameResponse(ApiModel):
    id: int
    user_id: int
    name: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    genre: Optional[str] = None
    created_at: datetime
    updated_at: datetime

# ============ Characters ============
class CharacterCreate(ApiModel):
    game_id: int
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    history: Optional[str] = None
    image_url: Optional[str] = None

class CharacterUpdate(PartialUpdate):
    non_nullable = ("name",)

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    history: Optional[str] = None
    image_url: Optional[str] = None

class CharacterResponse(ApiModel):
    id: int
    game_id: int
    name: str
    description: Optional[str] = None
    history: Optional[str] = None
    image_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime

# ============ Attributes ============
class AttributeCreate(ApiModel):
    character_id: int
    name: str = Field(min_length=1, max_length=100)
    value: int = 10
    min_value: int = 0
    max_value: int = 15

class AttributeUpdate(PartialUpdate):
    non_nullable = ("name", "value", "min_value", "max_value")

    value: Optional[int] = None
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    min_value: Optional[int] = None
    max_value: Optional[int] = None

class AttributeResponse(ApiModel):
    id: int
    character_id: int
    name: str
    value: int
    min_value: int
    max_value: int
    created_at: datetime
    updated_at: datetime

# ============ Skills ============
class SkillCreate(ApiModel):
    character_id: int
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    level: int = 1

class SkillUpdate(PartialUpdate):
    non_nullable = ("name", "level")

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    level: Optional[int] = None

class SkillResponse(ApiModel):
    id: int
    character_id: int
    name: str
    description: Optional[str] = None
    level: int
    created_at: datetime
    updated_at: datetime

# ============ Upload ============
class GameCoverUpload(ApiModel):
    game_id: int
    file_data: str  # base64
    file_name: str = Field(min_length=1)

class UploadResponse(BaseModel):
    url: str
    key: str
