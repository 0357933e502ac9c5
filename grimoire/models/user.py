from sqlalchemy import Column, Integer, String, Text, DateTime, Enum
from datetime import datetime
from grimoire.database import Base
import enum

class UserRole(str, enum.Enum):
    USER = "user"
    ADMIN = "admin"

class User(Base):
    __tablename__ = "users"
    
    id = Column(Integer, primary_key=True, index=True)
    # External identity returned by the OAuth provider
    open_id = Column(String(64), unique=True, index=True, nullable=False)
    name = Column(Text)
    email = Column(String(320))
    login_method = Column(String(64))
    role = Column(Enum(UserRole), nullable=False, default=UserRole.USER)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
    last_signed_in = Column(DateTime, nullable=False, default=datetime.utcnow)
