import asyncio
import enum
import logging
from typing import AsyncIterator, Optional

from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

logger = logging.getLogger(__name__)

class Base(DeclarativeBase):
    pass


class ConnectionState(str, enum.Enum):
    UNINITIALIZED = "uninitialized"
    CONNECTED = "connected"
    UNAVAILABLE = "unavailable"


class Database:
    """Lazily created engine plus the state of that connection.

    ``connect()`` opens a real connection and creates missing tables before
    the database counts as connected. While it is unavailable the attempt is
    repeated on every access, so a late ``DATABASE_URL`` or a recovered server
    is picked up without a restart.
    """

    def __init__(self, url: Optional[str], echo: bool = False):
        self.url = url
        self.echo = echo
        self.state = ConnectionState.UNINITIALIZED
        self.engine: Optional[AsyncEngine] = None
        self.sessionmaker: Optional[async_sessionmaker] = None
        self._lock = asyncio.Lock()

    @property
    def available(self) -> bool:
        return self.state == ConnectionState.CONNECTED

    async def connect(self) -> bool:
        if self.state == ConnectionState.CONNECTED:
            return True
        if not self.url:
            if self.state == ConnectionState.UNINITIALIZED:
                logger.warning("DATABASE_URL is not set; running without a database")
            self.state = ConnectionState.UNAVAILABLE
            return False
        async with self._lock:
            if self.state == ConnectionState.CONNECTED:
                return True
            try:
                self.engine = create_async_engine(self.url, echo=self.echo)
                async with self.engine.begin() as conn:
                    await conn.run_sync(Base.metadata.create_all)
            except (SQLAlchemyError, ImportError, ValueError, OSError) as e:
                logger.warning("Failed to connect to database: %s", e)
                await self._close_engine()
                self.state = ConnectionState.UNAVAILABLE
                return False
            self.sessionmaker = async_sessionmaker(self.engine, class_=AsyncSession, expire_on_commit=False)
            self.state = ConnectionState.CONNECTED
            logger.info("Connected to database")
            return True

    async def init_db(self):
        await self.connect()

    async def _close_engine(self):
        if self.engine is not None:
            await self.engine.dispose()
        self.engine = None
        self.sessionmaker = None

    async def dispose(self):
        await self._close_engine()
        self.state = ConnectionState.UNINITIALIZED

    def session(self) -> AsyncSession:
        return self.sessionmaker()


async def get_db(request: Request) -> AsyncIterator[Optional[AsyncSession]]:
    """Yield a session, or None when the database is unavailable."""
    database: Database = request.app.state.database
    if not await database.connect():
        yield None
        return
    async with database.session() as session:
        yield session
