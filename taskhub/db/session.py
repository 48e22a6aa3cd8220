"""Database session and engine setup for the task service."""
from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from taskhub.settings import settings

Base = declarative_base()

engine = create_async_engine(settings.database_url, echo=settings.database_echo, pool_pre_ping=True, future=True)
async_session_factory = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide an async SQLAlchemy session for request handlers."""
    async with async_session_factory() as session:
        yield session
