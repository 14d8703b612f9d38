from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
)
from sqlalchemy.pool import NullPool
from taskdesk.core.config import settings
from taskdesk.db.base import Base


def make_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Создание асинхронного движка под конкретный драйвер"""
    options = {"echo": echo, "pool_pre_ping": True}

    # SQLite и dev-окружение работают без пула: соединение на запрос
    if database_url.startswith("sqlite") or settings.is_development:
        options["poolclass"] = NullPool
    else:
        options["pool_size"] = 5
        options["max_overflow"] = 10

    return create_async_engine(database_url, **options)


# Создание асинхронного движка
engine = make_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG and settings.DEV_SHOW_SQL
)

# Фабрика сессий
async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False
)


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency для получения сессии БД"""
    async with async_session_maker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db():
    """Инициализация БД (создание таблиц)"""
    from taskdesk.db import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_db():
    """Удаление всех таблиц"""
    from taskdesk.db import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def close_db():
    """Закрытие соединений с БД"""
    await engine.dispose()
