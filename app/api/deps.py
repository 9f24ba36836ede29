from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.config import Settings, get_settings


def build_engine(settings: Settings):
    if not settings.database_url:
        # SQLite en memoria para desarrollo y tests; una sola conexión compartida
        return create_async_engine(
            "sqlite+aiosqlite:///:memory:",
            echo=settings.db_echo,
            poolclass=StaticPool,
        )
    return create_async_engine(
        settings.database_url,
        echo=settings.db_echo,
        pool_pre_ping=True,
        pool_recycle=3600,
    )


engine = build_engine(get_settings())
AsyncSessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        yield session
