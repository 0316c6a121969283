import os

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase


def normalize_database_url(url: str) -> str:
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql+asyncpg://", 1)
    elif url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def _ensure_sqlite_dir(url: str) -> None:
    path = make_url(url).database
    if not path or path == ":memory:":
        return
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)


def build_engine(database_url: str) -> AsyncEngine:
    url = normalize_database_url(database_url)

    engine_kwargs: dict = {"echo": False}
    if _is_sqlite(url):
        _ensure_sqlite_dir(url)
    else:
        engine_kwargs.update(pool_size=5, max_overflow=10, pool_pre_ping=True)

    return create_async_engine(url, **engine_kwargs)


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


class Base(DeclarativeBase):
    pass


async def create_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        from quiz_api.models import quiz, user  # noqa: F401
        await conn.run_sync(Base.metadata.create_all)
