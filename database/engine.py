import logging

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase

from core.config import settings

logger = logging.getLogger(__name__)

DATABASE_URL = settings.database_url

# log for debugging purposes (never the password)
logger.info(
    f"Connecting to database at {make_url(DATABASE_URL).render_as_string(hide_password=True)}"
)

db_engine = create_async_engine(
    DATABASE_URL,
    echo=settings.database_echo,
    pool_size=settings.database_pool_size,
    max_overflow=settings.database_max_overflow,
    pool_pre_ping=True,
)


# Create async session maker to be used throughout the application
AsyncSessionLocal = async_sessionmaker(
    db_engine, class_=AsyncSession, expire_on_commit=False
)


# Base class for declarative models
class Base(DeclarativeBase):
    pass


# Dependency to get DB session
async def get_db():
    async with AsyncSessionLocal() as session:
        yield session


# Dependency for code that needs several independent sessions (dashboard fan-out)
def get_session_factory() -> async_sessionmaker[AsyncSession]:
    return AsyncSessionLocal


# Function to initialize the database (create tables)
async def init_db():
    # models must be imported so their tables are registered on Base.metadata
    import database.models  # noqa: F401

    async with db_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# Function to close database connections
async def close_db():
    """Close database engine and connections."""
    await db_engine.dispose()
