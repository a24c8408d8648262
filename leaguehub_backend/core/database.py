import logging
import os
from sqlmodel import SQLModel, Session
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool
from sqlalchemy import create_engine as create_sync_engine

from leaguehub_backend.core.config import DB_PATH, DB_ECHO

logger = logging.getLogger("leaguehub.database")

# Ensure DB directory + file exist (prevents async context errors)
_db_dir = os.path.dirname(DB_PATH)
if _db_dir and not os.path.exists(_db_dir):
    os.makedirs(_db_dir, exist_ok=True)
if not os.path.exists(DB_PATH):
    logger.info("Database file not found. Creating %s", DB_PATH)
    open(DB_PATH, "a").close()

# --- Database URLs ---
DATABASE_URL = f"sqlite+aiosqlite:///{DB_PATH}"    # Async engine (routes)
SYNC_DATABASE_URL = f"sqlite:///{DB_PATH}"         # Sync engine (seeding/scripts)

# --- Engines ---
# NullPool: every session opens its own connection, so sessions never outlive
# the event loop that created them.
engine = create_async_engine(DATABASE_URL, echo=DB_ECHO, future=True, poolclass=NullPool)
sync_engine = create_sync_engine(SYNC_DATABASE_URL, echo=DB_ECHO, future=True)

# --- Async session maker ---
async_session_maker = sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


# --- Async DB session (used in routes) ---
async def get_db():
    async with async_session_maker() as session:
        yield session


# --- Initialize DB tables ---
async def init_db():
    """Create tables asynchronously if they don't exist."""
    # Import models so every table is registered on SQLModel.metadata
    from leaguehub_backend import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


# --- Sync session for seeding/scripts ---
def get_sync_session():
    return Session(sync_engine)
