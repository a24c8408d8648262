# seed_all.py
# Seeds the primary admin account and, for an empty store, the demo league.
# Runs on the sync engine (startup and command line).

import logging
from sqlmodel import select

from leaguehub_backend.core.auth import pwd_context
from leaguehub_backend.core.config import ADMIN_USERNAME, ADMIN_PASSWORD, PRIMARY_ADMIN_ID
from leaguehub_backend.core.database import get_sync_session
from leaguehub_backend.models.blob_model import TeamBlob, MatchBlob, SettingsBlob
from leaguehub_backend.models.user_model import User, UserRole
from leaguehub_backend.services.league_service import build_demo_league
from leaguehub_backend.services.league_store import SETTINGS_KEY

logger = logging.getLogger("leaguehub.seed")


def seed_admin() -> bool:
    """Create the primary admin unless an admin already exists."""
    with get_sync_session() as session:
        existing = session.exec(select(User).where(User.role == UserRole.ADMIN)).first()
        if existing:
            return False

        session.add(User(
            id=PRIMARY_ADMIN_ID,
            username=ADMIN_USERNAME,
            password_hash=pwd_context.hash(ADMIN_PASSWORD),
            role=UserRole.ADMIN,
        ))
        session.commit()
        logger.info("Seeded default admin user (%s)", ADMIN_USERNAME)
        return True


def seed_demo_league() -> bool:
    """Populate teams, fixtures and settings if no team is stored yet."""
    with get_sync_session() as session:
        if session.exec(select(TeamBlob)).first():
            logger.info("League data already present. Skipping demo seed.")
            return False

        teams, matches, settings = build_demo_league()
        for team in teams:
            session.add(TeamBlob(id=team.id, data=team.model_dump_json()))
        for match in matches:
            session.add(MatchBlob(id=match.id, data=match.model_dump_json()))
        session.merge(SettingsBlob(id=SETTINGS_KEY, data=settings.model_dump_json()))
        session.commit()

    logger.info("Seeded demo league: %d teams, %d fixtures", len(teams), len(matches))
    return True


def seed_all(include_demo: bool = True):
    logger.info("Starting database seeding...")
    seed_admin()
    if include_demo:
        seed_demo_league()
    logger.info("Database seeding complete.")


if __name__ == "__main__":
    import asyncio
    from leaguehub_backend.core.database import init_db
    from leaguehub_backend.core.logging_config import setup_logging

    setup_logging()
    asyncio.run(init_db())
    seed_all()
