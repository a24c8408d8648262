import logging
from fastapi import FastAPI

from leaguehub_backend.core.config import AUTO_SEED
from leaguehub_backend.core.database import init_db
from leaguehub_backend.core.logging_config import RequestLoggingMiddleware, setup_logging
from leaguehub_backend.seed.seed_all import seed_all

# --- Routers ---
from leaguehub_backend.core.auth import router as auth_router
from leaguehub_backend.routes.team_routes import router as team_router
from leaguehub_backend.routes.league_routes import router as league_router
from leaguehub_backend.routes.admin_routes import router as admin_router
from leaguehub_backend.routes.bulletin_routes import router as bulletin_router

setup_logging()
logger = logging.getLogger("leaguehub")

app = FastAPI(title="LeagueHub")
app.add_middleware(RequestLoggingMiddleware)


@app.on_event("startup")
async def on_startup():
    # 1️⃣ Init DB tables async
    await init_db()

    # 2️⃣ Seed admin (always) and demo league (empty store + AUTO_SEED) in sync mode
    seed_all(include_demo=AUTO_SEED)
    logger.info("LeagueHub ready")


# Routers
app.include_router(auth_router, prefix="/auth", tags=["Auth"])
app.include_router(team_router, prefix="/teams", tags=["Teams"])
app.include_router(league_router, prefix="/league", tags=["League"])
app.include_router(admin_router, prefix="/admin", tags=["Admin"])
app.include_router(bulletin_router, tags=["News & Sponsors"])
