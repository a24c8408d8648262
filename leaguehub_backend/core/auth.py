import logging
import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from passlib.context import CryptContext
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from leaguehub_backend.core.config import PRIMARY_ADMIN_ID
from leaguehub_backend.core.database import get_db
from leaguehub_backend.core.exceptions import AuthenticationError
from leaguehub_backend.models.user_model import (
    User, UserRole, LoginRequest, LoginResult, StaffCreate, StaffRead,
)
from leaguehub_backend.services.league_store import LeagueStore

logger = logging.getLogger("leaguehub.auth")

router = APIRouter()
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Credentials are optional: anonymous requests browse as PUBLIC
security = HTTPBasic(auto_error=False)


# === CREDENTIAL CHECK ===

async def authenticate(session: AsyncSession, username: str, password: str) -> LoginResult:
    """Return the user's role (and team) or raise AuthenticationError."""
    result = await session.execute(select(User).where(User.username == username))
    user = result.scalars().first()
    if not user or not pwd_context.verify(password, user.password_hash):
        raise AuthenticationError("Invalid credentials")
    return LoginResult(role=user.role, team_id=user.team_id, username=user.username)


# === REQUEST DEPENDENCIES ===

async def get_current_user(
    credentials: Optional[HTTPBasicCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> LoginResult:
    if credentials is None:
        return LoginResult(role=UserRole.PUBLIC)
    try:
        return await authenticate(db, credentials.username, credentials.password)
    except AuthenticationError:
        raise HTTPException(
            status_code=401,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Basic"},
        )


def require_admin(user: LoginResult = Depends(get_current_user)) -> LoginResult:
    if user.role != UserRole.ADMIN:
        raise HTTPException(status_code=403, detail="Administrator access required.")
    return user


def can_manage_team(user: LoginResult, team_id: str) -> bool:
    """Admins manage every team; a manager only their own."""
    if user.role == UserRole.ADMIN:
        return True
    return user.role == UserRole.TEAM_MANAGER and user.team_id == team_id


# === LOGIN ===

@router.post("/login", response_model=LoginResult)
async def login(data: LoginRequest, db: AsyncSession = Depends(get_db)):
    try:
        result = await authenticate(db, data.username, data.password)
    except AuthenticationError:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    logger.info("User %s signed in as %s", data.username, result.role.value)
    return result


# === STAFF (admin only) ===

@router.post("/register", response_model=StaffRead, status_code=201)
async def register_staff(
    data: StaffCreate,
    db: AsyncSession = Depends(get_db),
    _: LoginResult = Depends(require_admin),
):
    result = await db.execute(select(User).where(User.username == data.username))
    if result.scalars().first():
        raise HTTPException(status_code=400, detail="Username already registered")

    if data.role == UserRole.PUBLIC:
        raise HTTPException(status_code=400, detail="Staff accounts must be managers or administrators.")

    if data.role == UserRole.TEAM_MANAGER:
        if not data.team_id:
            raise HTTPException(status_code=400, detail="A team manager must be assigned to a team.")
        if await LeagueStore(db).get_team(data.team_id) is None:
            raise HTTPException(status_code=404, detail="Team not found.")

    user = User(
        id=f"u-{uuid.uuid4().hex[:12]}",
        username=data.username,
        password_hash=pwd_context.hash(data.password),
        role=data.role,
        team_id=data.team_id if data.role == UserRole.TEAM_MANAGER else None,
    )
    db.add(user)
    await db.commit()
    logger.info("Created %s account %s", user.role.value, user.username)
    return StaffRead(id=user.id, username=user.username, role=user.role, team_id=user.team_id)


@router.get("/staff", response_model=List[StaffRead])
async def list_staff(db: AsyncSession = Depends(get_db), _: LoginResult = Depends(require_admin)):
    result = await db.execute(select(User).order_by(User.username))
    return [
        StaffRead(id=u.id, username=u.username, role=u.role, team_id=u.team_id)
        for u in result.scalars().all()
    ]


@router.delete("/staff/{user_id}")
async def remove_staff(user_id: str, db: AsyncSession = Depends(get_db), _: LoginResult = Depends(require_admin)):
    if user_id == PRIMARY_ADMIN_ID:
        raise HTTPException(status_code=400, detail="Cannot remove the primary system administrator.")

    user = await db.get(User, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    await db.delete(user)
    await db.commit()
    logger.info("Revoked access for %s", user.username)
    return {"message": f"Access revoked for {user.username}"}
