# user_model.py
# Defines the User table (staff accounts) and related request/response schemas.

from enum import Enum
from typing import Optional
from sqlmodel import SQLModel, Field
from pydantic import BaseModel


class UserRole(str, Enum):
    PUBLIC = "PUBLIC"
    TEAM_MANAGER = "TEAM_MANAGER"
    ADMIN = "ADMIN"


class User(SQLModel, table=True):
    """Database model for staff who can sign in (admins and team managers)."""
    __tablename__ = "users"
    id: str = Field(primary_key=True)
    username: str = Field(index=True, unique=True)
    password_hash: str
    role: UserRole = Field(default=UserRole.TEAM_MANAGER)
    team_id: Optional[str] = Field(default=None)  # Team a manager looks after


# Pydantic request models (used for API input)
class LoginRequest(BaseModel):
    username: str
    password: str


class StaffCreate(BaseModel):
    """Request model for an admin creating a staff account."""
    username: str
    password: str
    role: UserRole = UserRole.TEAM_MANAGER
    team_id: Optional[str] = None


class LoginResult(BaseModel):
    role: UserRole
    team_id: Optional[str] = None
    username: Optional[str] = None


class StaffRead(BaseModel):
    id: str
    username: str
    role: UserRole
    team_id: Optional[str] = None
