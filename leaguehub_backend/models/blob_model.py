# blob_model.py
# Key/value tables: one row per entity, the whole record serialized as JSON
# in `data`. Writes replace the full blob (last write wins).

from sqlmodel import SQLModel, Field


class TeamBlob(SQLModel, table=True):
    __tablename__ = "teams"
    id: str = Field(primary_key=True)
    data: str


class MatchBlob(SQLModel, table=True):
    __tablename__ = "matches"
    id: str = Field(primary_key=True)
    data: str


class SettingsBlob(SQLModel, table=True):
    """Holds a single row with id 'global'."""
    __tablename__ = "settings"
    id: str = Field(primary_key=True)
    data: str


class NewsBlob(SQLModel, table=True):
    __tablename__ = "news"
    id: str = Field(primary_key=True)
    data: str


class SponsorBlob(SQLModel, table=True):
    __tablename__ = "sponsors"
    id: str = Field(primary_key=True)
    data: str
