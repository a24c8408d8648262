# bulletin_model.py
# League-wide branding, news posts and sponsor ads.

from datetime import datetime
from pydantic import BaseModel, Field


class LeagueSettings(BaseModel):
    """League branding shown on the dashboard and standings views."""
    name: str
    description: str = ""
    logo: str = ""
    season: str = ""


class NewsPost(BaseModel):
    id: str
    title: str
    body: str = ""
    author: str = ""
    published_at: datetime
    pinned: bool = False


class NewsCreate(BaseModel):
    title: str = Field(min_length=1)
    body: str = ""
    pinned: bool = False


class SponsorAd(BaseModel):
    id: str
    sponsor_name: str
    image_url: str = ""
    link_url: str = ""
    active: bool = True


class SponsorCreate(BaseModel):
    sponsor_name: str = Field(min_length=1)
    image_url: str = ""
    link_url: str = ""
    active: bool = True
