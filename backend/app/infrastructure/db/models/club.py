"""
Club SQLModels for SlugSpace

Clubs plus the membership table used to exclude joined clubs from
recommendations.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

from app.infrastructure.db.models.base import ActivityMixin, TimestampMixin, UUIDMixin


class ClubBase(SQLModel):
    """Base schema for clubs."""
    
    name: str = Field(..., max_length=255, index=True)
    description: Optional[str] = Field(default=None)
    category: Optional[str] = Field(
        default=None,
        max_length=100,
        description="e.g. Sport Club, Greek Letter, Special Interest"
    )
    is_active: bool = Field(default=True, index=True)


class Club(ClubBase, ActivityMixin, UUIDMixin, TimestampMixin, table=True):
    """Club table."""
    
    __tablename__ = "clubs"


class ClubCreate(ClubBase):
    pass


class ClubUpdate(SQLModel):
    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    is_active: Optional[bool] = None


class ClubMembership(UUIDMixin, TimestampMixin, table=True):
    """A user's membership in a club."""
    
    __tablename__ = "club_memberships"
    __table_args__ = (UniqueConstraint("user_id", "club_id"),)
    
    user_id: UUID = Field(foreign_key="users.id", index=True)
    club_id: UUID = Field(foreign_key="clubs.id", index=True)
