"""
College SQLModel for SlugSpace

Residential colleges described by stereotype tags. The same tags drive
both the personality quiz and interest recommendations.
"""

from typing import List, Optional

from sqlalchemy import Column, JSON
from sqlmodel import Field, SQLModel

from app.infrastructure.db.models.base import TimestampMixin, UUIDMixin


class CollegeBase(SQLModel):
    """Base schema for colleges."""
    
    slug: str = Field(..., max_length=50, unique=True, index=True, description="e.g. crown")
    name: str = Field(..., max_length=255)
    description: Optional[str] = Field(default=None)
    stereotypes: List[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False, default=list),
        description="Stereotype/personality tags"
    )


class College(CollegeBase, UUIDMixin, TimestampMixin, table=True):
    """College table."""
    
    __tablename__ = "colleges"


class CollegeCreate(CollegeBase):
    pass


class CollegeUpdate(SQLModel):
    name: Optional[str] = None
    description: Optional[str] = None
    stereotypes: Optional[List[str]] = None

