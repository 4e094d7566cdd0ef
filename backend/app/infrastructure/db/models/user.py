"""
User SQLModel for SlugSpace

Student account with the personalization fields used for matching.
"""

from typing import List, Optional

from sqlalchemy import Column, JSON
from sqlmodel import Field, SQLModel

from app.infrastructure.db.models.base import TimestampMixin, UUIDMixin


class UserBase(SQLModel):
    """Shared user fields."""
    
    email: str = Field(..., max_length=255, unique=True, index=True)
    name: Optional[str] = Field(default=None, max_length=100)
    
    # Personalization
    major: Optional[str] = Field(default=None, max_length=100)
    year: Optional[str] = Field(
        default=None,
        max_length=20,
        description="Freshman, Sophomore, Junior, Senior, Graduate"
    )
    college: Optional[str] = Field(
        default=None,
        max_length=100,
        description="Residential college affiliation"
    )
    interests: List[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False, default=list),
        description="Selected interest tags"
    )


class User(UserBase, UUIDMixin, TimestampMixin, table=True):
    """User table."""
    
    __tablename__ = "users"


class UserCreate(UserBase):
    pass


class UserUpdate(SQLModel):
    major: Optional[str] = None
    year: Optional[str] = None
    college: Optional[str] = None
    interests: Optional[List[str]] = None

