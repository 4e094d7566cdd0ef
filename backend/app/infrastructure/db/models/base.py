"""
Base Model for SQLModel ORM

Common fields shared by every SlugSpace table.
"""

from datetime import datetime, timezone
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampMixin(SQLModel):
    """Mixin providing created/updated timestamps."""
    
    created_at: datetime = Field(
        default_factory=utcnow,
        nullable=False,
        description="Record creation timestamp (UTC)"
    )
    updated_at: datetime = Field(
        default_factory=utcnow,
        nullable=False,
        sa_column_kwargs={"onupdate": utcnow},
        description="Last update timestamp (UTC)"
    )


class UUIDMixin(SQLModel):
    """Mixin providing a UUID primary key."""
    
    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Unique identifier (UUID v4)"
    )


class ActivityMixin(SQLModel):
    """Engagement counters kept on clubs and courses."""
    
    join_count: int = Field(default=0, ge=0, description="Total joins")
    view_count: int = Field(default=0, ge=0, description="Total detail views")
