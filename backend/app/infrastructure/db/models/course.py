"""
Course SQLModels for SlugSpace

Courses and study-group memberships. A user with a study-group
membership for a course does not get that course recommended.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

from app.infrastructure.db.models.base import ActivityMixin, TimestampMixin, UUIDMixin


class CourseBase(SQLModel):
    """Base schema for courses."""
    
    code: str = Field(..., max_length=20, index=True, description="e.g. CSE 30")
    name: str = Field(..., max_length=255)
    description: Optional[str] = Field(default=None)
    department: Optional[str] = Field(default=None, max_length=100)
    is_active: bool = Field(default=True, index=True)


class Course(CourseBase, ActivityMixin, UUIDMixin, TimestampMixin, table=True):
    """Course table."""
    
    __tablename__ = "courses"


class CourseCreate(CourseBase):
    pass


class CourseUpdate(SQLModel):
    code: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    department: Optional[str] = None
    is_active: Optional[bool] = None


class StudyGroupMembership(UUIDMixin, TimestampMixin, table=True):
    """A user's signup for a course study group."""
    
    __tablename__ = "study_group_memberships"
    __table_args__ = (UniqueConstraint("user_id", "course_id"),)
    
    user_id: UUID = Field(foreign_key="users.id", index=True)
    course_id: UUID = Field(foreign_key="courses.id", index=True)
