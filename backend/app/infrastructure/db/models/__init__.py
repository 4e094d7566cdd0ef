"""
SQLModel ORM Models for SlugSpace

Exports all database models for application use.
Import models here to register them with SQLModel.metadata.
"""

from app.infrastructure.db.models.base import (
    ActivityMixin,
    TimestampMixin,
    UUIDMixin,
)
from app.infrastructure.db.models.user import (
    User,
    UserBase,
    UserCreate,
    UserUpdate,
)
from app.infrastructure.db.models.club import (
    Club,
    ClubBase,
    ClubCreate,
    ClubUpdate,
    ClubMembership,
)
from app.infrastructure.db.models.course import (
    Course,
    CourseBase,
    CourseCreate,
    CourseUpdate,
    StudyGroupMembership,
)
from app.infrastructure.db.models.college import (
    College,
    CollegeBase,
    CollegeCreate,
    CollegeUpdate,
)


__all__ = [
    # Base
    "ActivityMixin",
    "TimestampMixin",
    "UUIDMixin",
    # User
    "User",
    "UserBase",
    "UserCreate",
    "UserUpdate",
    # Club
    "Club",
    "ClubBase",
    "ClubCreate",
    "ClubUpdate",
    "ClubMembership",
    # Course
    "Course",
    "CourseBase",
    "CourseCreate",
    "CourseUpdate",
    "StudyGroupMembership",
    # College
    "College",
    "CollegeBase",
    "CollegeCreate",
    "CollegeUpdate",
]
