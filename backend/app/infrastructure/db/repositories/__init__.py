"""
Repository Layer for SlugSpace

Exports all repository classes for dependency injection.
"""

from app.infrastructure.db.repositories.base_repository import BaseRepository
from app.infrastructure.db.repositories.user_repository import UserRepository
from app.infrastructure.db.repositories.club_repository import ClubRepository
from app.infrastructure.db.repositories.course_repository import CourseRepository
from app.infrastructure.db.repositories.college_repository import CollegeRepository


__all__ = [
    # Base
    "BaseRepository",
    # Repositories
    "UserRepository",
    "ClubRepository",
    "CourseRepository",
    "CollegeRepository",
]
