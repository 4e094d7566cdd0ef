"""
Database Infrastructure Package for SlugSpace

Exports database utilities and dependency providers.
"""

from app.infrastructure.db.database import (
    DatabaseManager,
    get_db_manager,
    get_session,
    get_session_context,
    init_db,
    close_db,
)

from app.infrastructure.db.dependencies import (
    SessionDep,
    get_user_repository,
    get_club_repository,
    get_course_repository,
    get_college_repository,
    UserRepoDep,
    ClubRepoDep,
    CourseRepoDep,
    CollegeRepoDep,
)


__all__ = [
    # Database management
    "DatabaseManager",
    "get_db_manager",
    "get_session",
    "get_session_context",
    "init_db",
    "close_db",
    # Dependencies
    "SessionDep",
    "get_user_repository",
    "get_club_repository",
    "get_course_repository",
    "get_college_repository",
    "UserRepoDep",
    "ClubRepoDep",
    "CourseRepoDep",
    "CollegeRepoDep",
]
