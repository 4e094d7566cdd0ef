"""
Dependency Injection Providers for SlugSpace

FastAPI dependencies for database sessions and repositories.
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.db.database import get_session
from app.infrastructure.db.repositories import (
    UserRepository,
    ClubRepository,
    CourseRepository,
    CollegeRepository,
)


# Type alias for session dependency
SessionDep = Annotated[AsyncSession, Depends(get_session)]


async def get_user_repository(session: SessionDep) -> AsyncGenerator[UserRepository, None]:
    """
    Dependency provider for UserRepository.
    
    Usage:
        @router.get("/me")
        async def me(repo: UserRepoDep):
            ...
    """
    yield UserRepository(session)


async def get_club_repository(session: SessionDep) -> AsyncGenerator[ClubRepository, None]:
    yield ClubRepository(session)


async def get_course_repository(session: SessionDep) -> AsyncGenerator[CourseRepository, None]:
    yield CourseRepository(session)


async def get_college_repository(session: SessionDep) -> AsyncGenerator[CollegeRepository, None]:
    yield CollegeRepository(session)


# Type aliases for repository dependencies
UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
ClubRepoDep = Annotated[ClubRepository, Depends(get_club_repository)]
CourseRepoDep = Annotated[CourseRepository, Depends(get_course_repository)]
CollegeRepoDep = Annotated[CollegeRepository, Depends(get_college_repository)]
