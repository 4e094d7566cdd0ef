"""
User Repository for SlugSpace

User lookups plus the membership ids the recommendation service uses to
pre-filter candidates.
"""

from typing import Set
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.db.models.club import ClubMembership
from app.infrastructure.db.models.course import StudyGroupMembership
from app.infrastructure.db.models.user import User, UserCreate, UserUpdate
from app.infrastructure.db.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository[User, UserCreate, UserUpdate]):
    """Repository for users and their memberships."""
    
    def __init__(self, session: AsyncSession):
        super().__init__(User, session)
    
    async def get_joined_club_ids(self, user_id: UUID) -> Set[UUID]:
        """Ids of clubs the user is a member of."""
        stmt = select(ClubMembership.club_id).where(ClubMembership.user_id == user_id)
        return set(await self._scalars(stmt, "get_joined_club_ids"))
    
    async def get_study_group_course_ids(self, user_id: UUID) -> Set[UUID]:
        """Ids of courses the user already has a study group for."""
        stmt = select(StudyGroupMembership.course_id).where(
            StudyGroupMembership.user_id == user_id
        )
        return set(await self._scalars(stmt, "get_study_group_course_ids"))
