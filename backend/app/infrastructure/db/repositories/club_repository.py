"""
Club Repository for SlugSpace

Supplies recommendation candidates: active clubs the user has not joined,
plus the member counts the popularity bonus needs.
"""

from typing import Collection, Dict, List, Optional
from uuid import UUID

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.db.models.club import Club, ClubCreate, ClubMembership, ClubUpdate
from app.infrastructure.db.models.user import User
from app.infrastructure.db.repositories.base_repository import BaseRepository


class ClubRepository(BaseRepository[Club, ClubCreate, ClubUpdate]):
    """Repository for clubs and club membership aggregates."""
    
    def __init__(self, session: AsyncSession):
        super().__init__(Club, session)
    
    async def list_recommendable(self, exclude_ids: Collection[UUID] = ()) -> List[Club]:
        """
        Active clubs, minus the excluded ids, in name order.
        
        Args:
            exclude_ids: Clubs the user already belongs to
        """
        stmt = select(Club).where(Club.is_active.is_(True))
        if exclude_ids:
            stmt = stmt.where(Club.id.not_in(list(exclude_ids)))
        stmt = stmt.order_by(Club.name)
        return await self._scalars(stmt, "list_recommendable")
    
    async def member_counts(self, club_ids: Collection[UUID]) -> Dict[UUID, int]:
        """Number of members per club."""
        if not club_ids:
            return {}
        stmt = (
            select(ClubMembership.club_id, func.count())
            .where(ClubMembership.club_id.in_(list(club_ids)))
            .group_by(ClubMembership.club_id)
        )
        return await self._count_by(stmt, "member_counts")
    
    async def same_college_member_counts(
        self,
        club_ids: Collection[UUID],
        college: Optional[str],
    ) -> Dict[UUID, int]:
        """Members per club who share ``college`` with the requesting user."""
        if not club_ids or not college:
            return {}
        stmt = (
            select(ClubMembership.club_id, func.count())
            .join(User, User.id == ClubMembership.user_id)
            .where(
                ClubMembership.club_id.in_(list(club_ids)),
                User.college == college,
            )
            .group_by(ClubMembership.club_id)
        )
        return await self._count_by(stmt, "same_college_member_counts")
