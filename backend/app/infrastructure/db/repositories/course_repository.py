"""
Course Repository for SlugSpace
"""

from typing import Collection, Dict, List
from uuid import UUID

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.db.models.course import (
    Course,
    CourseCreate,
    CourseUpdate,
    StudyGroupMembership,
)
from app.infrastructure.db.repositories.base_repository import BaseRepository


class CourseRepository(BaseRepository[Course, CourseCreate, CourseUpdate]):
    """Repository for courses and study-group aggregates."""
    
    def __init__(self, session: AsyncSession):
        super().__init__(Course, session)
    
    async def list_recommendable(self, exclude_ids: Collection[UUID] = ()) -> List[Course]:
        """Active courses, minus the excluded ids, in code order."""
        stmt = select(Course).where(Course.is_active.is_(True))
        if exclude_ids:
            stmt = stmt.where(Course.id.not_in(list(exclude_ids)))
        stmt = stmt.order_by(Course.code)
        return await self._scalars(stmt, "list_recommendable")
    
    async def study_group_counts(self, course_ids: Collection[UUID]) -> Dict[UUID, int]:
        """Study-group signups per course."""
        if not course_ids:
            return {}
        stmt = (
            select(StudyGroupMembership.course_id, func.count())
            .where(StudyGroupMembership.course_id.in_(list(course_ids)))
            .group_by(StudyGroupMembership.course_id)
        )
        return await self._count_by(stmt, "study_group_counts")
