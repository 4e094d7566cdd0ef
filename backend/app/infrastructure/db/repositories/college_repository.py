"""
College Repository for SlugSpace
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.db.models.college import College, CollegeCreate, CollegeUpdate
from app.infrastructure.db.repositories.base_repository import BaseRepository


class CollegeRepository(BaseRepository[College, CollegeCreate, CollegeUpdate]):
    """Repository for residential colleges."""
    
    def __init__(self, session: AsyncSession):
        super().__init__(College, session)
    
    async def get_by_slug(self, slug: str) -> Optional[College]:
        stmt = select(College).where(College.slug == slug)
        result = await self._execute(stmt, "get_by_slug")
        return result.scalar_one_or_none()
    
    async def list_all(self) -> List[College]:
        """All colleges in name order."""
        stmt = select(College).order_by(College.name)
        return await self._scalars(stmt, "list_all")
