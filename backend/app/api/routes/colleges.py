"""
College Routes

College personality quiz matching.
"""

from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from app.api.dependencies import get_recommendation_service
from app.infrastructure.services.recommendation_service import RecommendationService


router = APIRouter(prefix="/api/v1/colleges", tags=["Colleges"])


class QuizRequest(BaseModel):
    """Tags collected by the college survey."""
    tags: List[str] = Field(default_factory=list, max_length=100)


class QuizMatch(BaseModel):
    """College ranked by quiz tag overlap."""
    id: str
    name: str
    tags: List[str]
    score: int
    matchingTags: List[str]


@router.post("/match", response_model=List[QuizMatch])
async def match_colleges(
    request: QuizRequest,
    service: RecommendationService = Depends(get_recommendation_service),
):
    """Rank colleges by how many of the selected tags they carry."""
    return await service.match_college_quiz(request.tags)
