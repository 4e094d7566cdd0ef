"""
Recommendation Routes

Personalized club, course and college recommendations.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.api.dependencies import get_current_user_id, get_recommendation_service
from app.infrastructure.services.recommendation_service import (
    RecommendationService,
    clamp_limit,
    parse_entity_type,
)


router = APIRouter(prefix="/api/v1", tags=["Recommendations"])


@router.get("/recommendations", response_model=List[dict])
async def get_recommendations(
    user_id: UUID = Query(..., alias="userId", description="User to recommend for"),
    entity_type: Optional[str] = Query("clubs", alias="type", description="clubs, courses or colleges"),
    limit: Optional[str] = Query(None, description="Number of results (clamped to 1-50)"),
    current_user_id: str = Depends(get_current_user_id),
    service: RecommendationService = Depends(get_recommendation_service),
):
    """
    Get personalized recommendations.
    
    Clubs the user already joined (and courses they already have a study
    group for) are never returned. Results are sorted by
    ``recommendationScore`` descending.
    """
    if str(user_id) != current_user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Cannot request recommendations for another user",
        )
    
    parsed_type = parse_entity_type(entity_type)
    return await service.get_recommendations(user_id, parsed_type, clamp_limit(limit))
