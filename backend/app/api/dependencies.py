"""
API Dependencies

FastAPI dependency injection for authentication and common services.

Session tokens are HS256 JWTs signed by the web frontend with the shared
JWT_SECRET. They are always verified; never decoded without a signature
check.
"""

import logging
from functools import lru_cache
from typing import Optional

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.config.settings import get_settings
from app.infrastructure.cache.recommendation_cache import RecommendationCache
from app.infrastructure.db.dependencies import (
    ClubRepoDep,
    CollegeRepoDep,
    CourseRepoDep,
    UserRepoDep,
)
from app.infrastructure.services.recommendation_service import RecommendationService


logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def decode_token(token: str) -> dict:
    """
    Verify and decode a session JWT.

    Raises:
        HTTPException 401: secret not configured, token expired or invalid
    """
    settings = get_settings()
    if not settings.jwt_secret:
        logger.error("JWT_SECRET is not configured; rejecting token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication is not configured",
        )

    try:
        return jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired",
        )
    except jwt.InvalidTokenError as e:
        logger.warning(f"JWT verification failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or unverifiable token",
        )


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> str:
    """
    Extract and verify the user ID (``sub`` claim) from a bearer JWT.

    Raises:
        HTTPException 401: token missing, expired, or invalid.
    """
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing authorization token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = decode_token(credentials.credentials)
    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token: missing user ID",
        )

    return str(user_id)


@lru_cache
def get_recommendation_cache() -> RecommendationCache:
    """Process-wide recommendation cache."""
    return RecommendationCache()


async def get_recommendation_service(
    users: UserRepoDep,
    clubs: ClubRepoDep,
    courses: CourseRepoDep,
    colleges: CollegeRepoDep,
    cache: RecommendationCache = Depends(get_recommendation_cache),
) -> RecommendationService:
    """Request-scoped RecommendationService over the request's session."""
    return RecommendationService(
        users=users,
        clubs=clubs,
        courses=courses,
        colleges=colleges,
        cache=cache,
    )
