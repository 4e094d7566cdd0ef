"""
Recommendation Service

Glue between storage and the interest matcher. Loads the user, fetches
candidates the user is not already part of, ranks them, attaches reasons
and serializes the result for the API. Caching around the ranking is
best-effort.
"""

import logging
import re
from typing import Any, Dict, List, Optional, Sequence
from uuid import UUID

from app.config.settings import get_settings
from app.domain.matching import (
    Club,
    College,
    Course,
    EntityType,
    InterestMatcher,
    ReasonBuilder,
    ScoredResult,
    UserProfile,
    match_colleges_by_tags,
    match_percentage,
)
from app.infrastructure.cache.recommendation_cache import RecommendationCache
from app.infrastructure.db.models.club import Club as ClubRow
from app.infrastructure.db.models.college import College as CollegeRow
from app.infrastructure.db.models.course import Course as CourseRow
from app.infrastructure.db.models.user import User
from app.infrastructure.db.repositories import (
    ClubRepository,
    CollegeRepository,
    CourseRepository,
    UserRepository,
)
from app.infrastructure.exceptions import NotFoundError, ValidationError


logger = logging.getLogger(__name__)


def parse_entity_type(value: Optional[str]) -> EntityType:
    """Parse the ``type`` query parameter; defaults to clubs."""
    if not value:
        return EntityType.CLUB
    try:
        return EntityType(value.lower())
    except ValueError:
        raise ValidationError(
            f"Invalid recommendation type '{value}'",
            field="type",
            value=value,
        ) from None


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def clamp_limit(value: Optional[Any], default: Optional[int] = None, maximum: Optional[int] = None) -> int:
    """
    Parse and clamp a requested limit to 1..maximum.

    Like parseInt, the leading integer is used ("7abc" -> 7, "5.5" -> 5).
    Values without one fall back to the default.
    """
    settings = get_settings()
    default = default if default is not None else settings.default_recommendation_limit
    maximum = maximum if maximum is not None else settings.max_recommendation_limit
    match = _LEADING_INT.match(str(value)) if value is not None else None
    limit = int(match.group(1)) if match else default
    return min(maximum, max(1, limit))


def profile_from_user(user: User) -> UserProfile:
    return UserProfile(
        interests=list(user.interests or []),
        major=user.major,
        year=user.year,
        college=user.college,
    )


def college_from_row(row: CollegeRow) -> College:
    return College(
        id=str(row.id),
        name=row.name,
        description=row.description,
        tags=list(row.stereotypes or []),
    )


class RecommendationService:
    """
    Personalized recommendations for clubs, courses and colleges.

    Repositories supply the candidate set already filtered for active
    status and existing memberships; the matcher trusts that.
    """

    def __init__(
        self,
        users: UserRepository,
        clubs: ClubRepository,
        courses: CourseRepository,
        colleges: CollegeRepository,
        cache: Optional[RecommendationCache] = None,
        matcher: Optional[InterestMatcher] = None,
        reasons: Optional[ReasonBuilder] = None,
    ):
        self._users = users
        self._clubs = clubs
        self._courses = courses
        self._colleges = colleges
        self._cache = cache
        self._matcher = matcher or InterestMatcher()
        self._reasons = reasons or ReasonBuilder(self._matcher.weights)

    async def get_recommendations(
        self,
        user_id: UUID,
        entity_type: EntityType,
        limit: int,
    ) -> List[Dict[str, Any]]:
        """
        Ranked, serialized recommendations for a user.

        Args:
            user_id: User to recommend for
            entity_type: clubs, courses or colleges
            limit: Maximum number of results (already clamped)

        Returns:
            List of JSON-ready dicts, best first

        Raises:
            NotFoundError: Unknown user
        """
        cache_user = str(user_id)
        if self._cache is not None:
            cached = await self._cache.get(cache_user, entity_type.value, limit)
            if cached is not None:
                return cached

        user = await self._users.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found", operation="get_recommendations", table="users")
        profile = profile_from_user(user)

        if entity_type == EntityType.CLUB:
            payload = await self._recommend_clubs(user_id, profile, limit)
        elif entity_type == EntityType.COURSE:
            payload = await self._recommend_courses(user_id, profile, limit)
        else:
            payload = await self._recommend_colleges(profile, limit)

        logger.info(
            f"[RECOMMEND] {len(payload)} {entity_type.value} for user {user_id} (limit={limit})"
        )

        if self._cache is not None:
            await self._cache.set(cache_user, entity_type.value, limit, payload)
        return payload

    async def match_college_quiz(self, tags: Sequence[str]) -> List[Dict[str, Any]]:
        """Rank stored colleges against personality-quiz tags."""
        colleges = [college_from_row(row) for row in await self._colleges.list_all()]
        return [
            {
                "id": match.college.id,
                "name": match.college.name,
                "tags": match.college.tags,
                "score": match.score,
                "matchingTags": match.matching_tags,
            }
            for match in match_colleges_by_tags(tags, colleges)
        ]

    # =========================================================================
    # Per-type pipelines
    # =========================================================================

    async def _recommend_clubs(
        self,
        user_id: UUID,
        profile: UserProfile,
        limit: int,
    ) -> List[Dict[str, Any]]:
        joined = await self._users.get_joined_club_ids(user_id)
        rows: List[ClubRow] = await self._clubs.list_recommendable(exclude_ids=joined)
        ids = [row.id for row in rows]
        members = await self._clubs.member_counts(ids)
        same_college = await self._clubs.same_college_member_counts(ids, profile.college)

        candidates = [
            Club(
                id=str(row.id),
                name=row.name,
                description=row.description,
                category=row.category,
                join_count=row.join_count,
                view_count=row.view_count,
                member_count=members.get(row.id, 0),
                same_college_members=same_college.get(row.id, 0),
            )
            for row in rows
        ]
        results = self._rank(candidates, profile, limit)
        return [self._serialize_club(r, profile) for r in results]

    async def _recommend_courses(
        self,
        user_id: UUID,
        profile: UserProfile,
        limit: int,
    ) -> List[Dict[str, Any]]:
        joined = await self._users.get_study_group_course_ids(user_id)
        rows: List[CourseRow] = await self._courses.list_recommendable(exclude_ids=joined)
        groups = await self._courses.study_group_counts([row.id for row in rows])

        candidates = [
            Course(
                id=str(row.id),
                code=row.code,
                name=row.name,
                description=row.description,
                department=row.department,
                join_count=row.join_count,
                view_count=row.view_count,
                study_group_count=groups.get(row.id, 0),
            )
            for row in rows
        ]
        results = self._rank(candidates, profile, limit)
        return [self._serialize_course(r, profile) for r in results]

    async def _recommend_colleges(self, profile: UserProfile, limit: int) -> List[Dict[str, Any]]:
        candidates = [college_from_row(row) for row in await self._colleges.list_all()]
        results = self._rank(candidates, profile, limit)
        return [self._serialize_college(r, profile) for r in results]

    def _rank(self, candidates, profile: UserProfile, limit: int) -> List[ScoredResult]:
        results = self._matcher.recommend(candidates, profile, limit)
        self._reasons.attach(results, profile)
        return results

    # =========================================================================
    # Serialization
    # =========================================================================

    @staticmethod
    def _percentage(result: ScoredResult, profile: UserProfile) -> int:
        return match_percentage(result.score, len(profile.interests))

    def _serialize_club(self, result: ScoredResult, profile: UserProfile) -> Dict[str, Any]:
        club: Club = result.candidate
        return {
            "id": club.id,
            "name": club.name,
            "category": club.category,
            "description": club.description,
            "memberCount": club.member_count,
            "popularityScore": club.join_count + club.view_count,
            "recommendationScore": result.score,
            "matchPercentage": self._percentage(result, profile),
            "reasonsToJoin": result.reasons,
            "type": "club",
        }

    def _serialize_course(self, result: ScoredResult, profile: UserProfile) -> Dict[str, Any]:
        course: Course = result.candidate
        return {
            "id": course.id,
            "code": course.code,
            "name": course.name,
            "description": course.description,
            "studyGroupCount": course.study_group_count,
            "activityScore": course.join_count + course.view_count,
            "recommendationScore": result.score,
            "matchPercentage": self._percentage(result, profile),
            "reasonsToJoin": result.reasons,
            "type": "course",
        }

    def _serialize_college(self, result: ScoredResult, profile: UserProfile) -> Dict[str, Any]:
        college: College = result.candidate
        return {
            "id": college.id,
            "name": college.name,
            "stereotypes": college.tags,
            "recommendationScore": result.score,
            "matchPercentage": self._percentage(result, profile),
            "matchingReasons": result.reasons,
            "type": "college",
        }
