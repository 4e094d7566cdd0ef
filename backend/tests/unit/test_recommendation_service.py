"""
Unit tests for RecommendationService.

Repositories and cache are AsyncMocks; rows are simple attribute bags
shaped like the SQLModel tables.
"""

import pytest
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

from app.domain.matching import EntityType
from app.infrastructure.cache.recommendation_cache import RecommendationCache
from app.infrastructure.exceptions import NotFoundError, ValidationError
from app.infrastructure.services.recommendation_service import (
    RecommendationService,
    clamp_limit,
    parse_entity_type,
)


USER_ID = uuid4()
JUDO_ID = uuid4()
BAKING_ID = uuid4()


def _user(**overrides):
    values = dict(
        id=USER_ID,
        interests=["Martial Arts"],
        major="Computer Science",
        year="freshman",
        college="Crown",
    )
    values.update(overrides)
    return SimpleNamespace(**values)


def _club_row(id, name, category="", description="", join_count=0, view_count=0):
    return SimpleNamespace(
        id=id,
        name=name,
        category=category,
        description=description,
        join_count=join_count,
        view_count=view_count,
    )


@pytest.fixture
def repos():
    users = MagicMock()
    users.get_by_id = AsyncMock(return_value=_user())
    users.get_joined_club_ids = AsyncMock(return_value=set())
    users.get_study_group_course_ids = AsyncMock(return_value=set())

    clubs = MagicMock()
    clubs.list_recommendable = AsyncMock(return_value=[])
    clubs.member_counts = AsyncMock(return_value={})
    clubs.same_college_member_counts = AsyncMock(return_value={})

    courses = MagicMock()
    courses.list_recommendable = AsyncMock(return_value=[])
    courses.study_group_counts = AsyncMock(return_value={})

    colleges = MagicMock()
    colleges.list_all = AsyncMock(return_value=[])

    return SimpleNamespace(users=users, clubs=clubs, courses=courses, colleges=colleges)


@pytest.fixture
def cache():
    cache = MagicMock()
    cache.get = AsyncMock(return_value=None)
    cache.set = AsyncMock(return_value=True)
    return cache


@pytest.fixture
def service(repos, cache):
    return RecommendationService(
        users=repos.users,
        clubs=repos.clubs,
        courses=repos.courses,
        colleges=repos.colleges,
        cache=cache,
    )


# ============== Request Parsing ==============

class TestParseEntityType:

    def test_default_is_clubs(self):
        assert parse_entity_type(None) == EntityType.CLUB
        assert parse_entity_type("") == EntityType.CLUB

    def test_known_types(self):
        assert parse_entity_type("courses") == EntityType.COURSE
        assert parse_entity_type("Colleges") == EntityType.COLLEGE

    def test_unknown_type(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_entity_type("dorms")

        assert exc_info.value.details == {"field": "type", "value": "dorms"}


class TestClampLimit:

    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, 10),
            ("5", 5),
            (0, 1),
            (-3, 1),
            (500, 50),
            ("abc", 10),
            ("7abc", 7),
            ("5.5", 5),
            (" 12", 12),
        ],
    )
    def test_clamps(self, value, expected):
        assert clamp_limit(value, default=10, maximum=50) == expected


# ============== Clubs ==============

class TestClubRecommendations:

    @pytest.mark.asyncio
    async def test_ranks_and_serializes_clubs(self, service, repos):
        repos.clubs.list_recommendable.return_value = [
            _club_row(BAKING_ID, "Baking Society", "Special Interest"),
            _club_row(JUDO_ID, "UCSC Judo Club", "Sport Club"),
        ]
        repos.clubs.member_counts.return_value = {JUDO_ID: 25}

        results = await service.get_recommendations(USER_ID, EntityType.CLUB, 5)

        assert results == [
            {
                "id": str(JUDO_ID),
                "name": "UCSC Judo Club",
                "category": "Sport Club",
                "description": "",
                "memberCount": 25,
                "popularityScore": 0,
                "recommendationScore": 10,
                "matchPercentage": 100,
                "reasonsToJoin": ["Matches your interests", "Active community"],
                "type": "club",
            }
        ]

    @pytest.mark.asyncio
    async def test_joined_clubs_are_excluded_at_the_source(self, service, repos):
        joined = {JUDO_ID}
        repos.users.get_joined_club_ids.return_value = joined

        await service.get_recommendations(USER_ID, EntityType.CLUB, 5)

        repos.users.get_joined_club_ids.assert_awaited_once_with(USER_ID)
        repos.clubs.list_recommendable.assert_awaited_once_with(exclude_ids=joined)

    @pytest.mark.asyncio
    async def test_same_college_members_use_profile_college(self, service, repos):
        repos.clubs.list_recommendable.return_value = [_club_row(JUDO_ID, "UCSC Judo Club")]

        await service.get_recommendations(USER_ID, EntityType.CLUB, 5)

        repos.clubs.same_college_member_counts.assert_awaited_once_with([JUDO_ID], "Crown")

    @pytest.mark.asyncio
    async def test_no_interests_returns_only_popular(self, service, repos):
        repos.users.get_by_id.return_value = _user(interests=[], major=None)
        popular_id = uuid4()
        repos.clubs.list_recommendable.return_value = [
            _club_row(JUDO_ID, "UCSC Judo Club"),
            _club_row(popular_id, "Popular Club", join_count=5, view_count=5),
        ]

        results = await service.get_recommendations(USER_ID, EntityType.CLUB, 5)

        assert [r["id"] for r in results] == [str(popular_id)]
        assert results[0]["matchPercentage"] == 0


# ============== Courses & Colleges ==============

class TestOtherTypes:

    @pytest.mark.asyncio
    async def test_courses(self, service, repos):
        course_id = uuid4()
        repos.users.get_by_id.return_value = _user(interests=[])
        repos.courses.list_recommendable.return_value = [
            SimpleNamespace(
                id=course_id,
                code="CSE 30",
                name="Programming Abstractions: Python",
                description="Introduction to programming in Python.",
                department="Computer Science and Engineering",
                join_count=4,
                view_count=6,
            )
        ]
        repos.courses.study_group_counts.return_value = {course_id: 5}

        results = await service.get_recommendations(USER_ID, EntityType.COURSE, 5)

        assert len(results) == 1
        course = results[0]
        assert course["type"] == "course"
        assert course["code"] == "CSE 30"
        assert course["studyGroupCount"] == 5
        assert course["activityScore"] == 10
        # major 'computer' + 'science' (4) + popularity 10 * 0.3 + 5 * 0.1
        assert course["recommendationScore"] == pytest.approx(7.5)
        assert course["reasonsToJoin"] == ["Active study groups", "High student engagement"]

    @pytest.mark.asyncio
    async def test_colleges(self, service, repos):
        crown_id = uuid4()
        repos.users.get_by_id.return_value = _user(interests=["Tech"])
        repos.colleges.list_all.return_value = [
            SimpleNamespace(id=crown_id, name="Crown College", description=None, stereotypes=["stem", "technology"]),
            SimpleNamespace(id=uuid4(), name="Merrill College", description=None, stereotypes=["quiet"]),
        ]

        results = await service.get_recommendations(USER_ID, EntityType.COLLEGE, 5)

        assert [r["id"] for r in results] == [str(crown_id)]
        assert results[0]["stereotypes"] == ["stem", "technology"]
        assert results[0]["matchingReasons"] == ["Great for STEM majors"]
        assert results[0]["type"] == "college"


# ============== Errors & Caching ==============

class TestServiceBehaviour:

    @pytest.mark.asyncio
    async def test_unknown_user(self, service, repos):
        repos.users.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await service.get_recommendations(USER_ID, EntityType.CLUB, 5)

    @pytest.mark.asyncio
    async def test_broken_cache_does_not_fail_requests(self, repos):
        service = RecommendationService(
            users=repos.users,
            clubs=repos.clubs,
            courses=repos.courses,
            colleges=repos.colleges,
            cache=RecommendationCache(redis_url="localhost:6379", key_prefix="test"),
        )

        assert await service.get_recommendations(USER_ID, EntityType.CLUB, 5) == []

        repos.users.get_by_id.return_value = None
        with pytest.raises(NotFoundError):
            await service.get_recommendations(USER_ID, EntityType.CLUB, 5)

    @pytest.mark.asyncio
    async def test_cache_hit_short_circuits(self, service, repos, cache):
        cached = [{"id": "c1", "type": "club"}]
        cache.get.return_value = cached

        results = await service.get_recommendations(USER_ID, EntityType.CLUB, 5)

        assert results == cached
        cache.get.assert_awaited_once_with(str(USER_ID), "clubs", 5)
        repos.users.get_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_results_are_written_to_cache(self, service, cache):
        results = await service.get_recommendations(USER_ID, EntityType.COURSE, 3)

        cache.set.assert_awaited_once_with(str(USER_ID), "courses", 3, results)

    @pytest.mark.asyncio
    async def test_works_without_cache(self, repos):
        service = RecommendationService(
            users=repos.users,
            clubs=repos.clubs,
            courses=repos.courses,
            colleges=repos.colleges,
        )

        assert await service.get_recommendations(USER_ID, EntityType.CLUB, 5) == []

    @pytest.mark.asyncio
    async def test_college_quiz(self, service, repos):
        porter_id = uuid4()
        repos.colleges.list_all.return_value = [
            SimpleNamespace(id=porter_id, name="Porter College", description=None, stereotypes=["creative", "art", "music"]),
            SimpleNamespace(id=uuid4(), name="Merrill College", description=None, stereotypes=["quiet"]),
        ]

        results = await service.match_college_quiz(["music", "art"])

        assert results == [
            {
                "id": str(porter_id),
                "name": "Porter College",
                "tags": ["creative", "art", "music"],
                "score": 2,
                "matchingTags": ["art", "music"],
            }
        ]
