"""
Integration tests for the recommendation API endpoints.

Tests the full request/response cycle. Authentication and the service
are swapped through dependency_overrides; scoring runs for real.
"""

import pytest
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

from fastapi.testclient import TestClient

from app.api.dependencies import get_current_user_id, get_recommendation_service
from app.infrastructure.exceptions import NotFoundError
from app.infrastructure.services.recommendation_service import RecommendationService


USER_ID = str(uuid4())
JUDO_ID = uuid4()


@pytest.fixture
def mock_service():
    service = MagicMock()
    service.get_recommendations = AsyncMock(return_value=[])
    service.match_college_quiz = AsyncMock(return_value=[])
    return service


@pytest.fixture
def authed_client(app, mock_service):
    app.dependency_overrides[get_current_user_id] = lambda: USER_ID
    app.dependency_overrides[get_recommendation_service] = lambda: mock_service
    return TestClient(app)


@pytest.fixture
def real_service():
    """RecommendationService over mocked repositories."""
    users = MagicMock()
    users.get_by_id = AsyncMock(return_value=SimpleNamespace(
        interests=["Martial Arts"], major=None, year=None, college=None,
    ))
    users.get_joined_club_ids = AsyncMock(return_value=set())

    clubs = MagicMock()
    clubs.list_recommendable = AsyncMock(return_value=[
        SimpleNamespace(id=JUDO_ID, name="UCSC Judo Club", category="Sport Club",
                        description="", join_count=0, view_count=0),
        SimpleNamespace(id=uuid4(), name="Baking Society", category="Special Interest",
                        description="", join_count=0, view_count=0),
    ])
    clubs.member_counts = AsyncMock(return_value={})
    clubs.same_college_member_counts = AsyncMock(return_value={})

    return RecommendationService(
        users=users,
        clubs=clubs,
        courses=MagicMock(),
        colleges=MagicMock(),
        cache=None,
    )


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_root_endpoint(self, client: TestClient):
        """Root endpoint should return welcome message."""
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert "message" in data

    def test_health_endpoint(self, client: TestClient):
        """Health endpoint should return healthy status."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"


class TestRecommendationAuth:
    """Tests for recommendation endpoint authentication."""

    def test_requires_token(self, app, mock_service):
        app.dependency_overrides[get_recommendation_service] = lambda: mock_service
        response = TestClient(app).get("/api/v1/recommendations", params={"userId": USER_ID})

        assert response.status_code == 401
        mock_service.get_recommendations.assert_not_awaited()

    def test_other_users_recommendations_forbidden(self, authed_client, mock_service):
        response = authed_client.get("/api/v1/recommendations", params={"userId": str(uuid4())})

        assert response.status_code == 403
        mock_service.get_recommendations.assert_not_awaited()


class TestRecommendationRequests:
    """Tests for query parameter handling."""

    def test_requires_user_id(self, authed_client):
        response = authed_client.get("/api/v1/recommendations")
        assert response.status_code == 422

    def test_rejects_malformed_user_id(self, authed_client):
        response = authed_client.get("/api/v1/recommendations", params={"userId": "not-a-uuid"})
        assert response.status_code == 422

    def test_unknown_type(self, authed_client, mock_service):
        response = authed_client.get(
            "/api/v1/recommendations", params={"userId": USER_ID, "type": "dorms"}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "ValidationError"
        mock_service.get_recommendations.assert_not_awaited()

    def test_defaults(self, authed_client, mock_service):
        response = authed_client.get("/api/v1/recommendations", params={"userId": USER_ID})

        assert response.status_code == 200
        user_id, entity_type, limit = mock_service.get_recommendations.await_args.args
        assert str(user_id) == USER_ID
        assert entity_type.value == "clubs"
        assert limit == 10

    @pytest.mark.parametrize("raw, expected", [("3", 3), ("0", 1), ("999", 50), ("many", 10), ("7abc", 7)])
    def test_limit_is_clamped(self, authed_client, mock_service, raw, expected):
        authed_client.get(
            "/api/v1/recommendations",
            params={"userId": USER_ID, "type": "courses", "limit": raw},
        )

        assert mock_service.get_recommendations.await_args.args[2] == expected

    def test_unknown_user(self, authed_client, mock_service):
        mock_service.get_recommendations.side_effect = NotFoundError(
            "User not found", operation="get_recommendations", table="users"
        )

        response = authed_client.get("/api/v1/recommendations", params={"userId": USER_ID})

        assert response.status_code == 404
        assert response.json()["message"] == "User not found"


class TestRecommendationResults:
    """End-to-end scoring through the endpoint."""

    def test_martial_arts_student_gets_judo_club(self, app, real_service):
        app.dependency_overrides[get_current_user_id] = lambda: USER_ID
        app.dependency_overrides[get_recommendation_service] = lambda: real_service

        response = TestClient(app).get(
            "/api/v1/recommendations", params={"userId": USER_ID, "limit": 5}
        )

        assert response.status_code == 200
        data = response.json()
        assert [club["id"] for club in data] == [str(JUDO_ID)]
        assert data[0]["recommendationScore"] == 10
        assert data[0]["matchPercentage"] == 100
        assert data[0]["reasonsToJoin"] == ["Matches your interests"]


class TestCollegeQuiz:
    """Tests for the college quiz endpoint."""

    def test_returns_ranked_matches(self, authed_client, mock_service):
        mock_service.match_college_quiz.return_value = [
            {"id": "porter", "name": "Porter College", "tags": ["art", "music"],
             "score": 2, "matchingTags": ["art", "music"]},
        ]

        response = authed_client.post("/api/v1/colleges/match", json={"tags": ["art", "music"]})

        assert response.status_code == 200
        assert response.json()[0]["matchingTags"] == ["art", "music"]
        mock_service.match_college_quiz.assert_awaited_once_with(["art", "music"])

    def test_rejects_non_list_tags(self, authed_client):
        response = authed_client.post("/api/v1/colleges/match", json={"tags": "art"})
        assert response.status_code == 422
