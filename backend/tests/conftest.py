"""
Test configuration and fixtures for SlugSpace.

Provides shared fixtures for unit and integration tests.
"""

import pytest
from unittest.mock import MagicMock, AsyncMock

from fastapi.testclient import TestClient

from app.domain.matching import (
    Club,
    College,
    Course,
    InterestMatcher,
    UserProfile,
)


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def app():
    """Get the FastAPI application with clean dependency overrides."""
    from app.main import app
    app.dependency_overrides.clear()
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """Get synchronous test client."""
    return TestClient(app)


# =============================================================================
# Mock Fixtures
# =============================================================================

@pytest.fixture
def mock_session():
    """Mock async session for repository tests."""
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.add = MagicMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    return session


@pytest.fixture
def mock_redis():
    """Mock redis.asyncio client."""
    client = MagicMock()
    client.get = AsyncMock(return_value=None)
    client.setex = AsyncMock(return_value=True)
    client.delete = AsyncMock(return_value=0)
    client.aclose = AsyncMock()
    return client


# =============================================================================
# Matching Fixtures
# =============================================================================

@pytest.fixture
def matcher():
    """Interest matcher with default weights."""
    return InterestMatcher()


@pytest.fixture
def martial_arts_profile():
    """Student interested only in martial arts."""
    return UserProfile(interests=["Martial Arts"])


@pytest.fixture
def judo_club():
    return Club(
        id="c1",
        name="UCSC Judo Club",
        category="Sport Club",
        description="",
    )


@pytest.fixture
def baking_club():
    return Club(
        id="c2",
        name="Baking Society",
        category="Special Interest",
        description="",
    )


@pytest.fixture
def sample_clubs():
    """A small mixed club catalogue."""
    return [
        Club(
            id="running",
            name="UCSC Running Club",
            category="Sport Club",
            description="Weekly group runs around campus.",
        ),
        Club(
            id="acm",
            name="Association for Computing Machinery",
            category="Academic",
            description="Coding workshops, hackathons and machine learning talks.",
            join_count=12,
            view_count=30,
        ),
        Club(
            id="sigma",
            name="Sigma Chi",
            category="Greek Letter",
            description="Social fraternity focused on leadership.",
        ),
        Club(
            id="film",
            name="Film Society",
            category="Arts",
            description="Screenings and a student film festival.",
        ),
    ]


@pytest.fixture
def sample_courses():
    return [
        Course(
            id="cse30",
            code="CSE 30",
            name="Programming Abstractions: Python",
            description="Introduction to programming in Python.",
            department="Computer Science and Engineering",
            join_count=4,
            view_count=6,
            study_group_count=5,
        ),
        Course(
            id="math19a",
            code="MATH 19A",
            name="Calculus for Science, Engineering, and Mathematics",
            department="Mathematics",
        ),
    ]


@pytest.fixture
def sample_colleges():
    return [
        College(id="crown", name="Crown College", tags=["stem", "focused", "technology"]),
        College(id="porter", name="Porter College", tags=["creative", "art", "music"]),
        College(id="merrill", name="Merrill College", tags=["quiet", "nature"]),
    ]
