# Interest matching module for SlugSpace
from app.domain.matching.interfaces import (
    UserProfile,
    Club,
    Course,
    College,
    Candidate,
    EntityType,
    EntityFields,
    MatchBreakdown,
    ScoredResult,
    CollegeQuizMatch,
)
from app.domain.matching.weights import MatchWeights, DEFAULT_WEIGHTS
from app.domain.matching.matcher import (
    InterestMatcher,
    match_percentage,
    non_recommended,
    recommend,
    score,
)
from app.domain.matching.reasons import ReasonBuilder
from app.domain.matching.college_quiz import match_colleges_by_tags

__all__ = [
    "UserProfile",
    "Club",
    "Course",
    "College",
    "Candidate",
    "EntityType",
    "EntityFields",
    "MatchBreakdown",
    "ScoredResult",
    "CollegeQuizMatch",
    "MatchWeights",
    "DEFAULT_WEIGHTS",
    "InterestMatcher",
    "match_percentage",
    "non_recommended",
    "recommend",
    "score",
    "ReasonBuilder",
    "match_colleges_by_tags",
]
