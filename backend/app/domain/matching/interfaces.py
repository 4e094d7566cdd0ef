"""
Matching Interfaces for SlugSpace

Data models shared by the interest matcher, the reason builder and the
college quiz. Everything here is constructed per request and discarded
afterwards; nothing is persisted by the matcher.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Generic, List, Optional, Sequence, TypeVar, Union


class EntityType(str, Enum):
    """Kinds of entity that can be recommended."""
    CLUB = "clubs"
    COURSE = "courses"
    COLLEGE = "colleges"


@dataclass
class UserProfile:
    """
    Student profile used for matching.
    
    Interests are compared case-insensitively after trimming. Duplicate
    interests are kept; each occurrence contributes to the score.
    """
    interests: List[str] = field(default_factory=list)
    major: Optional[str] = None
    year: Optional[str] = None
    college: Optional[str] = None  # affiliation, weak tie-break only


@dataclass
class Club:
    """Club candidate."""
    id: str
    name: str
    description: Optional[str] = None
    category: Optional[str] = None
    
    # Activity counters
    join_count: int = 0
    view_count: int = 0
    member_count: int = 0
    same_college_members: int = 0  # members sharing the profile's college


@dataclass
class Course:
    """Course candidate (study-group signup)."""
    id: str
    code: str
    name: str
    description: Optional[str] = None
    department: Optional[str] = None
    
    join_count: int = 0
    view_count: int = 0
    study_group_count: int = 0


@dataclass
class College:
    """Residential college candidate, described by stereotype tags."""
    id: str
    name: str
    description: Optional[str] = None
    tags: List[str] = field(default_factory=list)


Candidate = Union[Club, Course, College]

CandidateT = TypeVar("CandidateT", Club, Course, College)


@dataclass(frozen=True)
class EntityFields(Generic[CandidateT]):
    """
    Field extractor for one candidate variant.
    
    Lets a single scoring routine work over clubs, courses and colleges
    without knowing their attribute names.
    """
    get_name: Callable[[CandidateT], str]
    get_description: Callable[[CandidateT], str]
    get_categories: Callable[[CandidateT], Sequence[str]]
    get_popularity: Callable[[CandidateT], float]


@dataclass
class MatchBreakdown:
    """Where a candidate's points came from."""
    interests: float = 0.0
    major: float = 0.0
    popularity: float = 0.0

    @property
    def total(self) -> float:
        return round(self.interests + self.major + self.popularity, 2)


@dataclass
class ScoredResult(Generic[CandidateT]):
    """Candidate with its relevance score and optional explanations."""
    candidate: CandidateT
    score: float
    reasons: List[str] = field(default_factory=list)
    breakdown: Optional[MatchBreakdown] = None

    @property
    def id(self) -> str:
        return self.candidate.id


@dataclass
class CollegeQuizMatch:
    """College ranked by the personality quiz."""
    college: College
    score: int
    matching_tags: List[str] = field(default_factory=list)
