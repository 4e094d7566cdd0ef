"""
Interest Matcher

Ranks clubs, courses and colleges against a student's interests.

One routine serves all three candidate variants; the variant-specific
parts (which attribute is the name, how popularity is counted) come from
the EntityFields registry in ``entities``. Pure and synchronous: safe to
call from any number of requests concurrently.
"""

import math
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from app.domain.matching.entities import build_entity_fields, fields_for
from app.domain.matching.interfaces import (
    Candidate,
    EntityFields,
    MatchBreakdown,
    ScoredResult,
    UserProfile,
)
from app.domain.matching.keywords import (
    CATEGORY_KEYWORDS,
    GREEK_INTEREST_MARKERS,
    INTEREST_KEYWORDS,
    SPORT_INTEREST_MARKERS,
)
from app.domain.matching.text import (
    contains_interest,
    join_text,
    normalize,
    significant_words,
    whole_word_match,
)
from app.domain.matching.weights import DEFAULT_WEIGHTS, MatchWeights


class InterestMatcher:
    """
    Interest-to-entity scoring engine.
    
    Scores are plain non-negative numbers, higher is better. They are not
    normalised; see ``match_percentage`` for the display value.
    """
    
    def __init__(
        self,
        weights: Optional[MatchWeights] = None,
        interest_keywords: Optional[Mapping[str, Sequence[str]]] = None,
        category_keywords: Optional[Mapping[str, Sequence[str]]] = None,
    ):
        """
        Initialize matcher.
        
        Args:
            weights: Point table. Defaults to DEFAULT_WEIGHTS.
            interest_keywords: Interest expansion table override
            category_keywords: Category group table override
        """
        self._weights = weights or DEFAULT_WEIGHTS
        self._interest_keywords = interest_keywords or INTEREST_KEYWORDS
        self._category_keywords = category_keywords or CATEGORY_KEYWORDS
        self._fields: Dict[type, EntityFields] = build_entity_fields(self._weights)
    
    @property
    def weights(self) -> MatchWeights:
        return self._weights
    
    def score(self, candidate: Candidate, profile: UserProfile) -> float:
        """
        Score a single candidate for the profile.
        
        Args:
            candidate: Club, Course or College
            profile: Student profile
            
        Returns:
            Non-negative score rounded to 2 decimals
        """
        return self.breakdown(candidate, profile).total
    
    def breakdown(self, candidate: Candidate, profile: UserProfile) -> MatchBreakdown:
        """Score a candidate and keep the per-signal split."""
        fields = fields_for(candidate, self._fields)
        
        name = normalize(fields.get_name(candidate))
        description = normalize(fields.get_description(candidate))
        category = normalize(" ".join(fields.get_categories(candidate)))
        combined = join_text((name, description, category))
        
        interest_score = 0.0
        for interest in profile.interests or []:
            interest_score += self._score_interest(
                normalize(interest), name, description, category, combined,
                running_total=interest_score,
            )
        
        major_score = self._score_major(profile.major, combined)
        popularity = max(0.0, float(fields.get_popularity(candidate) or 0.0))
        
        return MatchBreakdown(
            interests=interest_score,
            major=major_score,
            popularity=popularity,
        )
    
    def recommend(
        self,
        candidates: Sequence[Candidate],
        profile: UserProfile,
        limit: int = 10,
    ) -> List[ScoredResult]:
        """
        Rank candidates and return the best ``limit``.
        
        Candidates scoring 0 are dropped. Ties keep their input order.
        Membership exclusion is the caller's job: pass only candidates
        the user has not already joined.
        
        Args:
            candidates: Pre-filtered candidate list
            profile: Student profile
            limit: Maximum results (>= 1)
            
        Returns:
            ScoredResult list sorted by score, descending
        """
        if limit < 1:
            raise ValueError(f"limit must be a positive integer, got {limit}")
        
        scored = []
        for candidate in candidates:
            breakdown = self.breakdown(candidate, profile)
            if breakdown.total > 0:
                scored.append(
                    ScoredResult(candidate=candidate, score=breakdown.total, breakdown=breakdown)
                )
        
        # sorted() is stable, including with reverse=True
        scored.sort(key=lambda r: r.score, reverse=True)
        return scored[:limit]
    
    def partition(
        self,
        candidates: Sequence[Candidate],
        profile: UserProfile,
        limit: int = 10,
    ) -> Tuple[List[ScoredResult], List[Candidate]]:
        """
        Split candidates into recommended results and everything else.
        
        The second list keeps input order; used for "other clubs" listings.
        """
        recommended = self.recommend(candidates, profile, limit)
        return recommended, non_recommended(candidates, recommended)
    
    # ------------------------------------------------------------------
    # Signals
    # ------------------------------------------------------------------
    
    def _score_interest(
        self,
        interest: str,
        name: str,
        description: str,
        category: str,
        combined: str,
        running_total: float,
    ) -> float:
        if not interest:
            return 0.0
        
        w = self._weights
        points = 0.0
        
        # Keyword expansion: first name/description hit ends the walk,
        # category hits accumulate
        for keyword in self._interest_keywords.get(interest, ()):
            if whole_word_match(name, keyword):
                points += w.keyword_name
                break
            if whole_word_match(description, keyword):
                points += w.keyword_description
                break
            if whole_word_match(category, keyword):
                points += w.keyword_category
        
        # Raw interest
        if contains_interest(name, interest):
            points += w.direct_name
        if contains_interest(description, interest):
            points += w.direct_description
        if category and interest in category:
            points += w.direct_category
        
        # Broad groups ("Sports", "Tech", ...)
        for group, keywords in self._category_keywords.items():
            label = group.lower()
            if label == interest or label in interest:
                for keyword in keywords:
                    if whole_word_match(combined, keyword):
                        points += w.category_group
        
        if "greek letter" in category and any(m in interest for m in GREEK_INTEREST_MARKERS):
            points += w.greek_letter
        
        if (
            "sport club" in category
            and any(m in interest for m in SPORT_INTEREST_MARKERS)
            and running_total + points == 0
        ):
            points += w.sport_club_fallback
        
        return points
    
    def _score_major(self, major: Optional[str], combined: str) -> float:
        points = 0.0
        for word in significant_words(major):
            if whole_word_match(combined, word):
                points += self._weights.major_token
        return points


def non_recommended(
    candidates: Sequence[Candidate],
    recommended: Sequence[ScoredResult],
) -> List[Candidate]:
    """Candidates whose id is not among the recommended results."""
    recommended_ids = {r.id for r in recommended}
    return [c for c in candidates if c.id not in recommended_ids]


def match_percentage(score: float, num_interests: int) -> int:
    """
    Display-only match percentage.
    
    ``min(100, round(score / (num_interests * 10) * 100))`` with half-up
    rounding. 0 when the profile has no interests.
    """
    if num_interests <= 0 or score <= 0:
        return 0
    raw = score / (num_interests * 10) * 100
    return min(100, int(math.floor(raw + 0.5)))


_default_matcher = InterestMatcher()


def score(candidate: Candidate, profile: UserProfile) -> float:
    """Score with the default weight table."""
    return _default_matcher.score(candidate, profile)


def recommend(
    candidates: Sequence[Candidate],
    profile: UserProfile,
    limit: int = 10,
) -> List[ScoredResult]:
    """Recommend with the default weight table."""
    return _default_matcher.recommend(candidates, profile, limit)
