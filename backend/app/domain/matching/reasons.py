"""
Recommendation reasons.

Short explanations shown under each recommendation. Independent of
ranking: results are already sorted when reasons are attached.
"""

from typing import List, Sequence

from app.domain.matching.interfaces import (
    Club,
    College,
    Course,
    ScoredResult,
    UserProfile,
)
from app.domain.matching.text import normalize
from app.domain.matching.weights import DEFAULT_WEIGHTS, MatchWeights


MATCHES_INTERESTS = "Matches your interests"
POPULAR = "Popular among students"
ACTIVE_COMMUNITY = "Active community"
ACTIVE_STUDY_GROUPS = "Active study groups"
HIGH_ENGAGEMENT = "High student engagement"
STEM_FRIENDLY = "Great for STEM majors"
CREATIVE_COMMUNITY = "Creative community"


class ReasonBuilder:
    """Threshold checks producing human-readable reasons per variant."""
    
    def __init__(self, weights: MatchWeights = DEFAULT_WEIGHTS):
        self._weights = weights
    
    def build(self, result: ScoredResult, profile: UserProfile) -> List[str]:
        candidate = result.candidate
        if isinstance(candidate, Club):
            return self._club_reasons(result, candidate)
        if isinstance(candidate, Course):
            return self._course_reasons(candidate)
        if isinstance(candidate, College):
            return self._college_reasons(candidate, profile)
        return []
    
    def attach(
        self,
        results: Sequence[ScoredResult],
        profile: UserProfile,
    ) -> Sequence[ScoredResult]:
        """Fill ``reasons`` on each result in place."""
        for result in results:
            result.reasons = self.build(result, profile)
        return results
    
    def _club_reasons(self, result: ScoredResult, club: Club) -> List[str]:
        reasons = []
        if result.breakdown is not None and result.breakdown.interests > 0:
            reasons.append(MATCHES_INTERESTS)
        if (club.join_count or 0) + (club.view_count or 0) > self._weights.popular_threshold:
            reasons.append(POPULAR)
        if (club.member_count or 0) > self._weights.active_community_members:
            reasons.append(ACTIVE_COMMUNITY)
        return reasons
    
    def _course_reasons(self, course: Course) -> List[str]:
        reasons = []
        if (course.study_group_count or 0) > self._weights.active_study_groups:
            reasons.append(ACTIVE_STUDY_GROUPS)
        if (course.join_count or 0) + (course.view_count or 0) > self._weights.popular_threshold:
            reasons.append(HIGH_ENGAGEMENT)
        return reasons
    
    def _college_reasons(self, college: College, profile: UserProfile) -> List[str]:
        reasons = []
        major = normalize(profile.major)
        tags = " ".join(college.tags or []).lower()
        interests = {normalize(i) for i in profile.interests or []}
        
        if "computer" in major and "stem" in tags:
            reasons.append(STEM_FRIENDLY)
        if "creative" in tags and "art" in interests:
            reasons.append(CREATIVE_COMMUNITY)
        return reasons
