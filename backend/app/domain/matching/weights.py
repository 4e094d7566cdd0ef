"""
Match Weights

Hand-tuned constants for the interest matcher. They are product
behaviour: changing them changes rankings users see.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class MatchWeights:
    """Point values used by InterestMatcher."""
    
    # Keyword-expansion hits
    keyword_name: float = 10.0
    keyword_description: float = 8.0
    keyword_category: float = 6.0
    
    # Raw interest hits
    direct_name: float = 9.0
    direct_description: float = 6.0
    direct_category: float = 5.0
    
    # Broad category group, per matching group keyword
    category_group: float = 3.0
    
    # Category-specific boosts
    greek_letter: float = 10.0
    sport_club_fallback: float = 1.0
    
    # Per major word (> 3 chars) found in the candidate text
    major_token: float = 2.0
    
    # Popularity multipliers
    club_activity: float = 0.2  # x (joins + views)
    club_recency: float = 0.05  # x joins
    same_college_member: float = 0.1  # x members from the user's college
    course_activity: float = 0.3  # x (joins + views)
    course_study_group: float = 0.1  # x study groups
    
    # Reason thresholds
    popular_threshold: int = 5
    active_community_members: int = 20
    active_study_groups: int = 3


DEFAULT_WEIGHTS = MatchWeights()
