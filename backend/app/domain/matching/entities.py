"""
Per-variant field extractors.

The matcher only sees name, description, category labels and a
popularity bonus. This module maps each candidate variant onto those.
"""

from typing import Dict

from app.domain.matching.interfaces import (
    Candidate,
    Club,
    College,
    Course,
    EntityFields,
)
from app.domain.matching.weights import DEFAULT_WEIGHTS, MatchWeights


def _labels(*values) -> list:
    return [v for v in values if v]


def club_popularity(club: Club, weights: MatchWeights = DEFAULT_WEIGHTS) -> float:
    """Joins/views activity plus members from the user's own college."""
    activity = (club.join_count or 0) + (club.view_count or 0)
    return (
        activity * weights.club_activity
        + (club.join_count or 0) * weights.club_recency
        + (club.same_college_members or 0) * weights.same_college_member
    )


def course_popularity(course: Course, weights: MatchWeights = DEFAULT_WEIGHTS) -> float:
    activity = (course.join_count or 0) + (course.view_count or 0)
    return (
        activity * weights.course_activity
        + (course.study_group_count or 0) * weights.course_study_group
    )


def build_entity_fields(weights: MatchWeights = DEFAULT_WEIGHTS) -> Dict[type, EntityFields]:
    """
    Build the extractor registry for a weight table.
    
    Returns:
        Mapping of candidate class -> EntityFields
    """
    return {
        Club: EntityFields(
            get_name=lambda c: c.name or "",
            get_description=lambda c: c.description or "",
            get_categories=lambda c: _labels(c.category),
            get_popularity=lambda c: club_popularity(c, weights),
        ),
        Course: EntityFields(
            get_name=lambda c: c.name or "",
            get_description=lambda c: c.description or "",
            get_categories=lambda c: _labels(c.department, c.code),
            get_popularity=lambda c: course_popularity(c, weights),
        ),
        College: EntityFields(
            get_name=lambda c: c.name or "",
            get_description=lambda c: c.description or "",
            get_categories=lambda c: _labels(*(c.tags or [])),
            get_popularity=lambda c: 0.0,
        ),
    }


def fields_for(candidate: Candidate, registry: Dict[type, EntityFields]) -> EntityFields:
    """Look up the extractor for a candidate's variant."""
    try:
        return registry[type(candidate)]
    except KeyError:
        raise TypeError(
            f"Unsupported candidate type: {type(candidate).__name__}"
        ) from None
