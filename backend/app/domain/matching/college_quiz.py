"""
College quiz matching.

The survey collects personality tags; each residential college lists the
tags it is known for. A college scores one point per selected tag it
carries.
"""

from typing import Iterable, List, Sequence

from app.domain.matching.interfaces import College, CollegeQuizMatch


def match_colleges_by_tags(
    selected_tags: Iterable[str],
    colleges: Sequence[College],
) -> List[CollegeQuizMatch]:
    """
    Rank colleges by tag overlap with the quiz answers.
    
    Tags are compared exactly. Colleges with no overlap are left out;
    ties keep the order of ``colleges``.
    
    Args:
        selected_tags: Tags collected by the survey; each occurrence counts
        colleges: Colleges to rank
        
    Returns:
        CollegeQuizMatch list, best first
    """
    selected = list(selected_tags)
    selected_set = set(selected)
    
    matches = []
    for college in colleges:
        tags = college.tags or []
        score = sum(1 for tag in selected if tag in tags)
        if score > 0:
            matches.append(
                CollegeQuizMatch(
                    college=college,
                    score=score,
                    matching_tags=[t for t in tags if t in selected_set],
                )
            )
    
    matches.sort(key=lambda m: m.score, reverse=True)
    return matches
