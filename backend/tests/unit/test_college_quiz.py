"""
Unit tests for college quiz matching.
"""

from app.domain.matching import College, match_colleges_by_tags


def test_ranks_by_tag_overlap(sample_colleges):
    matches = match_colleges_by_tags(["creative", "music", "quiet"], sample_colleges)

    assert [m.college.id for m in matches] == ["porter", "merrill"]
    assert [m.score for m in matches] == [2, 1]


def test_matching_tags_follow_college_order(sample_colleges):
    matches = match_colleges_by_tags(["music", "creative"], sample_colleges)

    assert matches[0].matching_tags == ["creative", "music"]


def test_colleges_without_overlap_are_dropped(sample_colleges):
    assert match_colleges_by_tags(["party"], sample_colleges) == []
    assert match_colleges_by_tags([], sample_colleges) == []


def test_tags_are_compared_exactly(sample_colleges):
    assert match_colleges_by_tags(["STEM", "Art "], sample_colleges) == []


def test_ties_keep_input_order():
    colleges = [
        College(id="a", name="A", tags=["nature"]),
        College(id="b", name="B", tags=["nature"]),
    ]

    matches = match_colleges_by_tags(["nature"], colleges)

    assert [m.college.id for m in matches] == ["a", "b"]


def test_repeated_answers_count_each_time(sample_colleges):
    matches = match_colleges_by_tags(["stem", "stem", "art"], sample_colleges)

    assert [(m.college.id, m.score) for m in matches] == [("crown", 2), ("porter", 1)]
