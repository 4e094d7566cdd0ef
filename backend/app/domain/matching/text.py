"""
Text matching helpers for the interest matcher.

Single words are matched on regex word boundaries so that "ai" does not
hit "maintain". Phrases (anything containing a space) must be bounded by
whitespace or the ends of the text instead.
"""

import re
from functools import lru_cache
from typing import Iterable, Optional, Pattern


def normalize(value: Optional[str]) -> str:
    """Lower-case and trim; None becomes an empty string."""
    if not value:
        return ""
    return value.strip().lower()


def is_phrase(term: str) -> bool:
    return " " in term


@lru_cache(maxsize=1024)
def _term_pattern(term: str) -> Pattern[str]:
    escaped = re.escape(term)
    if is_phrase(term):
        return re.compile(rf"(?:^|\s){escaped}(?:\s|$)", re.IGNORECASE)
    return re.compile(rf"\b{escaped}\b", re.IGNORECASE)


def whole_word_match(text: str, term: str) -> bool:
    """
    Check whether ``term`` occurs in ``text`` as a whole word or phrase.
    
    Args:
        text: Text to search (any case)
        term: Word or phrase to look for (any case)
        
    Returns:
        True if the term appears at word (or phrase) boundaries
    """
    if not text or not term:
        return False
    return _term_pattern(term).search(text) is not None


def contains_interest(text: str, interest: str) -> bool:
    """
    Match a raw interest against one field.
    
    Single-word interests need a whole-word hit; multi-word interests
    only need to appear as a substring.
    """
    if not text or not interest:
        return False
    if len(interest.split()) == 1:
        return whole_word_match(text, interest)
    return interest in text


def significant_words(value: Optional[str], min_length: int = 4) -> list:
    """Words of ``value`` with at least ``min_length`` characters."""
    return [w for w in normalize(value).split() if len(w) >= min_length]


def join_text(parts: Iterable[str]) -> str:
    return " ".join(parts)
