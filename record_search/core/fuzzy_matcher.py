"""Match classification and edit-distance similarity."""

from enum import Enum
from typing import Optional, Tuple

from rapidfuzz.distance import Levenshtein


class MatchType(str, Enum):
    """Ways a query token can match a field value, strongest first."""
    
    EXACT = "exact"
    PREFIX = "prefix"
    CONTAINS = "contains"
    FUZZY = "fuzzy"


def levenshtein_distance(str1: str, str2: str) -> int:
    """Number of single-character edits turning str1 into str2."""
    return Levenshtein.distance(str1, str2)


def similarity(str1: str, str2: str) -> float:
    """
    Normalized edit-distance similarity in [0, 1].
    
    Two empty strings are fully similar.
    """
    max_len = max(len(str1), len(str2))
    if max_len == 0:
        return 1.0
    
    return 1.0 - (levenshtein_distance(str1, str2) / max_len)


class FuzzyMatcher:
    """Classifies and scores a query token against a field value."""
    
    def __init__(
        self, 
        threshold: float = 0.6,
        exact_match_boost: float = 2.0,
        partial_match_boost: float = 1.5
    ) -> None:
        """
        Initialize the fuzzy matcher.
        
        Args:
            threshold: Minimum similarity for a fuzzy match
            exact_match_boost: Multiplier for exact matches
            partial_match_boost: Multiplier for prefix and substring matches
        """
        self.threshold = threshold
        self.exact_match_boost = exact_match_boost
        self.partial_match_boost = partial_match_boost
    
    def classify(self, value: str, term: str) -> Optional[Tuple[MatchType, float]]:
        """
        Classify how a normalized term matches a normalized value.
        
        The first applicable class wins: exact, prefix, substring, then fuzzy.
        
        Args:
            value: Normalized field value
            term: Normalized query token
            
        Returns:
            Tuple of (match_type, score) or None when the term does not match
        """
        if value == term:
            return MatchType.EXACT, self.exact_match_boost * 10
        
        if value.startswith(term):
            return MatchType.PREFIX, self.partial_match_boost * 8
        
        if term in value:
            return MatchType.CONTAINS, self.partial_match_boost * 5
        
        score = similarity(value, term)
        if score >= self.threshold:
            return MatchType.FUZZY, score * 3
        
        return None
